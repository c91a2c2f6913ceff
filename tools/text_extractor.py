"""
Text Extractor Tool — pulls job fields out of raw posting HTML.
Uses regex alternatives for loose markup and BeautifulSoup for cleanup and
JSON-LD blocks.
"""

import json
import re
from bs4 import BeautifulSoup


# Ordered alternatives per field; the first pattern that matches wins
FIELD_PATTERNS = {
    "organization": [
        re.compile(r'<div[^>]*class="[^"]*company-name[^"]*"[^>]*>.*?<a[^>]*>([^<]+)</a>', re.I),
        re.compile(r'<div[^>]*class="[^"]*company[^"]*"[^>]*>([^<]+)</div>', re.I),
        re.compile(r"company[^>]*>([^<]+)</[^>]*>", re.I),
    ],
    "role_title": [
        re.compile(r"<h1[^>]*>([^<]+)</h1>", re.I),
        re.compile(r'<div[^>]*class="[^"]*job-title[^"]*"[^>]*>([^<]+)</div>', re.I),
        re.compile(r"job-title[^>]*>([^<]+)</[^>]*>", re.I),
    ],
    "location": [
        re.compile(r'<div[^>]*class="[^"]*location[^"]*"[^>]*>([^<]+)</div>', re.I),
        re.compile(r"location[^>]*>([^<]+)</[^>]*>", re.I),
    ],
    "description": [
        re.compile(r'<div[^>]*class="[^"]*description[^"]*"[^>]*>([\s\S]*?)</div>', re.I),
        re.compile(r"job-description[^>]*>([\s\S]*?)</[^>]*>", re.I),
    ],
}

# Looser keyword patterns for the alternative-endpoint pass
LOOSE_FIELD_PATTERNS = {
    "organization": [
        re.compile(r"company[^>]*>([^<]+)</[^>]*>", re.I),
        re.compile(r"organization[^>]*>([^<]+)</[^>]*>", re.I),
        re.compile(r"employer[^>]*>([^<]+)</[^>]*>", re.I),
    ],
    "role_title": [
        re.compile(r"job-title[^>]*>([^<]+)</[^>]*>", re.I),
        re.compile(r"position[^>]*>([^<]+)</[^>]*>", re.I),
        re.compile(r"role[^>]*>([^<]+)</[^>]*>", re.I),
    ],
    "location": [
        re.compile(r"location[^>]*>([^<]+)</[^>]*>", re.I),
        re.compile(r"address[^>]*>([^<]+)</[^>]*>", re.I),
        re.compile(r"city[^>]*>([^<]+)</[^>]*>", re.I),
    ],
}

TAG_PATTERN = re.compile(r"<[^>]*>")


def first_match(html: str, patterns: list) -> str:
    """Return the first capture group of the first pattern that matches, trimmed."""
    if not html:
        return ""
    for pattern in patterns:
        match = pattern.search(html)
        if match:
            value = match.group(1).strip()
            if value:
                return value
    return ""


def strip_tags(text: str) -> str:
    return TAG_PATTERN.sub("", text or "").strip()


def clean_description(html_fragment: str) -> str:
    """
    Turn an HTML description fragment into plain text.

    Tags are stripped, entities decoded, and whitespace collapsed, e.g.
    "<div>Build &amp; ship &lt;code&gt;</div>" -> "Build & ship <code>".
    """
    if not html_fragment:
        return ""

    soup = BeautifulSoup(html_fragment, "html.parser")
    text = soup.get_text()

    # Collapse all whitespace (including &nbsp;) into single spaces
    return re.sub(r"\s+", " ", text).strip()


def extract_fields(html: str, patterns: dict = None) -> dict:
    """
    Run the per-field pattern lists against raw HTML.

    Args:
        html: Raw page HTML.
        patterns: Field name -> ordered regex list (defaults to FIELD_PATTERNS).

    Returns:
        dict of field name -> extracted value ("" when nothing matched).
    """
    patterns = patterns or FIELD_PATTERNS
    fields = {}
    for name, field_patterns in patterns.items():
        value = first_match(html, field_patterns)
        if name == "description":
            value = clean_description(value)
        else:
            value = strip_tags(value)
        fields[name] = value
    return fields


def extract_json_ld_blocks(html: str) -> list:
    """
    Parse every <script type="application/ld+json"> block in the page.

    Blocks that are not valid JSON are skipped.
    """
    if not html:
        return []

    soup = BeautifulSoup(html, "html.parser")
    blocks = []
    for script in soup.find_all("script", attrs={"type": "application/ld+json"}):
        raw = script.string or script.get_text()
        if not raw or not raw.strip():
            continue
        try:
            blocks.append(json.loads(raw))
        except json.JSONDecodeError as e:
            print(f"[JSON-LD] Skipping unparseable block: {e}")
    return blocks


def _is_job_posting(node: dict) -> bool:
    declared = node.get("@type")
    if isinstance(declared, list):
        return "JobPosting" in declared
    return declared == "JobPosting"


def find_job_posting(data):
    """Return the first JobPosting object inside a parsed JSON-LD value, or None."""
    if isinstance(data, list):
        for item in data:
            found = find_job_posting(item)
            if found is not None:
                return found
        return None

    if not isinstance(data, dict):
        return None

    if _is_job_posting(data):
        return data

    if "@graph" in data:
        return find_job_posting(data["@graph"])

    return None
