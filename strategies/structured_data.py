"""
Structured Data Strategy — reads the JSON-LD JobPosting block embedded in the page.
"""

from models.errors import NoStructuredData
from models.extraction import ExtractionResult
from strategies.base import ExtractionStrategy
from tools.headers import DESKTOP_HEADERS
from tools.text_extractor import clean_description, extract_json_ld_blocks, find_job_posting
from tools.web_scraper import fetch_page


def _name_of(value) -> str:
    if isinstance(value, dict):
        return value.get("name") or ""
    if isinstance(value, str):
        return value
    return ""


def _location_of(posting: dict) -> str:
    job_location = posting.get("jobLocation")
    if isinstance(job_location, list):
        job_location = job_location[0] if job_location else None

    if isinstance(job_location, dict):
        address = job_location.get("address")
        if isinstance(address, dict) and address.get("addressLocality"):
            return address["addressLocality"]

    if posting.get("location"):
        return _name_of(posting["location"]) or str(posting["location"])

    if posting.get("jobLocationType") == "TELECOMMUTE":
        return "Remote"
    return ""


def _salary_of(posting: dict) -> str:
    base_salary = posting.get("baseSalary")
    if not base_salary:
        return posting.get("salary") or ""
    if not isinstance(base_salary, dict):
        return str(base_salary)

    value = base_salary.get("value")
    currency = base_salary.get("currency") or ""
    if isinstance(value, dict):
        unit = value.get("unitText") or ""
        if value.get("minValue") is not None and value.get("maxValue") is not None:
            amount = f"{value['minValue']}-{value['maxValue']}"
        else:
            amount = str(value.get("value") or "")
        return " ".join(part for part in (currency, amount, unit) if part)
    if value is not None:
        return " ".join(part for part in (currency, str(value)) if part)
    return ""


def parse_job_posting(posting: dict) -> dict:
    """
    Map a schema.org JobPosting object onto extraction fields.

    Args:
        posting: A JSON-LD object whose @type is JobPosting.

    Returns:
        dict of extraction fields with "" for anything missing.
    """
    organization = _name_of(posting.get("hiringOrganization")) or posting.get("employerName") or ""
    description = posting.get("description") or posting.get("jobDescription") or ""

    return {
        "organization": organization,
        "role_title": posting.get("title") or posting.get("jobTitle") or "",
        "location": _location_of(posting),
        "description": clean_description(description) if isinstance(description, str) else description,
        "salary": _salary_of(posting),
        "employment_type": posting.get("employmentType") or "",
        "experience_level": _name_of(posting.get("experienceRequirements")) or "",
        "posted_date": posting.get("datePosted") or "",
    }


class StructuredDataStrategy(ExtractionStrategy):
    """Strategy 4: one page fetch, then the first JobPosting JSON-LD block."""

    name = "structured_data"
    label = "Structured data (JSON-LD)"

    def __init__(self, timeout: int = None):
        self.timeout = timeout

    def attempt_extract(self, url: str, posting_id: str) -> ExtractionResult:
        result = fetch_page(url, headers=DESKTOP_HEADERS, timeout=self.timeout)
        if not result["success"]:
            raise NoStructuredData(f"Failed to fetch page: {result['error']}")

        blocks = extract_json_ld_blocks(result["html"])
        print(f"[JSON-LD] Found {len(blocks)} parseable block(s)")

        for block in blocks:
            posting = find_job_posting(block)
            if posting is not None:
                fields = parse_job_posting(posting)
                print(f"[JSON-LD] ✅ JobPosting for company={fields['organization']!r} role={fields['role_title']!r}")
                return self.build_result(url, posting_id, **fields)

        raise NoStructuredData("No JobPosting structured data found")
