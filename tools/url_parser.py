"""
URL Parser Tool — pulls the posting id and a title hint out of LinkedIn job URLs.
"""

import re
from typing import Optional
from urllib.parse import urlparse, unquote


POSTING_ID_PATTERN = re.compile(r"linkedin\.com/jobs/view/(\d+)")

# Path segments that are part of the URL shape, not the job title
PATH_KEYWORDS = {"jobs", "view"}

CANONICAL_POSTING_URL = "https://www.linkedin.com/jobs/view/{posting_id}"


def extract_posting_id(url: str) -> Optional[str]:
    """
    Extract the numeric posting id from a LinkedIn job URL.

    Example: https://www.linkedin.com/jobs/view/4257191625 -> "4257191625"
    """
    if not url:
        return None
    match = POSTING_ID_PATTERN.search(url)
    return match.group(1) if match else None


def canonical_posting_url(posting_id: str) -> str:
    return CANONICAL_POSTING_URL.format(posting_id=posting_id)


def _title_case(text: str) -> str:
    # Uppercase the first letter of every word; the rest keeps its case
    return " ".join(word[:1].upper() + word[1:] for word in text.split())


def extract_title_from_url(url: str) -> Optional[str]:
    """
    Derive a job title from the URL path.

    LinkedIn sometimes appends a slug after the id, e.g.
    /jobs/view/4257191625/senior-front-end-developer -> "Senior Front End Developer"
    """
    try:
        path = urlparse(url).path
    except ValueError:
        return None

    for part in path.split("/"):
        if not part or part in PATH_KEYWORDS or part.isdigit():
            continue
        title = _title_case(unquote(part).replace("-", " "))
        if title:
            return title
    return None
