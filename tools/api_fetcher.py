"""
API Fetcher Tool — fetches JSON from LinkedIn's mobile job-posting endpoints.
Handles JSON API responses that return structured job data directly.
"""

import httpx
from config.settings import settings
from tools.headers import MOBILE_API_HEADERS


MOBILE_API_BASE = "https://www.linkedin.com/jobs/api/jobPosting/{posting_id}"

# Query variants asking for progressively more fields
MOBILE_API_QUERIES = [
    "",
    "?includeInsights=true",
    "?includeInsights=true&includeCompany=true",
]


def build_mobile_endpoints(posting_id: str) -> list[str]:
    base = MOBILE_API_BASE.format(posting_id=posting_id)
    return [f"{base}{query}" for query in MOBILE_API_QUERIES]


def fetch_json(
    api_url: str,
    headers: dict = None,
    timeout: int = None,
) -> dict:
    """
    Fetch a JSON document from an API endpoint.

    Args:
        api_url: The API endpoint URL.
        headers: Request headers (defaults to the mobile API header set).
        timeout: Request timeout in seconds.

    Returns:
        dict with keys:
            - success (bool)
            - data: Parsed JSON body (empty dict on failure)
            - error (str): Error message if failed
    """
    timeout = timeout or settings.request_timeout

    try:
        with httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers=headers or MOBILE_API_HEADERS,
        ) as client:
            resp = client.get(api_url)

            if resp.status_code == 200:
                return {
                    "success": True,
                    "data": resp.json(),
                    "error": "",
                }
            else:
                return {
                    "success": False,
                    "data": {},
                    "error": f"API returned HTTP {resp.status_code}",
                }

    except (httpx.HTTPError, ValueError) as e:
        # ValueError covers bodies that are not JSON
        return {
            "success": False,
            "data": {},
            "error": str(e),
        }


def _first_present(data: dict, *paths: str):
    """Return the first non-empty value among dotted paths like 'company.name'."""
    for path in paths:
        value = data
        for key in path.split("."):
            if not isinstance(value, dict):
                value = None
                break
            value = value.get(key)
        if value not in (None, "", [], {}):
            return value
    return ""


def parse_mobile_job_posting(api_response) -> dict:
    """
    Map a mobile API job-posting payload onto extraction fields.

    Args:
        api_response: Parsed JSON from a jobPosting endpoint.

    Returns:
        dict of extraction fields, or an empty dict when the payload carries
        neither a title nor a company name.
    """
    if not isinstance(api_response, dict):
        return {}

    fields = {
        "organization": _first_present(api_response, "companyName", "company.name"),
        "role_title": _first_present(api_response, "title", "jobTitle"),
        "location": _first_present(api_response, "location", "formattedLocation"),
        "description": _first_present(api_response, "description.text", "description", "formattedDescription"),
        "salary": _first_present(api_response, "salary"),
        "employment_type": _first_present(api_response, "employmentType"),
        "experience_level": _first_present(api_response, "seniorityLevel"),
        "posted_date": _first_present(api_response, "postedDate"),
    }
    if not (fields["organization"] or fields["role_title"]):
        return {}
    return fields
