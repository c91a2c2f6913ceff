"""
Fetch Strategy — plain HTTP GETs under rotating header profiles.
"""

from models.errors import AllProfilesFailed
from models.extraction import ExtractionResult
from strategies.base import ExtractionStrategy
from tools.headers import HEADER_PROFILES
from tools.text_extractor import extract_fields, FIELD_PATTERNS
from tools.web_scraper import fetch_page


class FetchStrategy(ExtractionStrategy):
    """Strategy 2: desktop, mobile Safari and crawler identities, in that order."""

    name = "fetch"
    label = "Direct fetch with rotating headers"

    def __init__(self, profiles: list[dict] = None, timeout: int = None):
        self.profiles = profiles or HEADER_PROFILES
        self.timeout = timeout

    def attempt_extract(self, url: str, posting_id: str) -> ExtractionResult:
        for profile in self.profiles:
            print(f"[Fetch] Trying {profile['name']}...")
            result = fetch_page(url, headers=profile["headers"], timeout=self.timeout)

            if not result["success"]:
                print(f"[Fetch] {profile['name']} failed: {result['error']}")
                continue

            fields = extract_fields(result["html"], FIELD_PATTERNS)
            if fields["organization"] or fields["role_title"]:
                print(
                    f"[Fetch] ✅ {profile['name']} found company={fields['organization']!r} "
                    f"role={fields['role_title']!r}"
                )
                return self.build_result(url, posting_id, **fields)

            print(f"[Fetch] {profile['name']} returned a page without job fields")

        raise AllProfilesFailed(f"All {len(self.profiles)} header profiles failed for {url}")
