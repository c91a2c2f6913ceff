"""
Alternative Endpoint Strategy — re-requests the canonical posting through URL
variants with a search-engine referrer, then matches loosely across the page.
"""

from models.errors import NoAlternativeData
from models.extraction import ExtractionResult
from strategies.base import ExtractionStrategy
from tools.headers import SEARCH_REFERRAL_HEADERS
from tools.text_extractor import extract_fields, LOOSE_FIELD_PATTERNS
from tools.url_parser import canonical_posting_url
from tools.web_scraper import fetch_page


TRACKING_QUERY = "?trk=public_jobs_jserp-result_search-card"


def build_alternative_urls(posting_id: str) -> list[str]:
    canonical = canonical_posting_url(posting_id)
    return [
        canonical,
        f"{canonical}/",
        f"{canonical}{TRACKING_QUERY}",
        f"{canonical}{TRACKING_QUERY}&originalSubdomain=www",
    ]


class AlternativeEndpointStrategy(ExtractionStrategy):
    """Strategy 5: URL variants and referrer spoofing with looser patterns."""

    name = "alternative"
    label = "Alternative endpoint probe"

    def __init__(self, timeout: int = None):
        self.timeout = timeout

    def attempt_extract(self, url: str, posting_id: str) -> ExtractionResult:
        for endpoint in build_alternative_urls(posting_id):
            print(f"[AltEndpoints] Trying {endpoint}")
            result = fetch_page(endpoint, headers=SEARCH_REFERRAL_HEADERS, timeout=self.timeout)

            if not result["success"]:
                print(f"[AltEndpoints] {result['error']}")
                continue

            fields = extract_fields(result["html"], LOOSE_FIELD_PATTERNS)
            if fields["organization"] or fields["role_title"]:
                print(
                    f"[AltEndpoints] ✅ {endpoint} gave company={fields['organization']!r} "
                    f"role={fields['role_title']!r}"
                )
                return self.build_result(url, posting_id, **fields)

        raise NoAlternativeData(f"No alternative endpoint returned job data for {posting_id}")
