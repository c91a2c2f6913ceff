"""
Mobile API Strategy — probes LinkedIn's JSON job-posting endpoints.
"""

from models.errors import NoMobileData
from models.extraction import ExtractionResult
from strategies.base import ExtractionStrategy
from tools.api_fetcher import build_mobile_endpoints, fetch_json, parse_mobile_job_posting


class MobileApiStrategy(ExtractionStrategy):
    """Strategy 3: undocumented mobile endpoints, read field by field."""

    name = "mobile_api"
    label = "Mobile API probe"

    def __init__(self, timeout: int = None):
        self.timeout = timeout

    def attempt_extract(self, url: str, posting_id: str) -> ExtractionResult:
        for endpoint in build_mobile_endpoints(posting_id):
            print(f"[MobileAPI] 🔌 Trying {endpoint}")
            result = fetch_json(endpoint, timeout=self.timeout)

            if not result["success"]:
                print(f"[MobileAPI] {result['error']}")
                continue

            fields = parse_mobile_job_posting(result["data"])
            if fields:
                print(f"[MobileAPI] ✅ Got company={fields['organization']!r} role={fields['role_title']!r}")
                return self.build_result(url, posting_id, **fields)

            print("[MobileAPI] Response had no title or company name")

        raise NoMobileData(f"No mobile API endpoint returned job data for {posting_id}")
