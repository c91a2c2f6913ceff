"""
Browser Strategy — renders the posting in headless Chromium and reads the DOM.

Navigation is retried with randomized pauses; fields are read from ordered,
deliberately overlapping selector lists so small markup changes still hit
something.
"""

import random
import time

from config.settings import settings
from models.errors import NavigationFailed
from models.extraction import ExtractionResult
from strategies.base import ExtractionStrategy
from tools.browser import launch_browser_session
from tools.headers import generate_dynamic_headers, random_delay_seconds


# Most specific first, generic class-substring matches last
SELECTORS = {
    "organization": [
        ".job-details-jobs-unified-top-card__company-name a",
        ".job-details-jobs-unified-top-card__company-name",
        '[data-test-id="company-name"]',
        ".topcard__org-name-link",
        ".job-details-jobs-unified-top-card__company-name-container a",
        ".job-details-jobs-unified-top-card__company-name-container",
        '[class*="company"][class*="name"]',
        '[class*="company-name"]',
        'a[data-test-id="company-name"]',
        ".job-details-jobs-unified-top-card__company-name span",
        ".job-details-jobs-unified-top-card__company-name div",
        ".job-details-jobs-unified-top-card__company-name-container span",
        ".job-details-jobs-unified-top-card__company-name-container *",
        '[class*="company"]',
        '[class*="organization"]',
        '[class*="employer"]',
    ],
    "role_title": [
        '[data-test-id="job-title"]',
        ".job-details-jobs-unified-top-card__job-title",
        ".top-card-layout__title",
        "h1",
        ".job-details-jobs-unified-top-card__job-title-container h1",
        '[class*="job-title"]',
        '[class*="title"] h1',
        '[class*="title"] h2',
        "h1[class*=\"title\"]",
        "h2[class*=\"title\"]",
        '[class*="position"]',
        '[class*="role"]',
        ".job-details-jobs-unified-top-card__job-title-container *",
        '[data-test-id="job-title"] *',
    ],
    "location": [
        '[data-test-id="job-location"]',
        ".job-details-jobs-unified-top-card__job-location",
        ".topcard__flavor--bullet",
        '[class*="job-location"]',
        '[class*="location"]',
        '[class*="address"]',
        '[class*="city"]',
        '[class*="place"]',
    ],
    "description": [
        ".job-description__text",
        ".show-more-less-html",
        '[data-test-id="job-description"]',
        ".job-details-jobs-unified-top-card__job-description",
        ".job-details-jobs-unified-top-card__job-description-content",
        '[class*="job-description"]',
        '[class*="description"]',
        '[class*="content"]',
        '[class*="details"]',
        '[class*="summary"]',
    ],
}


class BrowserStrategy(ExtractionStrategy):
    """Strategy 1: headless browser with stealth flags and navigation retries."""

    name = "browser"
    label = "Automated browser extraction"

    def __init__(
        self,
        session_factory=None,
        rng: random.Random = None,
        sleep=time.sleep,
        max_attempts: int = None,
        navigation_timeout_ms: int = None,
        content_wait_timeout_ms: int = None,
        min_content_length: int = None,
    ):
        self.session_factory = session_factory or launch_browser_session
        self.rng = rng or random.Random()
        self.sleep = sleep
        self.max_attempts = max_attempts or settings.max_navigation_attempts
        self.navigation_timeout_ms = navigation_timeout_ms or settings.navigation_timeout_ms
        self.content_wait_timeout_ms = content_wait_timeout_ms or settings.content_wait_timeout_ms
        self.min_content_length = min_content_length or settings.min_content_length

    def attempt_extract(self, url: str, posting_id: str) -> ExtractionResult:
        session = self.session_factory()
        try:
            session.set_extra_headers(generate_dynamic_headers(self.rng))
            self._navigate_with_retry(session, url)

            fields = {
                field: session.query_text(selectors)
                for field, selectors in SELECTORS.items()
            }
            print(
                f"[Browser] Extracted company={fields['organization']!r} "
                f"role={fields['role_title']!r} location={fields['location']!r}"
            )
            return self.build_result(url, posting_id, **fields)
        finally:
            session.close()

    def _navigate_with_retry(self, session, url: str) -> None:
        last_error = None

        for attempt in range(1, self.max_attempts + 1):
            delay = random_delay_seconds(
                self.rng, settings.nav_delay_min_ms, settings.nav_delay_max_ms
            )
            print(f"[Browser] Navigation attempt {attempt}/{self.max_attempts} (waiting {delay:.1f}s)")
            self.sleep(delay)

            try:
                session.navigate(url, timeout_ms=self.navigation_timeout_ms)
                session.wait_for_content(
                    self.min_content_length, timeout_ms=self.content_wait_timeout_ms
                )
                return
            except Exception as e:
                last_error = e
                print(f"[Browser] Navigation attempt {attempt} failed: {e}")

        raise NavigationFailed(
            f"Navigation failed after {self.max_attempts} attempts: {last_error}"
        ) from last_error
