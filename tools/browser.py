"""
Browser Tool — a small headless-browser surface for the browser strategy.

BrowserSession is the interface the strategy talks to; PlaywrightSession is
the real Chromium-backed implementation. Tests pass in fakes.
"""

from abc import ABC, abstractmethod

from playwright.sync_api import sync_playwright, Error as PlaywrightError

from config.settings import settings
from tools.headers import DESKTOP_CHROME_UA


# Telemetry, extensions and background throttling off; hide the automation flag
LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--no-first-run",
    "--no-default-browser-check",
    "--disable-blink-features=AutomationControlled",
    "--disable-extensions",
    "--disable-default-apps",
    "--disable-sync",
    "--disable-translate",
    "--disable-background-networking",
    "--disable-background-timer-throttling",
    "--disable-backgrounding-occluded-windows",
    "--disable-renderer-backgrounding",
    "--disable-client-side-phishing-detection",
    "--disable-domain-reliability",
    "--disable-component-extensions-with-background-pages",
    "--disable-hang-monitor",
    "--disable-ipc-flooding-protection",
    "--disable-prompt-on-repost",
    "--metrics-recording-only",
    "--no-pings",
    "--mute-audio",
    "--hide-scrollbars",
    "--password-store=basic",
    "--use-mock-keychain",
    "--force-color-profile=srgb",
]

VIEWPORT = {"width": 1920, "height": 1080}

CONTENT_READY_JS = "minLength => !!document.body && document.body.innerHTML.length > minLength"


class BrowserSession(ABC):
    """A single page in an isolated browser context."""

    @abstractmethod
    def set_extra_headers(self, headers: dict) -> None:
        raise NotImplementedError

    @abstractmethod
    def navigate(self, url: str, timeout_ms: int) -> None:
        """Load the URL; raise on timeout or navigation error."""
        raise NotImplementedError

    @abstractmethod
    def wait_for_content(self, min_length: int, timeout_ms: int) -> None:
        """Block until the body markup is longer than min_length; raise on timeout."""
        raise NotImplementedError

    @abstractmethod
    def query_text(self, selectors: list[str]) -> str:
        """First non-empty trimmed text across the selectors, in order, or ""."""
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError


class PlaywrightSession(BrowserSession):
    """Headless Chromium driven through Playwright's sync API."""

    def __init__(self, headless: bool = None):
        headless = settings.browser_headless if headless is None else headless
        self._playwright = sync_playwright().start()
        self._browser = None
        self._context = None
        try:
            self._browser = self._playwright.chromium.launch(headless=headless, args=LAUNCH_ARGS)
            self._context = self._browser.new_context(
                user_agent=DESKTOP_CHROME_UA,
                viewport=VIEWPORT,
                locale="en-US",
            )
            self.page = self._context.new_page()
        except Exception:
            self.close()
            raise

    def set_extra_headers(self, headers: dict) -> None:
        # Playwright sets the user agent on the context; sending it twice confuses some servers
        extra = {k: v for k, v in headers.items() if k.lower() != "user-agent"}
        self.page.set_extra_http_headers(extra)

    def navigate(self, url: str, timeout_ms: int) -> None:
        self.page.goto(url, wait_until="networkidle", timeout=timeout_ms)

    def wait_for_content(self, min_length: int, timeout_ms: int) -> None:
        self.page.wait_for_function(CONTENT_READY_JS, arg=min_length, timeout=timeout_ms)

    def query_text(self, selectors: list[str]) -> str:
        for selector in selectors:
            try:
                elements = self.page.query_selector_all(selector)
            except PlaywrightError:
                # Invalid selector, move on to the next candidate
                continue
            for element in elements:
                text = (element.text_content() or "").strip()
                if text:
                    return text
        return ""

    def close(self) -> None:
        for name, resource in (("context", self._context), ("browser", self._browser)):
            if resource is None:
                continue
            try:
                resource.close()
            except PlaywrightError as e:
                print(f"[Browser] Failed to close {name}: {e}")
        self._context = None
        self._browser = None

        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None


def launch_browser_session() -> BrowserSession:
    """Default session factory used by the browser strategy."""
    return PlaywrightSession()
