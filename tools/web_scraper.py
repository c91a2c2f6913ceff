"""
Web Scraper Tool — GETs posting pages over httpx.
Never raises for HTTP or transport errors; every call returns a result dict.
"""

import time

import httpx

from config.settings import settings
from tools.headers import DESKTOP_HEADERS


def _page_result(url: str, html: str = "", status_code: int = 0, error: str = "") -> dict:
    return {
        "success": not error,
        "html": html,
        "status_code": status_code,
        "error": error,
        "url": url,
    }


def fetch_page(
    url: str,
    headers: dict = None,
    timeout: int = None,
    max_retries: int = 1,
) -> dict:
    """
    Fetch one page with the given header set.

    Args:
        url: Page to fetch.
        headers: Request headers (defaults to a plain desktop browser set).
        timeout: Seconds before giving up (defaults to settings.request_timeout).
        max_retries: Attempts before giving up. The strategies rotate headers
            or URLs instead of retrying, so this defaults to 1.

    Returns:
        dict with keys:
            - success (bool): True only for an HTTP 200.
            - html (str): Response body ("" on failure).
            - status_code (int): HTTP status, or 0 when no response arrived.
            - error (str): Failure reason ("" on success).
            - url (str): The requested URL.
    """
    timeout = timeout or settings.request_timeout
    attempts = max(1, max_retries)
    outcome = None

    for attempt in range(attempts):
        if attempt:
            time.sleep(2 ** (attempt - 1))  # Exponential backoff

        try:
            with httpx.Client(
                headers=headers or DESKTOP_HEADERS,
                timeout=timeout,
                follow_redirects=True,
            ) as client:
                response = client.get(url)
        except httpx.TimeoutException:
            outcome = _page_result(url, error=f"Timeout after {timeout}s for {url}")
            continue
        except httpx.HTTPError as e:
            outcome = _page_result(url, error=f"HTTP error for {url}: {e}")
            continue

        if response.status_code == 200:
            return _page_result(url, html=response.text, status_code=200)
        outcome = _page_result(
            url,
            status_code=response.status_code,
            error=f"HTTP {response.status_code} for {url}",
        )

    return outcome
