"""
Request header profiles and randomized header/delay generation.

Random choices take an explicit random.Random so callers (and tests) control
the seed.
"""

import random


DESKTOP_CHROME_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

MOBILE_SAFARI_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) "
    "AppleWebKit/605.1.15 (KHTML, like Gecko) "
    "Version/17.0 Mobile/15E148 Safari/604.1"
)

GOOGLEBOT_UA = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"

HTML_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"

USER_AGENT_POOL = [
    DESKTOP_CHROME_UA,
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.0 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
]

REFERER_POOL = [
    "https://www.google.com/",
    "https://www.bing.com/",
    "https://www.linkedin.com/jobs/",
    "https://www.linkedin.com/",
    "https://www.google.com/search?q=linkedin+job",
]

# Tried in this order by the rotating-header fetch strategy
HEADER_PROFILES = [
    {
        "name": "Standard Browser Headers",
        "headers": {
            "User-Agent": DESKTOP_CHROME_UA,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
            "Accept-Encoding": "gzip, deflate",
            "DNT": "1",
            "Connection": "keep-alive",
            "Upgrade-Insecure-Requests": "1",
            "Sec-Fetch-Dest": "document",
            "Sec-Fetch-Mode": "navigate",
            "Sec-Fetch-Site": "none",
            "Cache-Control": "max-age=0",
        },
    },
    {
        "name": "Mobile Headers",
        "headers": {
            "User-Agent": MOBILE_SAFARI_UA,
            "Accept": HTML_ACCEPT,
            "Accept-Language": "en-US,en;q=0.9",
            "Accept-Encoding": "gzip, deflate",
            "X-Requested-With": "XMLHttpRequest",
        },
    },
    {
        "name": "Bot Headers",
        "headers": {
            "User-Agent": GOOGLEBOT_UA,
            "Accept": HTML_ACCEPT,
            "Accept-Language": "en-US,en;q=0.9",
        },
    },
]

MOBILE_API_HEADERS = {
    "User-Agent": MOBILE_SAFARI_UA,
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "en-US,en;q=0.9",
    "X-Requested-With": "XMLHttpRequest",
    "Referer": "https://www.linkedin.com/",
}

# Plain desktop request, used for the single JSON-LD page fetch
DESKTOP_HEADERS = {
    "User-Agent": DESKTOP_CHROME_UA,
    "Accept": HTML_ACCEPT,
    "Accept-Language": "en-US,en;q=0.9",
}

# Full desktop set claiming to come from a search result
SEARCH_REFERRAL_HEADERS = {
    **HEADER_PROFILES[0]["headers"],
    "Referer": "https://www.google.com/",
}


def generate_dynamic_headers(rng: random.Random) -> dict:
    """Build a browser-like header set with a random user agent and referrer."""
    return {
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate, br",
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
        "Sec-Fetch-Dest": "document",
        "Sec-Fetch-Mode": "navigate",
        "Sec-Fetch-Site": "none",
        "Upgrade-Insecure-Requests": "1",
        "User-Agent": rng.choice(USER_AGENT_POOL),
        "Referer": rng.choice(REFERER_POOL),
    }


def random_delay_seconds(rng: random.Random, min_ms: int = 1000, max_ms: int = 3000) -> float:
    """Pick a pause before the next navigation, in seconds."""
    return rng.uniform(min_ms, max_ms) / 1000.0
