"""
Extraction errors.

InvalidUrl is the only error the orchestrator lets escape. Every StrategyError
is recovered inside the chain and the next strategy runs.
"""


class ExtractionError(Exception):
    """Base class for all extraction failures."""


class InvalidUrl(ExtractionError):
    """The URL does not contain a /jobs/view/<numeric-id> posting path."""

    def __init__(self, url: str):
        super().__init__(f"Invalid LinkedIn job URL: {url}")
        self.url = url


class StrategyError(ExtractionError):
    """A single strategy could not produce data."""

    strategy: str = "unknown"

    def __init__(self, message: str, strategy: str = None):
        super().__init__(message)
        if strategy:
            self.strategy = strategy


class NavigationFailed(StrategyError):
    strategy = "browser"


class AllProfilesFailed(StrategyError):
    strategy = "fetch"


class NoMobileData(StrategyError):
    strategy = "mobile_api"


class NoStructuredData(StrategyError):
    strategy = "structured_data"


class NoAlternativeData(StrategyError):
    strategy = "alternative"
