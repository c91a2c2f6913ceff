"""
Base Strategy — the common shape every extraction technique follows.
"""

from abc import ABC, abstractmethod

from models.extraction import ExtractionResult


class ExtractionStrategy(ABC):
    """One self-contained way of getting posting fields for a job id.

    Subclasses return an ExtractionResult or raise their StrategyError. They
    hold configuration only, so a single instance can serve any number of
    postings.
    """

    name: str = "base"
    label: str = "Base strategy"

    @abstractmethod
    def attempt_extract(self, url: str, posting_id: str) -> ExtractionResult:
        raise NotImplementedError

    def build_result(self, url: str, posting_id: str, **fields) -> ExtractionResult:
        """Wrap extracted fields with the posting reference and this strategy's name."""
        return ExtractionResult(
            posting_url=url,
            posting_id=posting_id,
            source=self.name,
            **fields,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
