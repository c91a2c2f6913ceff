"""
LangGraph Extraction State — shared state that flows through the strategy chain.
"""

from typing import Optional, TypedDict, Annotated
from models.extraction import ExtractionResult


def merge_lists(left: list, right: list) -> list:
    """Reducer that merges two lists (used for accumulating results across strategies)."""
    return left + right


class ExtractionState(TypedDict):
    """
    Shared state for the extraction workflow.
    Each strategy node reads the posting and writes back its result.
    """

    # Input: the URL the user pasted
    url: str

    # Numeric posting id parsed from the URL before the graph runs
    posting_id: str

    # Latest strategy output (None until a strategy returns something)
    result: Optional[ExtractionResult]

    # Names of the strategies that ran, in order
    attempted: Annotated[list[str], merge_lists]

    # Accumulated strategy failures
    errors: Annotated[list[str], merge_lists]
