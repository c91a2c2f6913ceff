"""
URL Heuristic Fallback — the last resort when every strategy came back empty.
"""

from models.extraction import ExtractionResult
from tools.url_parser import extract_title_from_url


PLACEHOLDER_ROLE = "Job from LinkedIn"

MANUAL_COMPLETION_NOTE = (
    "LinkedIn job posting (ID: {posting_id}). Automatic extraction was incomplete, "
    "so please fill in the company name and other details manually."
)


def extract_from_url(url: str, posting_id: str) -> ExtractionResult:
    """
    Build a placeholder result from the URL alone. Never fails.

    The role title comes from the first path segment that is neither a fixed
    keyword nor numeric, so /jobs/view/4257191625/software-engineer-ii gives
    "Software Engineer Ii".
    """
    return ExtractionResult(
        organization="",
        role_title=extract_title_from_url(url) or PLACEHOLDER_ROLE,
        description=MANUAL_COMPLETION_NOTE.format(posting_id=posting_id),
        posting_url=url,
        posting_id=posting_id,
        source="url_heuristic",
        needs_manual_completion=True,
    )
