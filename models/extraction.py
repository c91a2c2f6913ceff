"""
Extraction result model — the fields pulled from a single job posting.
"""

from pydantic import BaseModel, Field, field_validator


class ExtractionResult(BaseModel):
    """Job posting fields produced by one extraction strategy.

    Unknown fields are always the empty string, never None. ``source`` stays
    empty until a strategy fills the result in, which keeps "strategy ran but
    found nothing" apart from "no strategy has run".
    """

    organization: str = Field(default="", description="Hiring company name")
    role_title: str = Field(default="", description="Job title")
    location: str = Field(default="", description="Job location")
    description: str = Field(default="", description="Plain-text job description")
    posting_url: str = Field(default="", description="URL the extraction started from")
    posting_id: str = Field(default="", description="Numeric LinkedIn job id")
    salary: str = Field(default="")
    employment_type: str = Field(default="", description="Full-time, Contract, etc.")
    experience_level: str = Field(default="")
    posted_date: str = Field(default="")
    source: str = Field(default="", description="Name of the strategy that produced this result")
    needs_manual_completion: bool = Field(default=False)

    @field_validator(
        "organization", "role_title", "location", "description", "posting_url",
        "posting_id", "salary", "employment_type", "experience_level", "posted_date",
        "source",
        mode="before",
    )
    @classmethod
    def _coerce_to_string(cls, value):
        # JSON payloads hand us numbers, bools and nulls for these fields
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        if isinstance(value, (list, tuple)):
            return ", ".join(str(v).strip() for v in value if v is not None and str(v).strip())
        return str(value).strip()

    def is_usable(self) -> bool:
        """A result is usable when both the company and the role are known."""
        return bool(self.organization.strip()) and bool(self.role_title.strip())
