"""
Job application data model — the tracker record a user confirms and saves.
"""

from datetime import date
from typing import Literal, Optional
from pydantic import BaseModel, Field

from models.extraction import ExtractionResult


ApplicationStatus = Literal["applied", "interviewing", "offer", "rejected"]


class JobApplication(BaseModel):
    """A single application in the tracker."""

    id: Optional[int] = Field(default=None, description="Record id assigned by the store")
    company: str = Field(default="", description="Company name")
    role: str = Field(default="", description="Role applied for")
    status: ApplicationStatus = Field(default="applied")
    applied_date: str = Field(default_factory=lambda: date.today().isoformat())
    link: str = Field(default="", description="Job posting URL")
    location: str = Field(default="")
    notes: str = Field(default="")

    @classmethod
    def from_extraction(
        cls,
        result: ExtractionResult,
        status: ApplicationStatus = "applied",
        notes: str = "",
    ) -> "JobApplication":
        """
        Map extracted posting fields onto a new application form.

        The description goes in front of any notes the user already typed.
        """
        merged_notes = f"{result.description}\n\n{notes}".strip() if result.description else notes
        return cls(
            company=result.organization,
            role=result.role_title,
            status=status,
            link=result.posting_url,
            location=result.location,
            notes=merged_notes,
        )
