"""Job and Application Schemas — request bodies and action results.

Invariants:
    - Job bodies are free-form JSON objects (routes take dict[str, Any])
    - ApplicationCreate requires jobId and application.applicantUserEmail; all else passes through
    - ActionResult is the {success, message} envelope of every write endpoint
"""

from pydantic import BaseModel, ConfigDict, Field


class ApplicantDetails(BaseModel):
    """The applicant block of an application."""
    model_config = ConfigDict(extra="allow")

    applicantUserEmail: str = Field(min_length=1, max_length=320)


class ApplicationCreate(BaseModel):
    """Application submitted to POST /apply-job."""
    model_config = ConfigDict(extra="allow")

    jobId: str = Field(min_length=1, max_length=64)
    jobCategory: str | None = None
    application: ApplicantDetails

    def to_document(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ActionResult(BaseModel):
    """Outcome of a write endpoint."""
    success: bool
    message: str
    insertedId: str | None = None
