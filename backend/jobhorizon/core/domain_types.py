"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - JobId wraps a UUID — path strings are parsed once, at the route boundary
    - WriteResult mirrors what a document store reports after a write
    - Identity is immutable once a token has been verified
    - Document field names live here, never as scattered string literals
"""

from dataclasses import dataclass, field
from typing import Any, NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

JobId = NewType("JobId", UUID)
ApplicationId = NewType("ApplicationId", UUID)


# ─── Document Fields ─────────────────────────────────────────────

ID_FIELD = "_id"
JOB_TITLE_FIELD = "jobTitle"
JOB_OWNER_FIELD = "userEmail"
JOB_CATEGORY_FIELD = "jobCategory"
JOB_APPLICANTS_FIELD = "jobApplicantsNumber"
APPLICATION_JOB_ID_FIELD = "jobId"
APPLICATION_DETAILS_FIELD = "application"
APPLICANT_EMAIL_FIELD = "applicantUserEmail"


def parse_job_id(raw: str) -> JobId | None:
    """Parse a path/body id. Returns None for anything that is not a UUID."""
    try:
        return JobId(UUID(raw))
    except (TypeError, ValueError, AttributeError):
        return None


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Identity:
    """Verified token claims. email is None when the token carried no email claim."""
    email: str | None
    claims: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class WriteResult:
    """Outcome of a single store write."""
    acknowledged: bool = True
    matched_count: int = 0
    modified_count: int = 0
    deleted_count: int = 0
    inserted_id: str | None = None
    upserted_id: str | None = None
