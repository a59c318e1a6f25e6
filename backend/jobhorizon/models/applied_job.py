"""AppliedJob ORM — persists one job application document.

Invariants:
    - (applicant_email, job_id) is unique: one application per applicant per job
    - job_id is the canonical UUID string of the client's "jobId", not a foreign key
    - applicant_email/job_category are unbounded Text copies of the document values
    - Rows are never updated or deleted by the API
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from jobhorizon.db.base import Base


class AppliedJob(Base):
    """Application submitted by applicant_email for the job identified by job_id."""
    __tablename__ = "applied_jobs"
    __table_args__ = (
        UniqueConstraint(
            "applicant_email", "job_id", name="uq_applied_jobs_applicant_job",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    job_id: Mapped[str] = mapped_column(
        String(64), nullable=False, index=True,
    )
    applicant_email: Mapped[str] = mapped_column(
        Text, nullable=False, index=True,
    )
    job_category: Mapped[str | None] = mapped_column(
        Text, nullable=True,
    )
    details: Mapped[dict] = mapped_column(
        JSON, nullable=False, default=dict,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
