"""Job ORM — persists a job posting document.

Invariants:
    - id is a UUID primary key, exposed to clients as the "_id" string
    - details holds every client field except "_id" and "jobApplicantsNumber"
    - job_title/user_email/job_category mirror details for filtering (None when not a string)
    - Mirrored columns are unbounded Text so they always equal the document value
    - job_applicants_number is only ever incremented in SQL, never read-modify-written

Design Decisions:
    - JSON column for details: postings are free-form, no schema enforced
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, Integer, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from jobhorizon.db.base import Base


class Job(Base):
    """Job posting — owned by the user whose email is in user_email."""
    __tablename__ = "jobs"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    job_title: Mapped[str | None] = mapped_column(
        Text, nullable=True, index=True,
    )
    user_email: Mapped[str | None] = mapped_column(
        Text, nullable=True, index=True,
    )
    job_category: Mapped[str | None] = mapped_column(
        Text, nullable=True,
    )
    job_applicants_number: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    details: Mapped[dict] = mapped_column(
        JSON, nullable=False, default=dict,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
