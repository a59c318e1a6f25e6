"""Application Store — job applications and the applicant counter they drive.

Invariants:
    - submit() inserts the application and increments the job's applicant counter
      in ONE transaction: either both happen or neither does
    - job_id is always stored in canonical UUID form, so (applicant, job) uniqueness
      holds across spellings of the same id
    - A unique-constraint hit on insert surfaces as DuplicateApplicationError
    - Applications are never updated or deleted here
"""

import logging
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobhorizon.core.domain_types import (
    ID_FIELD, JOB_CATEGORY_FIELD, APPLICATION_JOB_ID_FIELD,
    APPLICATION_DETAILS_FIELD, APPLICANT_EMAIL_FIELD,
    WriteResult, parse_job_id,
)
from jobhorizon.core.errors import DuplicateApplicationError
from jobhorizon.models.applied_job import AppliedJob
from jobhorizon.models.job import Job

logger = logging.getLogger(__name__)


def application_to_document(row: AppliedJob) -> dict:
    document = {ID_FIELD: str(row.id)}
    document.update(row.details or {})
    return document


def applicant_email_of(document: dict[str, Any]) -> str | None:
    details = document.get(APPLICATION_DETAILS_FIELD)
    if isinstance(details, dict):
        email = details.get(APPLICANT_EMAIL_FIELD)
        if isinstance(email, str) and email:
            return email
    return None


class ApplicationStore:
    """Job applications, backed by one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists(self, email: str, job_id: str) -> bool:
        result = await self.db.execute(
            select(AppliedJob.id)
            .where(AppliedJob.applicant_email == email)
            .where(AppliedJob.job_id == job_id)
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def list_by_applicant(
        self, email: str, category: str | None = None,
    ) -> list[dict]:
        query = (
            select(AppliedJob)
            .where(AppliedJob.applicant_email == email)
            .order_by(AppliedJob.created_at)
        )
        if category:
            query = query.where(AppliedJob.job_category == category)
        result = await self.db.execute(query)
        return [application_to_document(row) for row in result.scalars().all()]

    async def submit(self, document: dict[str, Any]) -> WriteResult:
        """Insert the application and bump the job's applicant counter.

        The stored jobId is the canonical UUID string. Returns
        acknowledged=False with modified_count=0 (and nothing persisted) when
        the jobId does not parse or the referenced job does not exist.
        """
        email = applicant_email_of(document)
        raw_job_id = str(document[APPLICATION_JOB_ID_FIELD])
        parsed = parse_job_id(raw_job_id)
        if parsed is None:
            logger.warning(
                f"Application for malformed job id {raw_job_id} rejected",
                extra={"job_id": raw_job_id, "email": email},
            )
            return WriteResult(acknowledged=False)
        job_id = str(parsed)
        category = document.get(JOB_CATEGORY_FIELD)

        details = {k: v for k, v in document.items() if k != ID_FIELD}
        details[APPLICATION_JOB_ID_FIELD] = job_id
        row = AppliedJob(
            job_id=job_id,
            applicant_email=email,
            job_category=category if isinstance(category, str) else None,
            details=details,
        )
        self.db.add(row)
        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateApplicationError(email, job_id)

        result = await self.db.execute(
            update(Job)
            .where(Job.id == parsed)
            .values(job_applicants_number=Job.job_applicants_number + 1)
            .execution_options(synchronize_session=False)
        )
        modified = result.rowcount

        if not modified:
            await self.db.rollback()
            logger.warning(
                f"Application for unknown job {job_id} rolled back",
                extra={"job_id": job_id, "email": email},
            )
            return WriteResult(acknowledged=False)

        await self.db.commit()
        logger.info(
            f"Application {row.id} recorded for job {job_id}",
            extra={"job_id": job_id, "email": email},
        )
        return WriteResult(
            acknowledged=True, modified_count=modified, inserted_id=str(row.id),
        )
