"""Job Store — document-style access to the jobs table.

Invariants:
    - Documents in and out are plain dicts; "_id" is the job UUID as a string
    - Title search is a case-insensitive literal substring match (LIKE wildcards escaped)
    - upsert() replaces top-level fields only and reports modified_count=0 when nothing changed
    - Results keep insertion order (created_at)
"""

import logging
from typing import Any

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from jobhorizon.core.domain_types import (
    ID_FIELD, JOB_TITLE_FIELD, JOB_OWNER_FIELD, JOB_CATEGORY_FIELD,
    JOB_APPLICANTS_FIELD, JobId, WriteResult,
)
from jobhorizon.models.job import Job

logger = logging.getLogger(__name__)

_STORED_ELSEWHERE = (ID_FIELD, JOB_APPLICANTS_FIELD)


def escape_like(text: str) -> str:
    """Escape LIKE metacharacters so text matches literally (escape char: backslash)."""
    return (
        text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    )


def _mirror(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _as_count(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return None


def job_to_document(job: Job) -> dict:
    document = {ID_FIELD: str(job.id)}
    document.update(job.details or {})
    document[JOB_APPLICANTS_FIELD] = job.job_applicants_number or 0
    return document


def _assign(job: Job, document: dict[str, Any]) -> None:
    """Write a full client document onto the row, refreshing mirrored columns."""
    details = {
        k: v for k, v in document.items() if k not in _STORED_ELSEWHERE
    }
    job.details = details
    job.job_title = _mirror(details.get(JOB_TITLE_FIELD))
    job.user_email = _mirror(details.get(JOB_OWNER_FIELD))
    job.job_category = _mirror(details.get(JOB_CATEGORY_FIELD))
    count = _as_count(document.get(JOB_APPLICANTS_FIELD))
    if count is not None:
        job.job_applicants_number = count
    elif job.job_applicants_number is None:
        job.job_applicants_number = 0


class JobStore:
    """Job postings, backed by one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def search(self, title_query: str | None = None) -> list[dict]:
        query = select(Job).order_by(Job.created_at)
        if title_query:
            pattern = f"%{escape_like(title_query)}%"
            query = query.where(Job.job_title.ilike(pattern, escape="\\"))
        result = await self.db.execute(query)
        return [job_to_document(job) for job in result.scalars().all()]

    async def get(self, job_id: JobId) -> dict | None:
        job = await self.db.get(Job, job_id, populate_existing=True)
        return job_to_document(job) if job else None

    async def list_by_owner(self, email: str) -> list[dict]:
        result = await self.db.execute(
            select(Job)
            .where(Job.user_email == email)
            .order_by(Job.created_at)
        )
        return [job_to_document(job) for job in result.scalars().all()]

    async def insert(self, document: dict[str, Any]) -> WriteResult:
        job = Job()
        _assign(job, document)
        self.db.add(job)
        await self.db.commit()
        logger.info(f"Job {job.id} inserted", extra={"job_id": str(job.id)})
        return WriteResult(acknowledged=True, inserted_id=str(job.id))

    async def upsert(
        self, job_id: JobId, fields: dict[str, Any],
    ) -> WriteResult:
        """Set top-level fields on the job, creating it under job_id if absent."""
        fields = {k: v for k, v in fields.items() if k != ID_FIELD}
        job = await self.db.get(Job, job_id, populate_existing=True)

        if job is None:
            job = Job(id=job_id)
            _assign(job, fields)
            self.db.add(job)
            await self.db.commit()
            logger.info(f"Job {job_id} created by upsert", extra={"job_id": str(job_id)})
            return WriteResult(acknowledged=True, upserted_id=str(job_id))

        before = job_to_document(job)
        merged = {**before, **fields}
        if merged == before:
            return WriteResult(acknowledged=True, matched_count=1)

        _assign(job, merged)
        await self.db.commit()
        return WriteResult(acknowledged=True, matched_count=1, modified_count=1)

    async def delete(self, job_id: JobId) -> WriteResult:
        result = await self.db.execute(
            delete(Job)
            .where(Job.id == job_id)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
        return WriteResult(acknowledged=True, deleted_count=result.rowcount)
