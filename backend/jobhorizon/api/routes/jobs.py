"""Job Routes — listing, lookup, creation, upsert and deletion of job postings.

Invariants:
    - GET /jobs, GET /job/{id} and DELETE /job/{id} are public (delete is
      owner-checked only when job_delete_requires_owner is set)
    - PUT /job/{id} checks body.userEmail against the token before any write
    - A job id that does not parse is indistinguishable from a missing job (404)
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query

from jobhorizon.api.dependencies import (
    ensure_owner, get_current_identity, get_job_store,
    get_optional_identity, require_email,
)
from jobhorizon.config import Settings, get_settings
from jobhorizon.core.domain_types import (
    Identity, JOB_OWNER_FIELD, JobId, parse_job_id,
)
from jobhorizon.core.errors import (
    ErrorContext, NotUpdatedError, ResourceNotFoundError,
    UnauthorizedError, WriteNotAcknowledgedError,
)
from jobhorizon.core.repository_protocols import JobRepository
from jobhorizon.schemas.job import ActionResult

logger = logging.getLogger(__name__)
router = APIRouter(tags=["jobs"])


def _job_id_or_404(raw: str) -> JobId:
    job_id = parse_job_id(raw)
    if job_id is None:
        raise ResourceNotFoundError("Job", raw)
    return job_id


@router.get("/jobs")
async def list_jobs(
    search: str | None = Query(None),
    jobs: JobRepository = Depends(get_job_store),
):
    """All jobs, optionally narrowed to titles containing `search` (case-insensitive)."""
    return await jobs.search(search)


@router.get("/job/{job_id}")
async def get_job(job_id: str, jobs: JobRepository = Depends(get_job_store)):
    document = await jobs.get(_job_id_or_404(job_id))
    if document is None:
        raise ResourceNotFoundError("Job", job_id)
    return document


@router.put("/job/{job_id}", response_model=ActionResult, response_model_exclude_none=True)
async def update_job(
    job_id: str,
    body: dict[str, Any] = Body(...),
    identity: Identity = Depends(get_current_identity),
    jobs: JobRepository = Depends(get_job_store),
):
    """Upsert the job's top-level fields. Only the owner named in the body may write."""
    ensure_owner(identity, body.get(JOB_OWNER_FIELD))
    result = await jobs.upsert(_job_id_or_404(job_id), body)

    if result.upserted_id:
        return ActionResult(success=True, message="Job Created Successfully")
    if result.modified_count > 0:
        return ActionResult(success=True, message="Job Updated Successfully")
    raise NotUpdatedError(job_id, ErrorContext(resource_id=job_id))


@router.delete("/job/{job_id}", response_model=ActionResult, response_model_exclude_none=True)
async def delete_job(
    job_id: str,
    identity: Identity | None = Depends(get_optional_identity),
    settings: Settings = Depends(get_settings),
    jobs: JobRepository = Depends(get_job_store),
):
    parsed = parse_job_id(job_id)
    if settings.job_delete_requires_owner:
        if identity is None:
            raise UnauthorizedError("missing token")
        document = await jobs.get(parsed) if parsed else None
        if document is not None:
            ensure_owner(identity, document.get(JOB_OWNER_FIELD))

    deleted = (await jobs.delete(parsed)).deleted_count if parsed else 0
    if deleted > 0:
        logger.info(f"Job {job_id} deleted", extra={"job_id": job_id})
        return ActionResult(success=True, message="Job deleted successfully")
    raise ResourceNotFoundError(
        "Job", job_id, message="Job not found or already deleted",
    )


@router.post("/add-job", response_model=ActionResult, response_model_exclude_none=True)
async def add_job(
    body: dict[str, Any] = Body(...),
    identity: Identity = Depends(get_current_identity),
    jobs: JobRepository = Depends(get_job_store),
):
    """Insert the posted job document as given."""
    require_email(identity)
    result = await jobs.insert(body)
    if not result.acknowledged:
        raise WriteNotAcknowledgedError("insert")
    return ActionResult(
        success=True, message="Job Added Successfully",
        insertedId=result.inserted_id,
    )


@router.get("/my-jobs/{email}")
async def list_my_jobs(
    email: str,
    identity: Identity = Depends(get_current_identity),
    jobs: JobRepository = Depends(get_job_store),
):
    ensure_owner(identity, email)
    return await jobs.list_by_owner(email)
