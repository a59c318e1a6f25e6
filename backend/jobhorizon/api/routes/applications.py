"""Application Routes — submit applications and list an applicant's own.

Invariants:
    - Both routes require a verified token
    - jobId is canonicalized (lowercase hyphenated UUID) before the duplicate check;
      every spelling of one job id is the same job
    - Duplicate check runs before the insert; insert + counter bump are one transaction
    - Success requires an acknowledged insert AND a modified job counter
"""

import logging

from fastapi import APIRouter, Depends, Query

from jobhorizon.api.dependencies import (
    ensure_owner, get_application_store, get_current_identity, require_email,
)
from jobhorizon.core.domain_types import (
    APPLICATION_JOB_ID_FIELD, Identity, parse_job_id,
)
from jobhorizon.core.errors import (
    ApplyFailedError, DuplicateApplicationError, ErrorContext,
)
from jobhorizon.core.repository_protocols import ApplicationRepository
from jobhorizon.schemas.job import ActionResult, ApplicationCreate

logger = logging.getLogger(__name__)
router = APIRouter(tags=["applications"])


@router.get("/applied-jobs/{email}")
async def list_applied_jobs(
    email: str,
    category: str | None = Query(None, alias="filter"),
    identity: Identity = Depends(get_current_identity),
    applications: ApplicationRepository = Depends(get_application_store),
):
    """Applications submitted by `email`, optionally limited to one job category."""
    ensure_owner(identity, email)
    return await applications.list_by_applicant(email, category)


@router.post("/apply-job", response_model=ActionResult, response_model_exclude_none=True)
async def apply_job(
    body: ApplicationCreate,
    identity: Identity = Depends(get_current_identity),
    applications: ApplicationRepository = Depends(get_application_store),
):
    require_email(identity)
    applicant = body.application.applicantUserEmail
    context = ErrorContext(email=applicant, resource_id=body.jobId)

    parsed = parse_job_id(body.jobId)
    if parsed is None:
        raise ApplyFailedError(body.jobId, context)
    job_id = str(parsed)

    if await applications.exists(applicant, job_id):
        raise DuplicateApplicationError(applicant, job_id)

    document = body.to_document()
    document[APPLICATION_JOB_ID_FIELD] = job_id
    result = await applications.submit(document)
    if not (result.acknowledged and result.modified_count > 0):
        raise ApplyFailedError(job_id, context)
    return ActionResult(
        success=True, message="Job Apply Successful",
        insertedId=result.inserted_id,
    )
