"""Route Dependencies — stores, token service and identity guards for FastAPI routes.

Invariants:
    - Stores are built per request from the request's AsyncSession
    - get_current_identity raises UnauthorizedError; routes never see an unverified identity
    - Ownership checks raise ForbiddenError and run before any write
"""

import logging
from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from jobhorizon.config import Settings, get_settings
from jobhorizon.core.domain_types import Identity
from jobhorizon.core.errors import ErrorContext, ForbiddenError, UnauthorizedError
from jobhorizon.core.repository_protocols import ApplicationRepository, JobRepository
from jobhorizon.core.tokens import TokenService
from jobhorizon.infrastructure.database import get_db
from jobhorizon.services.application_store import ApplicationStore
from jobhorizon.services.job_store import JobStore

logger = logging.getLogger(__name__)


@lru_cache
def get_token_service() -> TokenService:
    settings = get_settings()
    return TokenService(
        settings.access_token_secret,
        algorithm=settings.token_algorithm,
        ttl_seconds=settings.token_ttl_seconds,
    )


async def get_job_store(db: AsyncSession = Depends(get_db)) -> JobRepository:
    return JobStore(db)


async def get_application_store(
    db: AsyncSession = Depends(get_db),
) -> ApplicationRepository:
    return ApplicationStore(db)


def get_current_identity(
    request: Request,
    settings: Settings = Depends(get_settings),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    """Guard for protected routes: verified identity from the token cookie."""
    token = request.cookies.get(settings.token_cookie_name)
    try:
        return tokens.verify(token)
    except UnauthorizedError as e:
        logger.warning(
            f"Rejected token on {request.url.path}: {e.reason}",
            extra={"path": request.url.path},
        )
        raise


def get_optional_identity(
    request: Request,
    settings: Settings = Depends(get_settings),
    tokens: TokenService = Depends(get_token_service),
) -> Identity | None:
    """Identity when a valid token cookie is present, None otherwise."""
    token = request.cookies.get(settings.token_cookie_name)
    if not token:
        return None
    try:
        return tokens.verify(token)
    except UnauthorizedError:
        return None


def require_email(identity: Identity) -> str:
    """Email claim of a verified identity; tokens without one are unauthorized."""
    if not identity.email:
        raise UnauthorizedError("token has no email claim")
    return identity.email


def ensure_owner(identity: Identity, owner_email: object) -> None:
    """Raise ForbiddenError unless the identity's email equals owner_email."""
    if identity.email is None or owner_email != identity.email:
        raise ForbiddenError(ErrorContext(email=identity.email))
