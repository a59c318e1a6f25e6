"""Auth Routes — issue and clear the identity cookie.

Invariants:
    - POST /jwt signs the posted user object and sets it as an HTTP-only cookie
    - POST /logout overwrites the cookie with the same attributes and max-age=0
    - Neither route requires an existing token
"""

import logging

from fastapi import APIRouter, Depends, Response

from jobhorizon.api.dependencies import get_token_service
from jobhorizon.config import Settings, get_settings
from jobhorizon.core.tokens import TokenService, cookie_attributes
from jobhorizon.schemas.auth import AuthResult, TokenRequest

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])


@router.post("/jwt", response_model=AuthResult)
async def issue_token(
    body: TokenRequest,
    response: Response,
    settings: Settings = Depends(get_settings),
    tokens: TokenService = Depends(get_token_service),
):
    """Sign the user object and set it as the identity cookie."""
    token = tokens.issue(body.model_dump())
    response.set_cookie(
        settings.token_cookie_name, token,
        max_age=settings.token_ttl_seconds,
        **cookie_attributes(settings.is_production),
    )
    logger.info("Identity token issued", extra={"email": body.email})
    return AuthResult(success=True)


@router.post("/logout", response_model=AuthResult)
async def logout(
    response: Response, settings: Settings = Depends(get_settings),
):
    """Expire the identity cookie client-side."""
    response.delete_cookie(
        settings.token_cookie_name,
        **cookie_attributes(settings.is_production),
    )
    return AuthResult(success=True)
