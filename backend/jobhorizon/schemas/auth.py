"""Auth Schemas — the user object posted to /jwt.

Invariants:
    - email is required and non-blank; it is the identity every guard compares against
    - Any other user fields are kept and become token claims
    - Registered JWT claims (exp, nbf, iat, aud, iss, sub, jti) are rejected
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from jobhorizon.core.tokens import RESERVED_CLAIMS


class TokenRequest(BaseModel):
    """User object to sign into an identity token."""
    model_config = ConfigDict(extra="allow")

    email: str = Field(min_length=1, max_length=320)

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("email cannot be empty or whitespace")
        return v

    @model_validator(mode="after")
    def no_registered_claims(self) -> "TokenRequest":
        reserved = RESERVED_CLAIMS.intersection(self.model_extra or {})
        if reserved:
            raise ValueError(f"reserved claims not allowed: {', '.join(sorted(reserved))}")
        return self


class AuthResult(BaseModel):
    success: bool = True
