"""Type definitions for key pair, token options, and JWT operation results."""

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ALGORITHM = "RS256"
DEFAULT_EXPIRES_IN = "24h"
DEFAULT_ISSUER = "jwt-rsa256-api"


def to_camel(name: str) -> str:
    """Convert snake_case to camelCase for JSON serialization."""
    parts = name.split("_")
    return parts[0] + "".join(p.capitalize() for p in parts[1:])


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class KeyGenerationResult(CamelModel):
    """Outcome of writing a fresh key pair to disk."""

    message: str
    private_key_path: str
    public_key_path: str
    public_key: str


class TokenOptions(CamelModel):
    """Signing options; unset fields fall back to the manager defaults."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    algorithm: str = DEFAULT_ALGORITHM
    expires_in: int | str | None = DEFAULT_EXPIRES_IN
    issuer: str = DEFAULT_ISSUER
    audience: str | None = None
    subject: str | None = None


class VerifyOptions(CamelModel):
    """Verification options; unset fields fall back to the manager defaults."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    algorithms: list[str] = Field(default_factory=lambda: [DEFAULT_ALGORITHM])
    issuer: str | None = DEFAULT_ISSUER
    ignore_expiration: bool = False
    audience: str | None = None
    leeway: int = Field(default=0, ge=0)


class CreatedToken(CamelModel):
    """A freshly signed token with the options used to sign it."""

    token: str
    payload: dict[str, Any]
    options: TokenOptions


class VerificationSuccess(CamelModel):
    """Token signature and claims checked out."""

    success: Literal[True] = True
    valid: Literal[True] = True
    decoded: dict[str, Any]
    header: dict[str, Any]


class VerificationFailure(CamelModel):
    """Token was rejected; ``name`` tags the kind of failure."""

    success: Literal[False] = False
    valid: Literal[False] = False
    error: str
    name: str


VerificationResult = Annotated[
    VerificationSuccess | VerificationFailure, Field(discriminator="valid")
]


class DecodedToken(CamelModel):
    """Unverified view of a token's three segments."""

    header: dict[str, Any]
    payload: dict[str, Any]
    signature: str


class ExpirationStatus(CamelModel):
    """Expiration state of a token at the time of the check."""

    is_expired: bool
    expiration_time: datetime
    time_remaining: int
    time_remaining_formatted: str
