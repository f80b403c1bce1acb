"""Request and response envelopes for the key and JWT endpoints."""

from typing import Any

from pydantic import ConfigDict, Field
from starlette.responses import JSONResponse

from rsajwt.crypto.types import (
    CamelModel,
    CreatedToken,
    DecodedToken,
    ExpirationStatus,
    KeyGenerationResult,
    TokenOptions,
    VerifyOptions,
)


class ErrorEnvelope(CamelModel):
    """Failure body: {success: false, error}."""

    success: bool = False
    error: str


def error_response(message: str, status_code: int) -> JSONResponse:
    """Wrap an error message in the standard envelope."""
    return JSONResponse(
        ErrorEnvelope(error=message).model_dump(by_alias=True),
        status_code=status_code,
    )


class GenerateKeysPayload(CamelModel):
    """Request body for POST /api/keys/generate."""

    model_config = ConfigDict(extra="forbid")

    key_size: int | None = None


class KeyGenerationResponse(KeyGenerationResult):
    """Response for POST /api/keys/generate."""

    success: bool = True


class KeyStatusResponse(CamelModel):
    """Response for GET /api/keys/status."""

    exists: bool
    message: str


class PublicKeyResponse(CamelModel):
    """Response for GET /api/keys/public."""

    success: bool = True
    public_key: str


class MessageResponse(CamelModel):
    """Generic {success, message} body."""

    success: bool = True
    message: str


class CreateTokenPayload(CamelModel):
    """Request body for POST /api/jwt/create."""

    payload: dict[str, Any]
    options: TokenOptions | None = None


class CreateTokenResponse(CreatedToken):
    """Response for POST /api/jwt/create."""

    success: bool = True


class VerifyTokenPayload(CamelModel):
    """Request body for POST /api/jwt/verify."""

    token: str = Field(min_length=1)
    options: VerifyOptions | None = None


class TokenPayload(CamelModel):
    """Request body carrying only a token."""

    token: str = Field(min_length=1)


class DecodeTokenResponse(DecodedToken):
    """Response for POST /api/jwt/decode."""

    success: bool = True


class ExpirationResponse(ExpirationStatus):
    """Response for POST /api/jwt/check-expiration."""

    success: bool = True


class HealthResponse(CamelModel):
    """Response for GET /health."""

    status: str = "ok"
    keys_present: bool
