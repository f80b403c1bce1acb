"""Token creation, verification, and inspection endpoints."""

from fastapi import APIRouter
from starlette.responses import JSONResponse

from rsajwt.api.deps import Manager
from rsajwt.api.schemas import (
    CreateTokenPayload,
    CreateTokenResponse,
    DecodeTokenResponse,
    ExpirationResponse,
    TokenPayload,
    VerifyTokenPayload,
    error_response,
)
from rsajwt.crypto.errors import (
    KeysNotFoundError,
    MissingExpirationError,
    TokenCreationError,
    TokenDecodeError,
)
from rsajwt.crypto.types import VerificationFailure, VerificationSuccess

router = APIRouter(prefix="/api/jwt", tags=["jwt"])

HTTP_BAD_REQUEST = 400


@router.post("/create", response_model=None)
def create_token(
    body: CreateTokenPayload, manager: Manager
) -> CreateTokenResponse | JSONResponse:
    """POST /api/jwt/create -- sign a payload with the stored private key."""
    try:
        created = manager.create_token(body.payload, body.options)
    except (KeysNotFoundError, TokenCreationError) as exc:
        return error_response(str(exc), HTTP_BAD_REQUEST)
    return CreateTokenResponse(
        token=created.token,
        payload=created.payload,
        options=created.options,
    )


@router.post("/verify", response_model=None)
def verify_token(
    body: VerifyTokenPayload, manager: Manager
) -> VerificationSuccess | VerificationFailure:
    """POST /api/jwt/verify -- always 200; validity is in the body."""
    return manager.verify_token(body.token, body.options)


@router.post("/decode", response_model=None)
def decode_token(
    body: TokenPayload, manager: Manager
) -> DecodeTokenResponse | JSONResponse:
    """POST /api/jwt/decode -- show header and payload without verifying."""
    try:
        decoded = manager.decode_token(body.token)
    except TokenDecodeError as exc:
        return error_response(str(exc), HTTP_BAD_REQUEST)
    return DecodeTokenResponse(
        header=decoded.header,
        payload=decoded.payload,
        signature=decoded.signature,
    )


@router.post("/check-expiration", response_model=None)
def check_expiration(
    body: TokenPayload, manager: Manager
) -> ExpirationResponse | JSONResponse:
    """POST /api/jwt/check-expiration -- time left until exp."""
    try:
        status = manager.check_token_expiration(body.token)
    except (TokenDecodeError, MissingExpirationError) as exc:
        return error_response(str(exc), HTTP_BAD_REQUEST)
    return ExpirationResponse(
        is_expired=status.is_expired,
        expiration_time=status.expiration_time,
        time_remaining=status.time_remaining,
        time_remaining_formatted=status.time_remaining_formatted,
    )
