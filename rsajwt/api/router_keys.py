"""Key pair management endpoints."""

import structlog
from fastapi import APIRouter
from starlette.responses import JSONResponse

from rsajwt.api.deps import Keys, Settings
from rsajwt.api.schemas import (
    GenerateKeysPayload,
    KeyGenerationResponse,
    KeyStatusResponse,
    MessageResponse,
    PublicKeyResponse,
    error_response,
)
from rsajwt.crypto.errors import (
    InvalidKeySizeError,
    KeysNotFoundError,
    KeyStorageError,
)
from rsajwt.crypto.keys import check_key_size

router = APIRouter(prefix="/api/keys", tags=["keys"])

HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404

logger = structlog.get_logger(__name__)


@router.post("/generate", response_model=None)
def generate_keys(
    keys: Keys,
    settings: Settings,
    payload: GenerateKeysPayload | None = None,
) -> KeyGenerationResponse | JSONResponse:
    """POST /api/keys/generate -- create and store a new RSA key pair."""
    key_size = settings.default_key_size
    if payload is not None and payload.key_size is not None:
        key_size = payload.key_size
    try:
        check_key_size(key_size, settings.min_key_size, settings.max_key_size)
        result = keys.generate(key_size)
    except (InvalidKeySizeError, KeyStorageError) as exc:
        logger.warning("keys.generate_failed", error=str(exc))
        return error_response(str(exc), HTTP_BAD_REQUEST)
    return KeyGenerationResponse(
        message=result.message,
        private_key_path=result.private_key_path,
        public_key_path=result.public_key_path,
        public_key=result.public_key,
    )


@router.get("/status")
def key_status(keys: Keys) -> KeyStatusResponse:
    """GET /api/keys/status -- report whether a key pair is stored."""
    exists = keys.exists()
    return KeyStatusResponse(
        exists=exists,
        message="Keys exist" if exists else "Keys have not been generated",
    )


@router.get("/public", response_model=None)
def public_key(keys: Keys) -> PublicKeyResponse | JSONResponse:
    """GET /api/keys/public -- return the public key PEM."""
    try:
        pem = keys.get_public_key()
    except KeysNotFoundError as exc:
        return error_response(str(exc), HTTP_NOT_FOUND)
    except KeyStorageError as exc:
        return error_response(str(exc), HTTP_BAD_REQUEST)
    return PublicKeyResponse(public_key=pem)


@router.delete("/delete", response_model=None)
def delete_keys(keys: Keys) -> MessageResponse | JSONResponse:
    """DELETE /api/keys/delete -- remove the stored key pair."""
    try:
        message = keys.delete()
    except KeyStorageError as exc:
        logger.warning("keys.delete_failed", error=str(exc))
        return error_response(str(exc), HTTP_BAD_REQUEST)
    return MessageResponse(message=message)
