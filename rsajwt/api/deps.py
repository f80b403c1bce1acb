"""FastAPI dependency injection for the key store and JWT manager."""

from typing import Annotated

from fastapi import Depends

from rsajwt.core.settings import AppSettings
from rsajwt.crypto.jwt_manager import JWTManager
from rsajwt.crypto.keys import KeyStore
from rsajwt.crypto.types import TokenOptions, VerifyOptions


def load_settings() -> AppSettings:
    return AppSettings()


def get_key_store(
    settings: Annotated[AppSettings, Depends(load_settings)],
) -> KeyStore:
    """Build a key store over the configured PEM paths."""
    return KeyStore(settings.private_key_path, settings.public_key_path)


def get_jwt_manager(
    settings: Annotated[AppSettings, Depends(load_settings)],
    key_store: Annotated[KeyStore, Depends(get_key_store)],
) -> JWTManager:
    """Build a JWTManager with issuer and lifetime defaults from settings."""
    return JWTManager(
        key_store,
        token_defaults=TokenOptions(
            issuer=settings.issuer,
            expires_in=settings.default_expires_in,
        ),
        verify_defaults=VerifyOptions(issuer=settings.issuer),
    )


Settings = Annotated[AppSettings, Depends(load_settings)]
Keys = Annotated[KeyStore, Depends(get_key_store)]
Manager = Annotated[JWTManager, Depends(get_jwt_manager)]
