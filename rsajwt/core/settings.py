"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from rsajwt.crypto.keys import RSA_KEY_SIZE, RSA_MAX_KEY_SIZE, RSA_MIN_KEY_SIZE
from rsajwt.crypto.types import DEFAULT_EXPIRES_IN, DEFAULT_ISSUER


class AppSettings(BaseSettings):
    """Key storage, token defaults, and server settings."""

    model_config = SettingsConfigDict(env_prefix="JWT_API_")

    private_key_path: str = "keys/private.pem"
    public_key_path: str = "keys/public.pem"
    issuer: str = DEFAULT_ISSUER
    default_expires_in: str = DEFAULT_EXPIRES_IN
    default_key_size: int = RSA_KEY_SIZE
    min_key_size: int = RSA_MIN_KEY_SIZE
    max_key_size: int = RSA_MAX_KEY_SIZE
    cors_origins: str = ""
    log_level: str = "info"

    def get_cors_origin_list(self) -> list[str]:
        """Parse comma-separated CORS origins."""
        if not self.cors_origins:
            return []
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
