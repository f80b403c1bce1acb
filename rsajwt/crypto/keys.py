"""RSA key pair generation and flat-file storage."""

import os
import tempfile
from pathlib import Path

import structlog
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from rsajwt.crypto.errors import (
    InvalidKeySizeError,
    KeysNotFoundError,
    KeyStorageError,
)
from rsajwt.crypto.types import KeyGenerationResult

RSA_KEY_SIZE = 2048
RSA_MIN_KEY_SIZE = 1024
RSA_MAX_KEY_SIZE = 4096
RSA_PUBLIC_EXPONENT = 65537
PRIVATE_KEY_MODE = 0o600
PUBLIC_KEY_MODE = 0o644

logger = structlog.get_logger(__name__)


def check_key_size(
    key_size: int,
    minimum: int = RSA_MIN_KEY_SIZE,
    maximum: int = RSA_MAX_KEY_SIZE,
) -> int:
    """Reject key sizes outside the accepted range."""
    if key_size < minimum or key_size > maximum:
        raise InvalidKeySizeError(
            f"Key size must be between {minimum} and {maximum} bits"
        )
    return key_size


def generate_rsa_keypair(key_size: int = RSA_KEY_SIZE) -> tuple[str, str]:
    """Generate an RSA keypair and return (private_pem, public_pem)."""
    if key_size <= 0:
        raise InvalidKeySizeError(f"Invalid key size: {key_size}")
    try:
        private_key = rsa.generate_private_key(
            public_exponent=RSA_PUBLIC_EXPONENT,
            key_size=key_size,
        )
    except ValueError as exc:
        raise InvalidKeySizeError(f"Unsupported key size {key_size}: {exc}") from exc
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_pem = (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )
    return private_pem, public_pem


def _atomic_write(path: Path, content: str, mode: int) -> None:
    """Write to a sibling temp file, then rename it over ``path``."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(content)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class KeyStore:
    """Owns a single RSA key pair persisted as two PEM files.

    Nothing is cached: every read goes back to disk, so a pair written by
    another process or request is picked up on the next call.
    """

    def __init__(self, private_key_path: str | Path, public_key_path: str | Path) -> None:
        self.private_key_path = Path(private_key_path)
        self.public_key_path = Path(public_key_path)

    def generate(self, key_size: int = RSA_KEY_SIZE) -> KeyGenerationResult:
        """Generate a fresh pair, replacing any existing one."""
        private_pem, public_pem = generate_rsa_keypair(key_size)
        try:
            for path in (self.private_key_path, self.public_key_path):
                path.parent.mkdir(parents=True, exist_ok=True)
            _atomic_write(self.private_key_path, private_pem, PRIVATE_KEY_MODE)
            _atomic_write(self.public_key_path, public_pem, PUBLIC_KEY_MODE)
        except OSError as exc:
            raise KeyStorageError(f"Failed to write keys: {exc}") from exc
        logger.info(
            "keys.generated",
            key_size=key_size,
            private_key_path=str(self.private_key_path),
            public_key_path=str(self.public_key_path),
        )
        return KeyGenerationResult(
            message=f"Generated {key_size}-bit RSA key pair",
            private_key_path=str(self.private_key_path),
            public_key_path=str(self.public_key_path),
            public_key=public_pem,
        )

    def exists(self) -> bool:
        """Return True when both key files are present."""
        return self.private_key_path.exists() and self.public_key_path.exists()

    def get_private_key(self) -> str:
        """Read the private key PEM."""
        return self._read(self.private_key_path)

    def get_public_key(self) -> str:
        """Read the public key PEM."""
        return self._read(self.public_key_path)

    def delete(self) -> str:
        """Remove whichever key files exist."""
        try:
            for path in (self.private_key_path, self.public_key_path):
                path.unlink(missing_ok=True)
        except OSError as exc:
            raise KeyStorageError(f"Failed to delete keys: {exc}") from exc
        logger.info("keys.deleted")
        return "Key pair deleted"

    def _read(self, path: Path) -> str:
        if not self.exists():
            raise KeysNotFoundError()
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise KeysNotFoundError() from exc
        except OSError as exc:
            raise KeyStorageError(f"Failed to read {path}: {exc}") from exc
