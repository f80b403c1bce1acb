"""Exceptions raised by key storage and token operations."""


class RsaJwtError(Exception):
    """Base class for key and token errors."""


class KeysNotFoundError(RsaJwtError):
    """No key pair is present on disk."""

    def __init__(
        self, message: str = "Keys have not been generated. Generate keys first."
    ) -> None:
        super().__init__(message)


class KeyStorageError(RsaJwtError):
    """Reading, writing or removing key files failed."""


class InvalidKeySizeError(RsaJwtError):
    """Requested RSA modulus size is out of range or unsupported."""


class TokenCreationError(RsaJwtError):
    """A token could not be signed."""


class TokenDecodeError(RsaJwtError):
    """A token is not a well-formed JWT."""


class MissingExpirationError(RsaJwtError):
    """A token carries no exp claim."""
