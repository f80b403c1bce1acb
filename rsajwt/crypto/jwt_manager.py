"""JWT creation, verification, and inspection using RS256."""

import time
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any, TypeVar

import jwt
import structlog
from jwt.api_jwt import decode_complete
from jwt.types import Options

from rsajwt.crypto.durations import parse_duration
from rsajwt.crypto.errors import (
    KeysNotFoundError,
    KeyStorageError,
    MissingExpirationError,
    TokenCreationError,
    TokenDecodeError,
)
from rsajwt.crypto.keys import KeyStore
from rsajwt.crypto.types import (
    DEFAULT_ALGORITHM,
    CreatedToken,
    DecodedToken,
    ExpirationStatus,
    TokenOptions,
    VerificationFailure,
    VerificationResult,
    VerificationSuccess,
    VerifyOptions,
)

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60
EXPIRED_LABEL = "expired"

logger = structlog.get_logger(__name__)

_OptionsT = TypeVar("_OptionsT", TokenOptions, VerifyOptions)


def _merge(defaults: _OptionsT, overrides: _OptionsT | None) -> _OptionsT:
    """Overlay the fields a caller explicitly set onto the defaults."""
    if overrides is None:
        return defaults
    update = {name: getattr(overrides, name) for name in overrides.model_fields_set}
    return defaults.model_copy(update=update)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_time_remaining(seconds: int) -> str:
    """Render seconds as e.g. ``"1 day, 2 hours, 5 seconds"``."""
    if seconds <= 0:
        return EXPIRED_LABEL
    days, rest = divmod(seconds, SECONDS_PER_DAY)
    hours, rest = divmod(rest, SECONDS_PER_HOUR)
    minutes, secs = divmod(rest, SECONDS_PER_MINUTE)
    parts = [
        _plural(count, unit)
        for count, unit in (
            (days, "day"),
            (hours, "hour"),
            (minutes, "minute"),
            (secs, "second"),
        )
        if count > 0
    ]
    return ", ".join(parts)


class JWTManager:
    """Creates and verifies RS256-signed JWT tokens.

    Key material is read from the key store on every call.
    """

    def __init__(
        self,
        key_store: KeyStore,
        token_defaults: TokenOptions | None = None,
        verify_defaults: VerifyOptions | None = None,
    ) -> None:
        self._key_store = key_store
        self._token_defaults = token_defaults or TokenOptions()
        self._verify_defaults = verify_defaults or VerifyOptions()

    def create_token(
        self, payload: Mapping[str, Any], options: TokenOptions | None = None
    ) -> CreatedToken:
        """Sign ``payload`` with the stored private key."""
        if not isinstance(payload, Mapping):
            raise TokenCreationError("Payload must be an object of claims")
        opts = _merge(self._token_defaults, options)
        if opts.algorithm != DEFAULT_ALGORITHM:
            raise TokenCreationError(
                f'Unsupported algorithm "{opts.algorithm}", only '
                f"{DEFAULT_ALGORITHM} is allowed"
            )

        try:
            private_pem = self._key_store.get_private_key()
        except KeyStorageError as exc:
            raise TokenCreationError(str(exc)) from exc

        now = int(time.time())
        claims = dict(payload)
        claims["iat"] = now
        if opts.expires_in is not None:
            if "exp" in payload:
                raise TokenCreationError(
                    'Payload already has an "exp" claim; drop it or unset expiresIn'
                )
            try:
                claims["exp"] = now + parse_duration(opts.expires_in)
            except ValueError as exc:
                raise TokenCreationError(str(exc)) from exc
        claims["iss"] = opts.issuer
        if opts.audience is not None:
            claims["aud"] = opts.audience
        if opts.subject is not None:
            claims["sub"] = opts.subject

        try:
            token = jwt.encode(
                claims,
                private_pem,
                algorithm=opts.algorithm,
                headers={"typ": "JWT"},
            )
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise TokenCreationError(f"Failed to sign token: {exc}") from exc

        logger.info("token.created", issuer=opts.issuer, exp=claims.get("exp"))
        return CreatedToken(token=token, payload=dict(payload), options=opts)

    def verify_token(
        self, token: str, options: VerifyOptions | None = None
    ) -> VerificationResult:
        """Verify signature and claims, reporting the outcome as data."""
        opts = _merge(self._verify_defaults, options)
        verify: Options = {
            "verify_exp": not opts.ignore_expiration,
            "verify_aud": opts.audience is not None,
            "verify_sub": False,
            "verify_jti": False,
        }
        try:
            public_pem = self._key_store.get_public_key()
            header = jwt.get_unverified_header(token)
            decoded = jwt.decode(
                token,
                public_pem,
                algorithms=opts.algorithms,
                issuer=opts.issuer,
                audience=opts.audience,
                leeway=opts.leeway,
                options=verify,
            )
        except (jwt.PyJWTError, KeysNotFoundError, KeyStorageError) as exc:
            logger.info("token.verify_failed", kind=type(exc).__name__)
            return VerificationFailure(
                error=str(exc) or type(exc).__name__, name=type(exc).__name__
            )
        return VerificationSuccess(decoded=decoded, header=header)

    def decode_token(self, token: str) -> DecodedToken:
        """Split a token into header, payload and signature without verifying."""
        try:
            parts = decode_complete(token, options={"verify_signature": False})
        except jwt.PyJWTError as exc:
            raise TokenDecodeError(f"Invalid token: {exc}") from exc
        return DecodedToken(
            header=parts["header"],
            payload=parts["payload"],
            signature=token.rsplit(".", 1)[-1],
        )

    def check_token_expiration(self, token: str) -> ExpirationStatus:
        """Report whether the token's exp claim has passed."""
        payload = self.decode_token(token).payload
        exp = payload.get("exp")
        if not exp:
            raise MissingExpirationError("Token has no expiration time")
        if isinstance(exp, bool) or not isinstance(exp, int | float):
            raise TokenDecodeError("Expiration time must be a number")

        now = int(time.time())
        try:
            expiration_time = datetime.fromtimestamp(exp, tz=UTC)
            is_expired = now >= exp
            remaining = 0 if is_expired else int(exp - now)
        except (OverflowError, ValueError, OSError) as exc:
            raise TokenDecodeError("Expiration time out of range") from exc
        return ExpirationStatus(
            is_expired=is_expired,
            expiration_time=expiration_time,
            time_remaining=remaining,
            time_remaining_formatted=format_time_remaining(remaining),
        )
