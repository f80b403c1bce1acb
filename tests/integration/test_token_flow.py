"""End-to-end key and token lifecycle."""

from pathlib import Path

import pytest
from httpx import AsyncClient

from rsajwt.crypto.errors import KeysNotFoundError
from rsajwt.crypto.jwt_manager import JWTManager
from rsajwt.crypto.keys import KeyStore
from rsajwt.crypto.types import TokenOptions, VerificationSuccess

CLAIMS = {"user_id": 123, "role": "admin"}


def test_full_lifecycle(tmp_path: Path) -> None:
    store = KeyStore(tmp_path / "keys" / "private.pem", tmp_path / "keys" / "public.pem")
    mgr = JWTManager(store)

    with pytest.raises(KeysNotFoundError):
        mgr.create_token(CLAIMS)

    store.generate(2048)
    assert store.exists() is True

    created = mgr.create_token(CLAIMS, TokenOptions(expires_in="1h"))
    assert len(created.token.split(".")) == 3

    decoded = mgr.decode_token(created.token)
    assert decoded.header == {"alg": "RS256", "typ": "JWT"}
    assert decoded.payload["user_id"] == 123
    assert decoded.payload["role"] == "admin"
    assert decoded.payload["iss"] == "jwt-rsa256-api"
    assert {"iat", "exp"} <= decoded.payload.keys()

    verified = mgr.verify_token(created.token)
    assert isinstance(verified, VerificationSuccess)
    assert verified.decoded == decoded.payload

    status = mgr.check_token_expiration(created.token)
    assert status.is_expired is False
    assert abs(status.time_remaining - 3600) <= 5

    store.delete()
    assert store.exists() is False
    assert mgr.verify_token(created.token).valid is False


async def test_http_lifecycle(client: AsyncClient) -> None:
    resp = await client.post("/api/keys/generate", json={"keySize": 2048})
    assert resp.status_code == 200

    resp = await client.post(
        "/api/jwt/create",
        json={"payload": CLAIMS, "options": {"expiresIn": "1h"}},
    )
    token = resp.json()["token"]

    resp = await client.post("/api/jwt/verify", json={"token": token})
    assert resp.json()["valid"] is True
    assert resp.json()["decoded"]["role"] == "admin"

    resp = await client.post("/api/jwt/check-expiration", json={"token": token})
    assert resp.json()["isExpired"] is False

    resp = await client.post("/api/keys/generate", json={"keySize": 1024})
    assert resp.status_code == 200

    resp = await client.post("/api/jwt/verify", json={"token": token})
    body = resp.json()
    assert resp.status_code == 200
    assert body["valid"] is False
    assert body["name"] == "InvalidSignatureError"
