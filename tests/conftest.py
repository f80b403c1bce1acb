"""Shared test fixtures for the JWT RSA256 API."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from rsajwt.core.app import create_app
from rsajwt.crypto.jwt_manager import JWTManager
from rsajwt.crypto.keys import KeyStore

TEST_KEY_SIZE = 1024


@pytest.fixture
def key_dir(tmp_path: Path) -> Path:
    """Directory that does not exist yet, to exercise directory creation."""
    return tmp_path / "keys"


@pytest.fixture(autouse=True)
def _set_env(monkeypatch: pytest.MonkeyPatch, key_dir: Path) -> None:
    """Point settings at a per-test key directory."""
    monkeypatch.setenv("JWT_API_PRIVATE_KEY_PATH", str(key_dir / "private.pem"))
    monkeypatch.setenv("JWT_API_PUBLIC_KEY_PATH", str(key_dir / "public.pem"))
    monkeypatch.setenv("JWT_API_LOG_LEVEL", "warning")


@pytest.fixture
def key_store(key_dir: Path) -> KeyStore:
    """A key store with no keys on disk."""
    return KeyStore(key_dir / "private.pem", key_dir / "public.pem")


@pytest.fixture
def loaded_store(key_store: KeyStore) -> KeyStore:
    """A key store holding a freshly generated pair."""
    key_store.generate(TEST_KEY_SIZE)
    return key_store


@pytest.fixture
def jwt_mgr(loaded_store: KeyStore) -> JWTManager:
    """A JWTManager backed by a generated pair."""
    return JWTManager(loaded_store)


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Create an httpx test client against the app."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
