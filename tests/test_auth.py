import pytest
import httpx
import jwt

from stylelog.auth import deps as auth_deps
from stylelog.auth import passwords
from stylelog.auth.jwt import access_subject, decode_token, mint_access
from stylelog.core.config import settings
from stylelog.main import app


@pytest.fixture
def gate(monkeypatch):
    monkeypatch.setattr(settings, "APP_PASSWORD", "let-me-in")
    monkeypatch.setattr(settings, "APP_PASSWORD_HASH", None)
    passwords.gate_hash.cache_clear()
    yield
    passwords.gate_hash.cache_clear()


@pytest.fixture
def real_auth():
    app.dependency_overrides.pop(auth_deps.get_current_user_id, None)


def test_password_hashing():
    h = passwords.hash_pw("secret")
    assert passwords.verify_pw(h, "secret")
    assert not passwords.verify_pw(h, "nope")
    assert not passwords.verify_pw("not-a-hash", "secret")


def test_access_token_roundtrip():
    data = decode_token(mint_access("owner"))
    assert data["sub"] == "owner"
    assert data["typ"] == "access"
    assert data["iss"] == settings.JWT_ISSUER


def test_expired_token_is_rejected():
    tok = mint_access("owner", ttl_s=-10)
    with pytest.raises(jwt.ExpiredSignatureError):
        decode_token(tok)


def test_non_access_token_has_no_subject():
    tok = jwt.encode(
        {"sub": "owner", "iss": settings.JWT_ISSUER, "exp": 4102444800, "typ": "refresh"},
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALG,
    )
    assert access_subject(tok) is None
    assert access_subject(mint_access("owner")) == "owner"


@pytest.mark.asyncio
async def test_login_and_protected_route(client: httpx.AsyncClient, gate, real_auth):
    assert (await client.get("/v1/outfits")).status_code == 401

    bad = await client.post("/v1/auth/login", json={"password": "wrong"})
    assert bad.status_code == 401
    assert bad.json()["detail"] == "invalid_credentials"

    ok = await client.post("/v1/auth/login", json={"password": "let-me-in"})
    assert ok.status_code == 200
    token = ok.json()["access"]
    resp = await client.get("/v1/outfits", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200

    garbage = await client.get("/v1/outfits", headers={"Authorization": "Bearer garbage"})
    assert garbage.status_code == 401


@pytest.mark.asyncio
async def test_login_without_configured_password(client: httpx.AsyncClient, monkeypatch):
    monkeypatch.setattr(settings, "APP_PASSWORD", None)
    monkeypatch.setattr(settings, "APP_PASSWORD_HASH", None)
    passwords.gate_hash.cache_clear()
    resp = await client.post("/v1/auth/login", json={"password": "anything"})
    assert resp.status_code == 503
    passwords.gate_hash.cache_clear()


@pytest.mark.asyncio
async def test_health_and_root(client: httpx.AsyncClient):
    assert (await client.get("/v1/health")).json() == {"ok": True}
    root = (await client.get("/")).json()
    assert root["name"] == settings.APP_NAME
