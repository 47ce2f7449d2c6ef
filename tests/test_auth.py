import asyncio
import base64
import json
import time
from datetime import datetime, timedelta, timezone

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.x509.oid import NameOID
from starlette.requests import Request

from barbershop import auth
from barbershop.auth import FirebaseAuthProvider, TokenVerificationError, verify_firebase_token
from barbershop.models import User


def _b64(data) -> str:
    return base64.urlsafe_b64encode(json.dumps(data).encode()).decode().rstrip("=")


def _request(headers: dict = None, cookies: str = None) -> Request:
    raw_headers = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    if cookies:
        raw_headers.append((b"cookie", cookies.encode()))
    return Request({"type": "http", "method": "GET", "path": "/api/auth/user", "headers": raw_headers})


def test_auth_user_returns_identity(client, admin_headers, db):
    response = client.get("/api/auth/user", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"id": "admin-1", "displayName": "Shop Owner"}
    assert db.query(User).filter(User.id == "admin-1").one().display_name == "Shop Owner"


def test_auth_user_is_upserted_once(client, admin_headers, db):
    client.get("/api/auth/user", headers=admin_headers)
    client.get("/api/auth/user", headers=admin_headers)

    assert db.query(User).count() == 1


def test_auth_user_without_session_is_401(client):
    response = client.get("/api/auth/user")

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}


def test_wrong_token_is_401(client):
    response = client.get("/api/appointments", headers={"Authorization": "Bearer nope"})

    assert response.status_code == 401


def test_login_redirects_to_identity_provider(client):
    response = client.get("/api/login", params={"next": "/admin"}, follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"].endswith("/login?next=%2Fadmin")


def test_logout_clears_session_cookie(client):
    response = client.get("/api/logout", follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"] == "/"
    assert "session=" in response.headers["set-cookie"]


def test_firebase_provider_without_token_is_anonymous():
    provider = FirebaseAuthProvider(project_id="demo-project")

    assert asyncio.run(provider.current_user(_request())) is None
    assert asyncio.run(provider.is_authenticated(_request())) is False


def test_firebase_provider_reads_bearer_before_cookie():
    request = _request({"Authorization": "Bearer header-token"}, cookies="session=cookie-token")

    assert FirebaseAuthProvider._extract_token(request) == "header-token"
    assert FirebaseAuthProvider._extract_token(_request(cookies="session=cookie-token")) == "cookie-token"


def test_firebase_provider_maps_claims_to_identity(monkeypatch):
    async def fake_verify(token, project_id):
        return {"sub": "uid-123", "name": "Ana", "email": "ana@example.com"}

    monkeypatch.setattr(auth, "verify_firebase_token", fake_verify)
    provider = FirebaseAuthProvider(project_id="demo-project")

    identity = asyncio.run(provider.current_user(_request({"Authorization": "Bearer abc.def.ghi"})))

    assert identity.id == "uid-123"
    assert identity.display_name == "Ana"


def test_firebase_provider_treats_bad_token_as_anonymous():
    provider = FirebaseAuthProvider(project_id="demo-project")

    identity = asyncio.run(provider.current_user(_request({"Authorization": "Bearer not-a-jwt"})))

    assert identity is None


def test_verify_requires_project_id():
    with pytest.raises(TokenVerificationError, match="not configured"):
        asyncio.run(verify_firebase_token("a.b.c", None))


def test_verify_rejects_non_rs256_header():
    token = f"{_b64({'alg': 'HS256', 'kid': 'k1'})}.{_b64({'sub': 'x'})}.c2ln"

    with pytest.raises(TokenVerificationError, match="Invalid token header"):
        asyncio.run(verify_firebase_token(token, "demo-project"))


def test_client_session_urls_match_routes(public_api):
    response = public_api.http.get(public_api.logout_url, follow_redirects=False)

    assert response.status_code == 302
    assert public_api.http.get(public_api.login_url, follow_redirects=False).status_code == 302


PROJECT_ID = "demo-project"


@pytest.fixture(scope="module")
def signing_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="module")
def certificate_pem(signing_key):
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "securetoken.system.gserviceaccount.com")])
    now = datetime.now(timezone.utc)
    certificate = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(signing_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=1))
        .sign(signing_key, hashes.SHA256())
    )
    return certificate.public_bytes(serialization.Encoding.PEM).decode()


@pytest.fixture
def google_keys(monkeypatch, certificate_pem):
    """Serve the test certificate under kid "k1"; records each refresh flag"""
    calls = []
    keys = {"k1": certificate_pem}

    async def fake_keys(refresh=False):
        calls.append(refresh)
        return dict(keys)

    monkeypatch.setattr(auth, "get_google_public_keys", fake_keys)
    return {"calls": calls, "keys": keys}


def _claims(**overrides) -> dict:
    now = int(time.time())
    claims = {
        "aud": PROJECT_ID,
        "iss": f"https://securetoken.google.com/{PROJECT_ID}",
        "sub": "uid-42",
        "name": "Shop Owner",
        "iat": now - 10,
        "exp": now + 3600,
        "auth_time": now - 10,
    }
    claims.update(overrides)
    return claims


def _sign(key, claims: dict, kid: str = "k1") -> str:
    signing_input = f"{_b64({'alg': 'RS256', 'kid': kid, 'typ': 'JWT'})}.{_b64(claims)}"
    signature = key.sign(signing_input.encode(), padding.PKCS1v15(), hashes.SHA256())
    return f"{signing_input}.{base64.urlsafe_b64encode(signature).decode().rstrip('=')}"


def test_verify_accepts_signed_token(signing_key, google_keys):
    claims = asyncio.run(verify_firebase_token(_sign(signing_key, _claims()), PROJECT_ID))

    assert claims["sub"] == "uid-42"
    assert google_keys["calls"] == [False]


def test_provider_returns_identity_for_signed_token(signing_key, google_keys):
    token = _sign(signing_key, _claims())
    provider = FirebaseAuthProvider(project_id=PROJECT_ID)

    identity = asyncio.run(provider.current_user(_request({"Authorization": f"Bearer {token}"})))

    assert identity.id == "uid-42"
    assert identity.display_name == "Shop Owner"


def test_verify_rejects_tampered_payload(signing_key, google_keys):
    header, _, signature = _sign(signing_key, _claims()).split(".")
    forged = f"{header}.{_b64(_claims(sub='someone-else'))}.{signature}"

    with pytest.raises(TokenVerificationError, match="Invalid token signature"):
        asyncio.run(verify_firebase_token(forged, PROJECT_ID))


@pytest.mark.parametrize(
    "overrides,message",
    [
        ({"aud": "other-project"}, "Invalid token audience"),
        ({"iss": "https://securetoken.google.com/other-project"}, "Invalid token issuer"),
        ({"exp": 1000}, "Token has expired"),
        ({"iat": int(time.time()) + 3600}, "Token issued in the future"),
    ],
)
def test_verify_rejects_bad_claims(signing_key, google_keys, overrides, message):
    token = _sign(signing_key, _claims(**overrides))

    with pytest.raises(TokenVerificationError, match=message):
        asyncio.run(verify_firebase_token(token, PROJECT_ID))


def test_verify_requires_auth_time(signing_key, google_keys):
    claims = _claims()
    del claims["auth_time"]

    with pytest.raises(TokenVerificationError, match="Invalid token claims"):
        asyncio.run(verify_firebase_token(_sign(signing_key, claims), PROJECT_ID))


def test_unknown_kid_refreshes_keys_once(signing_key, certificate_pem, monkeypatch):
    calls = []

    async def rotating_keys(refresh=False):
        calls.append(refresh)
        return {"k2": certificate_pem} if refresh else {"k1": certificate_pem}

    monkeypatch.setattr(auth, "get_google_public_keys", rotating_keys)
    claims = asyncio.run(verify_firebase_token(_sign(signing_key, _claims(), kid="k2"), PROJECT_ID))

    assert claims["sub"] == "uid-42"
    assert calls == [False, True]


def test_unknown_kid_after_refresh_is_rejected(signing_key, google_keys):
    with pytest.raises(TokenVerificationError, match="Key ID k9 not found"):
        asyncio.run(verify_firebase_token(_sign(signing_key, _claims(), kid="k9"), PROJECT_ID))

    assert google_keys["calls"] == [False, True]


@pytest.mark.parametrize(
    "header,payload",
    [
        ([], {}),
        ({"alg": "RS256", "kid": "k1"}, []),
        ({"alg": "RS256", "kid": "k1"}, {"exp": "soon"}),
        ({"alg": "RS256", "kid": "k1"}, {"iat": {"when": "now"}}),
    ],
)
def test_verify_rejects_non_object_segments(header, payload):
    token = f"{_b64(header)}.{_b64(payload)}.c2ln"

    with pytest.raises(TokenVerificationError, match="Malformed token"):
        asyncio.run(verify_firebase_token(token, PROJECT_ID))


def test_garbage_bearer_token_is_unauthorized(engine, monkeypatch):
    from fastapi.testclient import TestClient

    from barbershop import main

    monkeypatch.setattr(main, "SEED_DEMO_DATA", False)
    monkeypatch.setattr(auth, "_auth_provider", FirebaseAuthProvider(project_id=PROJECT_ID))
    token = f"{_b64([])}.{_b64({})}.c2ln"

    with TestClient(main.app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/api/appointments", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}
