import base64
import json
import logging
import time
from typing import Optional

import httpx
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.x509 import load_pem_x509_certificate
from fastapi import Depends, HTTPException, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from .config import FIREBASE_PROJECT_ID, SESSION_COOKIE_NAME
from .database import get_db
from .domain.users.repository import UserRepository
from .models import User

logger = logging.getLogger(__name__)

GOOGLE_PUBLIC_KEYS_URL = (
    "https://www.googleapis.com/robot/v1/metadata/x509/securetoken@system.gserviceaccount.com"
)

# Cache for Google's public keys
_cached_keys = None


class AdminIdentity(BaseModel):
    """Who the identity provider says the caller is"""

    id: str
    display_name: Optional[str] = None


class TokenVerificationError(Exception):
    """Raised when an ID token cannot be trusted"""


class AuthProvider:
    """
    Capability the API needs from an identity provider.

    Implementations answer two questions about a request: is it
    authenticated, and who is the current user. Session lifecycle and
    token format stay inside the implementation.
    """

    async def current_user(self, request: Request) -> Optional[AdminIdentity]:
        raise NotImplementedError

    async def is_authenticated(self, request: Request) -> bool:
        return await self.current_user(request) is not None


def _b64decode(segment: str) -> bytes:
    padding_len = 4 - len(segment) % 4
    return base64.urlsafe_b64decode(segment + ("=" * padding_len if padding_len != 4 else ""))


async def get_google_public_keys(refresh: bool = False) -> Optional[dict]:
    """Fetch Google's public keys for Firebase token verification"""
    global _cached_keys
    if _cached_keys and not refresh:
        return _cached_keys

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(GOOGLE_PUBLIC_KEYS_URL)
            if response.status_code == 200:
                _cached_keys = response.json()
                logger.info(f"Fetched {len(_cached_keys)} Google public keys")
                return _cached_keys
            logger.error(f"Failed to fetch Google public keys: HTTP {response.status_code}")
    except httpx.HTTPError as e:
        logger.error(f"Error fetching Google public keys: {str(e)}")
    return None


async def verify_firebase_token(token: str, project_id: Optional[str]) -> dict:
    """
    Verify a Firebase ID token with full RS256 signature verification.
    Uses Google's public keys to verify the JWT signature, then checks
    audience, issuer, expiry, issue time and the auth_time claim.
    """
    if not project_id:
        raise TokenVerificationError("Firebase not configured")

    parts = token.split(".")
    if len(parts) != 3:
        raise TokenVerificationError("Invalid token format")

    header_b64, payload_b64, signature_b64 = parts

    try:
        header = json.loads(_b64decode(header_b64))
        decoded_payload = json.loads(_b64decode(payload_b64))
        signature = _b64decode(signature_b64)
    except ValueError as e:
        raise TokenVerificationError("Malformed token") from e

    if not isinstance(header, dict) or not isinstance(decoded_payload, dict):
        raise TokenVerificationError("Malformed token")

    try:
        expires_at = float(decoded_payload.get("exp", 0))
        issued_at = float(decoded_payload.get("iat", 0))
    except (TypeError, ValueError) as e:
        raise TokenVerificationError("Malformed token") from e

    kid = header.get("kid")
    if header.get("alg") != "RS256" or not kid:
        raise TokenVerificationError("Invalid token header")

    public_keys = await get_google_public_keys()
    if not public_keys or kid not in public_keys:
        # Keys rotate; retry once with a fresh copy
        public_keys = await get_google_public_keys(refresh=True)
        if not public_keys or kid not in public_keys:
            raise TokenVerificationError(f"Key ID {kid} not found in public keys")

    cert = load_pem_x509_certificate(public_keys[kid].encode(), default_backend())
    message = f"{header_b64}.{payload_b64}".encode()
    try:
        cert.public_key().verify(signature, message, padding.PKCS1v15(), hashes.SHA256())
    except InvalidSignature as e:
        raise TokenVerificationError("Invalid token signature") from e

    if decoded_payload.get("aud") != project_id:
        raise TokenVerificationError("Invalid token audience")
    if decoded_payload.get("iss") != f"https://securetoken.google.com/{project_id}":
        raise TokenVerificationError("Invalid token issuer")

    now = time.time()
    if expires_at < now:
        raise TokenVerificationError("Token has expired")
    # Allow 60 seconds clock skew
    if issued_at > now + 60:
        raise TokenVerificationError("Token issued in the future")

    if "auth_time" not in decoded_payload:
        raise TokenVerificationError("Invalid token claims")

    return decoded_payload


class FirebaseAuthProvider(AuthProvider):
    """Firebase ID tokens from the Authorization header or the session cookie"""

    def __init__(self, project_id: Optional[str] = FIREBASE_PROJECT_ID):
        self.project_id = project_id

    @staticmethod
    def _extract_token(request: Request) -> Optional[str]:
        authorization = request.headers.get("authorization", "")
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            return credentials.strip()
        return request.cookies.get(SESSION_COOKIE_NAME)

    async def current_user(self, request: Request) -> Optional[AdminIdentity]:
        token = self._extract_token(request)
        if not token:
            return None

        try:
            claims = await verify_firebase_token(token, self.project_id)
        except TokenVerificationError as e:
            logger.warning(f"Authentication failed for {request.url.path}: {e}")
            return None

        # Firebase ID tokens use 'sub' as the user ID claim
        uid = claims.get("sub") or claims.get("user_id")
        if not uid:
            logger.warning("Token missing user ID claim")
            return None

        return AdminIdentity(id=uid, display_name=claims.get("name") or claims.get("email"))


_auth_provider: AuthProvider = FirebaseAuthProvider()


def get_auth_provider() -> AuthProvider:
    """Dependency returning the configured identity provider"""
    return _auth_provider


async def get_current_identity(
    request: Request,
    provider: AuthProvider = Depends(get_auth_provider),
) -> Optional[AdminIdentity]:
    """Current identity, or None for anonymous callers"""
    return await provider.current_user(request)


async def require_admin(
    identity: Optional[AdminIdentity] = Depends(get_current_identity),
    db: Session = Depends(get_db),
) -> User:
    """Gate for admin routes: 401 without a session, else the local user row"""
    if identity is None:
        raise HTTPException(status_code=401, detail="Unauthorized")

    return UserRepository.upsert_user(db, identity.id, identity.display_name)
