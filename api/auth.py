from __future__ import annotations

import json
import logging
import os
import time
import urllib.request
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, Request
from jose import jwt
from jose.exceptions import JWTError

logger = logging.getLogger(__name__)

ASYMMETRIC_ALGORITHMS = ["RS256", "ES256"]
SHARED_SECRET_ALGORITHM = "HS256"
JWKS_TTL_SECONDS = 3600


@dataclass
class AuthContext:
    user_id: str
    claims: Dict[str, Any] = field(default_factory=dict)

    @property
    def email(self) -> Optional[str]:
        return self.claims.get("email")


@dataclass
class _KeySetCache:
    keys: List[Dict[str, Any]] = field(default_factory=list)
    fetched_at: float = 0.0

    def fresh(self, ttl_seconds: int) -> bool:
        return bool(self.keys) and (time.time() - self.fetched_at) < ttl_seconds


_KEY_SET = _KeySetCache()


def _supabase_url() -> str:
    url = os.getenv("SUPABASE_URL", "").strip().rstrip("/")
    if not url:
        raise RuntimeError("SUPABASE_URL is not set")
    return url


def _download_key_set() -> List[Dict[str, Any]]:
    url = _supabase_url() + "/auth/v1/.well-known/jwks.json"
    req = urllib.request.Request(url, headers={"Accept": "application/json"}, method="GET")
    try:
        with urllib.request.urlopen(req, timeout=10) as resp:
            payload = json.loads(resp.read().decode("utf-8"))
    except (OSError, ValueError) as e:
        raise RuntimeError(f"Could not fetch signing keys: {e}") from e
    return list(payload.get("keys") or [])


def signing_keys(refresh: bool = False, ttl_seconds: int = JWKS_TTL_SECONDS) -> List[Dict[str, Any]]:
    """Project signing keys, cached for ``ttl_seconds``."""
    if refresh or not _KEY_SET.fresh(ttl_seconds):
        _KEY_SET.keys = _download_key_set()
        _KEY_SET.fetched_at = time.time()
    return _KEY_SET.keys


def _key_for(token: str) -> Dict[str, Any]:
    try:
        kid = jwt.get_unverified_header(token).get("kid")
    except JWTError as e:
        raise RuntimeError(f"Malformed JWT header: {e}") from e

    keys = signing_keys()
    match = next((k for k in keys if k.get("kid") == kid), None)
    if match is None:
        # Keys rotate; retry once against a fresh set before giving up.
        match = next((k for k in signing_keys(refresh=True) if k.get("kid") == kid), None)
    if match is None:
        raise RuntimeError(f"No signing key for kid {kid!r}")
    return match


def parse_bearer_token(authorization_header: Optional[str]) -> Optional[str]:
    if not authorization_header:
        return None
    parts = authorization_header.strip().split()
    if len(parts) != 2:
        return None
    scheme, token = parts
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def verify_supabase_jwt(token: str) -> AuthContext:
    """
    Verify a Supabase access token and return the caller.

    Projects on the legacy shared secret set ``SUPABASE_JWT_SECRET``; others
    are checked against the project's published signing keys.
    """
    secret = os.getenv("SUPABASE_JWT_SECRET", "").strip()
    # aud differs between projects ("authenticated" in most), so it is not enforced.
    options = {"verify_aud": False}
    try:
        if secret:
            claims = jwt.decode(token, secret, algorithms=[SHARED_SECRET_ALGORITHM], options=options)
        else:
            claims = jwt.decode(token, _key_for(token), algorithms=ASYMMETRIC_ALGORITHMS, options=options)
    except JWTError as e:
        raise RuntimeError(f"Invalid JWT: {e}") from e

    sub = claims.get("sub")
    if not sub:
        raise RuntimeError("JWT missing 'sub'")
    return AuthContext(user_id=str(sub), claims=dict(claims))


def require_user(request: Request) -> AuthContext:
    """FastAPI dependency: 401 unless a valid bearer token is present."""
    token = parse_bearer_token(request.headers.get("Authorization"))
    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized")
    try:
        return verify_supabase_jwt(token)
    except RuntimeError as e:
        logger.warning("Rejected bearer token: %s", e)
        raise HTTPException(status_code=401, detail="Invalid token")
