"""
Security helpers for JWT authentication and caller resolution.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC‑SHA256 signatures and base64url encoding.  Tokens embed a
``roles`` claim listing the role names granted to the bearer and an
expiration timestamp (``exp``).  The secret key from the application
settings is used to sign and verify tokens.

Requests may also carry one of the static tokens configured via
``READ_TOKENS`` / ``WRITE_TOKENS``; these bypass JWT decoding.
"""

import base64
import hashlib
import hmac
import json
import time
from typing import Any, Callable, Dict, Iterable, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .authorization import ANONYMOUS, AuthorizationGate, Caller, Role, parse_roles
from .config import settings


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    subject: str,
    roles: Iterable[str],
    expires_delta: Optional[int] = None,
) -> str:
    """Create a signed JWT for ``subject`` granting ``roles``.

    Parameters
    ----------
    subject : str
        Value for the ``sub`` claim (e.g. an e‑mail address or service name).
    roles : Iterable[str]
        Role names to embed in the ``roles`` claim, e.g. ``["READ"]``.
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.

    Returns
    -------
    str
        A token of the form ``header.payload.signature``.
    """
    exp_seconds = expires_delta if expires_delta is not None else settings.access_token_expire_minutes * 60
    to_encode: Dict[str, Any] = {
        "sub": subject,
        "roles": [str(getattr(r, "value", r)) for r in roles],
        "exp": int(time.time()) + exp_seconds,
    }
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(',', ':')).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(',', ':')).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT token.

    Returns the payload if the signature matches and the token has not
    expired, otherwise ``None``.
    """
    parts = token.split('.')
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, settings.secret_key)
    try:
        actual_sig = _b64_url_decode(signature_b64)
    except (ValueError, TypeError):
        return None
    if not hmac.compare_digest(expected_sig, actual_sig):
        return None
    try:
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    if data.get("exp") is None or int(data["exp"]) < int(time.time()):
        return None
    return data


def _split_tokens(value: str) -> list[str]:
    return [t.strip() for t in value.split(',') if t.strip()]


def resolve_caller(token: Optional[str]) -> Caller:
    """Map a bearer token to a ``Caller``.

    Missing tokens resolve to the anonymous caller; the gate denies it.
    Invalid or expired tokens raise HTTP 401.
    """
    if not token:
        return ANONYMOUS
    if token in _split_tokens(settings.write_tokens):
        return Caller(subject="static_writer", roles=frozenset({Role.WRITE}))
    if token in _split_tokens(settings.read_tokens):
        return Caller(subject="static_reader", roles=frozenset({Role.READ}))
    payload = decode_access_token(token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    roles = payload.get("roles") or []
    if not isinstance(roles, list):
        roles = []
    return Caller(subject=str(payload.get("sub") or ""), roles=parse_roles(roles))


security = HTTPBearer(auto_error=False)


def get_current_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Caller:
    """Dependency that yields the caller for the current request."""
    return resolve_caller(credentials.credentials if credentials else None)


def require_role(role: Role) -> Callable[[Caller], Caller]:
    """Dependency factory enforcing that the caller holds ``role``.

    Use it as the first dependency of a route so that denial happens
    before request parameters are bound.  Raises ``AuthorizationDenied``,
    which the application's error handlers map to 401 or 403.
    """

    def _role_dependency(caller: Caller = Depends(get_current_caller)) -> Caller:
        return AuthorizationGate.check(caller, role)

    return _role_dependency
