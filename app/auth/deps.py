# app/auth/deps.py
from fastapi import Header

from app.auth.jwt import decode_access_token
from app.core.errors import Unauthorized


def require_auth(authorization: str | None = Header(default=None)) -> str:
    """Bearer-token gate. Returns the caller's user id (token subject)."""
    scheme, _, token = (authorization or "").partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise Unauthorized()
    return decode_access_token(token)
