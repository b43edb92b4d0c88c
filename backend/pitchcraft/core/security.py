from datetime import datetime, timedelta, timezone

import jwt
from fastapi import HTTPException, Request

from pitchcraft.core.config import settings


# ── JWT access tokens ────────────────────────────────────────

def create_access_token(user_id: str) -> str:
    """Create a short-lived JWT access token for an opaque user id."""
    payload = {
        "sub": user_id,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        "iat": datetime.now(timezone.utc),
        "type": "access",
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_access_token(token: str) -> dict:
    """Decode and validate an access JWT. Returns the payload or raises."""
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
        if payload.get("type") != "access":
            raise HTTPException(status_code=401, detail="Invalid token type")
        return payload
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token")


def extract_token(request: Request) -> str | None:
    """Read the access token from the httpOnly cookie or a Bearer header."""
    token = request.cookies.get("access_token")
    if token:
        return token
    auth_header = request.headers.get("authorization", "")
    scheme, _, credentials = auth_header.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


# ── FastAPI dependencies ─────────────────────────────────────

async def get_current_user_id(request: Request) -> str:
    """FastAPI dependency: returns the caller's user id or raises 401."""
    token = extract_token(request)
    if not token:
        raise HTTPException(status_code=401, detail="User authentication required")

    payload = verify_access_token(token)
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token payload")
    return str(user_id)
