from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi import HTTPException
from starlette.requests import Request

from pitchcraft.core.config import settings
from pitchcraft.core.security import (
    create_access_token,
    extract_token,
    get_current_user_id,
    verify_access_token,
)


def make_request(headers: dict[str, str]) -> Request:
    raw = [(k.lower().encode(), v.encode()) for k, v in headers.items()]
    return Request({"type": "http", "headers": raw})


def test_token_round_trip():
    payload = verify_access_token(create_access_token("user-42"))
    assert payload["sub"] == "user-42"
    assert payload["type"] == "access"


def test_expired_token():
    token = jwt.encode(
        {"sub": "u", "type": "access", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )
    with pytest.raises(HTTPException) as exc:
        verify_access_token(token)
    assert exc.value.detail == "Token expired"


def test_wrong_token_type():
    token = jwt.encode({"sub": "u", "type": "refresh"}, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    with pytest.raises(HTTPException) as exc:
        verify_access_token(token)
    assert exc.value.detail == "Invalid token type"


def test_cookie_wins_over_header():
    request = make_request({"Cookie": "access_token=from-cookie", "Authorization": "Bearer from-header"})
    assert extract_token(request) == "from-cookie"


def test_bearer_header():
    assert extract_token(make_request({"Authorization": "Bearer abc"})) == "abc"
    assert extract_token(make_request({"Authorization": "Basic abc"})) is None
    assert extract_token(make_request({})) is None


@pytest.mark.asyncio
async def test_current_user_requires_token():
    with pytest.raises(HTTPException) as exc:
        await get_current_user_id(make_request({}))
    assert exc.value.status_code == 401


@pytest.mark.asyncio
async def test_current_user_from_bearer():
    request = make_request({"Authorization": f"Bearer {create_access_token('user-7')}"})
    assert await get_current_user_id(request) == "user-7"
