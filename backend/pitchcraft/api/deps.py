"""
Shared FastAPI dependencies, the single source of truth for DI.

All routers should import get_db, get_gateway, get_current_user_id and
get_pitch_assembler from HERE, not directly from core or db modules.
"""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends, Request
from sqlmodel.ext.asyncio.session import AsyncSession

from pitchcraft.core.config import ModeEnum, settings
from pitchcraft.core.pitch_assembler import PitchAssembler, build_pitch_assembler
from pitchcraft.core.security import extract_token, get_current_user_id as _require_auth
from pitchcraft.db.database import get_db as _get_db
from pitchcraft.db.gateway import DocumentGateway

__all__ = ["get_db", "get_gateway", "get_current_user_id", "get_pitch_assembler"]

# Dev user ID, consistent across restarts for dev testing
DEV_USER_ID = "dev-user-0001"


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session."""
    async for session in _get_db():
        yield session


async def get_gateway(db: AsyncSession = Depends(get_db)) -> DocumentGateway:
    return DocumentGateway(db)


async def get_current_user_id(request: Request) -> str:
    """
    Require authentication. In dev mode with no token, falls back to a fixed
    dev user id so you can test protected endpoints without logging in.
    """
    if extract_token(request) is None and settings.MODE == ModeEnum.development:
        return DEV_USER_ID

    return await _require_auth(request)


@lru_cache
def get_pitch_assembler() -> PitchAssembler:
    """One assembler per process, so the backend concurrency cap is shared."""
    return build_pitch_assembler(settings)
