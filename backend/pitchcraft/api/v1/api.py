"""API v1: aggregates all routers under a single prefix."""

from fastapi import APIRouter

from pitchcraft.api.v1.routers import ideas, pitches, setup

router = APIRouter()
router.include_router(pitches.router)
router.include_router(ideas.router)
router.include_router(setup.router)
