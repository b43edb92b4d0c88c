"""Setup check. No authentication required."""

from fastapi import APIRouter

from pitchcraft.controllers import setup_controller
from pitchcraft.core.config import settings
from pitchcraft.schemas.setup_check import SetupCheckRead

router = APIRouter(tags=["setup"])


@router.get("/setup-check", response_model=SetupCheckRead)
async def setup_check():
    """Report whether pitches are generated live or from demo content."""
    return setup_controller.check_setup(settings)
