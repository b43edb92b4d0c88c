import uuid

from fastapi import APIRouter, Depends

from pitchcraft.api.deps import get_current_user_id, get_gateway
from pitchcraft.controllers import pitch_controller
from pitchcraft.db.gateway import DocumentGateway
from pitchcraft.schemas.idea import StartupIdeaRead
from pitchcraft.schemas.pitch import ExecutiveSummaryRead

router = APIRouter(prefix="/ideas", tags=["ideas"])


@router.get("/", response_model=list[StartupIdeaRead])
async def list_ideas(
    user_id: str = Depends(get_current_user_id),
    gateway: DocumentGateway = Depends(get_gateway),
):
    """List the current user's startup ideas, newest first."""
    return await pitch_controller.list_ideas(user_id, gateway)


@router.get("/{idea_id}", response_model=StartupIdeaRead)
async def get_idea(
    idea_id: uuid.UUID,
    user_id: str = Depends(get_current_user_id),
    gateway: DocumentGateway = Depends(get_gateway),
):
    return await pitch_controller.get_idea(user_id, idea_id, gateway)


@router.get("/{idea_id}/executive-summary", response_model=ExecutiveSummaryRead)
async def get_executive_summary(
    idea_id: uuid.UUID,
    user_id: str = Depends(get_current_user_id),
    gateway: DocumentGateway = Depends(get_gateway),
):
    """Get the executive summary generated for an idea."""
    return await pitch_controller.get_executive_summary(user_id, idea_id, gateway)
