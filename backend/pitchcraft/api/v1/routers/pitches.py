import uuid

from fastapi import APIRouter, Depends, status

from pitchcraft.api.deps import get_current_user_id, get_gateway, get_pitch_assembler
from pitchcraft.controllers import generation_controller, pitch_controller
from pitchcraft.core.pitch_assembler import PitchAssembler
from pitchcraft.db.gateway import DocumentGateway
from pitchcraft.schemas.generation import GeneratePitchRequest, GeneratePitchResponse
from pitchcraft.schemas.pitch import PitchDeckRead, PitchDeckUpdate

router = APIRouter(prefix="/pitches", tags=["pitches"])


@router.post("/generate", response_model=GeneratePitchResponse, status_code=status.HTTP_201_CREATED)
async def generate_pitch(
    payload: GeneratePitchRequest,
    user_id: str = Depends(get_current_user_id),
    gateway: DocumentGateway = Depends(get_gateway),
    assembler: PitchAssembler = Depends(get_pitch_assembler),
):
    """Store a startup idea and generate its pitch deck and executive summary."""
    return await generation_controller.generate_pitch(user_id, payload, gateway, assembler)


@router.get("/", response_model=list[PitchDeckRead])
async def list_pitch_decks(
    user_id: str = Depends(get_current_user_id),
    gateway: DocumentGateway = Depends(get_gateway),
):
    """List the current user's pitch decks, newest first."""
    return await pitch_controller.list_pitch_decks(user_id, gateway)


@router.get("/{deck_id}", response_model=PitchDeckRead)
async def get_pitch_deck(
    deck_id: uuid.UUID,
    user_id: str = Depends(get_current_user_id),
    gateway: DocumentGateway = Depends(get_gateway),
):
    """Get a specific pitch deck."""
    return await pitch_controller.get_pitch_deck(user_id, deck_id, gateway)


@router.patch("/{deck_id}", response_model=PitchDeckRead)
async def update_pitch_deck(
    deck_id: uuid.UUID,
    payload: PitchDeckUpdate,
    user_id: str = Depends(get_current_user_id),
    gateway: DocumentGateway = Depends(get_gateway),
):
    """Rename a pitch deck or move it forward in its lifecycle."""
    return await pitch_controller.update_pitch_deck(
        user_id, deck_id, title=payload.title, deck_status=payload.status, gateway=gateway
    )


@router.delete("/{deck_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pitch_deck(
    deck_id: uuid.UUID,
    user_id: str = Depends(get_current_user_id),
    gateway: DocumentGateway = Depends(get_gateway),
):
    """Delete a pitch deck. The idea and its summary are kept."""
    await pitch_controller.delete_pitch_deck(user_id, deck_id, gateway)
