import uuid

from fastapi import HTTPException

from pitchcraft.db.gateway import EXECUTIVE_SUMMARIES, IDEAS, PITCH_DECKS, DocumentGateway
from pitchcraft.models.idea import StartupIdea
from pitchcraft.models.pitch_deck import ExecutiveSummary, PitchDeck
from pitchcraft.schemas.deck_content import DeckStatus

_STATUS_ORDER = list(DeckStatus)


async def list_pitch_decks(user_id: str, gateway: DocumentGateway) -> list[PitchDeck]:
    return await gateway.list_by_owner(PITCH_DECKS, user_id)


async def get_pitch_deck(user_id: str, deck_id: uuid.UUID, gateway: DocumentGateway) -> PitchDeck:
    deck = await gateway.get(PITCH_DECKS, deck_id)
    if not deck or deck.user_id != user_id:
        raise HTTPException(status_code=404, detail="Pitch deck not found")
    return deck


async def update_pitch_deck(
    user_id: str,
    deck_id: uuid.UUID,
    title: str | None,
    deck_status: DeckStatus | None,
    gateway: DocumentGateway,
) -> PitchDeck:
    deck = await get_pitch_deck(user_id, deck_id, gateway)
    changes: dict = {}
    if title is not None:
        changes["title"] = title
    if deck_status is not None:
        current = DeckStatus(deck.status)
        if _STATUS_ORDER.index(deck_status) < _STATUS_ORDER.index(current):
            raise HTTPException(
                status_code=400,
                detail=f"Cannot move a pitch deck from '{current.value}' back to '{deck_status.value}'.",
            )
        changes["status"] = deck_status.value
    if not changes:
        return deck
    return await gateway.update(PITCH_DECKS, deck.id, changes)


async def delete_pitch_deck(user_id: str, deck_id: uuid.UUID, gateway: DocumentGateway) -> None:
    deck = await get_pitch_deck(user_id, deck_id, gateway)
    await gateway.delete(PITCH_DECKS, deck.id)


async def list_ideas(user_id: str, gateway: DocumentGateway) -> list[StartupIdea]:
    return await gateway.list_by_owner(IDEAS, user_id)


async def get_idea(user_id: str, idea_id: uuid.UUID, gateway: DocumentGateway) -> StartupIdea:
    idea = await gateway.get(IDEAS, idea_id)
    if not idea or idea.user_id != user_id:
        raise HTTPException(status_code=404, detail="Idea not found")
    return idea


async def get_executive_summary(
    user_id: str, idea_id: uuid.UUID, gateway: DocumentGateway
) -> ExecutiveSummary:
    idea = await get_idea(user_id, idea_id, gateway)  # Verify ownership
    summary = await gateway.find_first(EXECUTIVE_SUMMARIES, idea_id=idea.id)
    if not summary:
        raise HTTPException(status_code=404, detail="Executive summary not found")
    return summary
