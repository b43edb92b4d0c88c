"""
Pitch generation entry point.

Validation has already happened by the time ``generate_pitch`` runs (request
schema + identity dependency).  The deck and summary are assembled before the
session is touched, so no connection is held while the model is called; the
idea, deck and summary are then written together and committed once.
"""

import logging

from pitchcraft.core.pitch_assembler import PitchAssembler
from pitchcraft.db.gateway import EXECUTIVE_SUMMARIES, IDEAS, PITCH_DECKS, DocumentGateway
from pitchcraft.schemas.generation import GeneratePitchRequest, GeneratePitchResponse
from pitchcraft.schemas.idea import StartupIdeaRead
from pitchcraft.schemas.pitch import ExecutiveSummaryRead, PitchDeckRead, SummaryFormat

logger = logging.getLogger(__name__)


async def generate_pitch(
    user_id: str,
    payload: GeneratePitchRequest,
    gateway: DocumentGateway,
    assembler: PitchAssembler,
) -> GeneratePitchResponse:
    """Generate a pitch deck and executive summary, then store them with their idea."""
    assembled = await assembler.assemble(payload.startup_idea, payload.investor_persona)
    deck = assembled.deck

    idea_id = await gateway.create(
        IDEAS,
        {**payload.startup_idea.model_dump(mode="json"), "user_id": user_id},
    )
    deck_id = await gateway.create(
        PITCH_DECKS,
        {
            "idea_id": idea_id,
            "user_id": user_id,
            "title": deck.title,
            "slides": [slide.model_dump(mode="json") for slide in deck.slides],
            "investor_persona": (
                deck.investor_persona.model_dump(mode="json") if deck.investor_persona else None
            ),
            "status": deck.status.value,
        },
    )
    summary_id = await gateway.create(
        EXECUTIVE_SUMMARIES,
        {
            "idea_id": idea_id,
            "user_id": user_id,
            "content": assembled.executive_summary,
            "format": SummaryFormat.pdf.value,
        },
    )
    await gateway.commit()
    logger.info("Generated pitch deck %s for idea %s", deck_id, idea_id)

    return GeneratePitchResponse(
        pitch_deck=PitchDeckRead.model_validate(await gateway.get(PITCH_DECKS, deck_id)),
        executive_summary=ExecutiveSummaryRead.model_validate(
            await gateway.get(EXECUTIVE_SUMMARIES, summary_id)
        ),
        idea=StartupIdeaRead.model_validate(await gateway.get(IDEAS, idea_id)),
    )
