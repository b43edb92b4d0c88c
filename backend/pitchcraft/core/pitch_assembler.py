"""
Assembly of a complete pitch deck and executive summary for one idea.

The ten slide generations and the summary generation are independent and run
concurrently; results are joined in ``SlideKind`` order regardless of which
call finishes first.
"""

import asyncio
import logging

from pitchcraft.core.config import Settings
from pitchcraft.core.demo_content import demo_executive_summary
from pitchcraft.core.generation_client import GenerationClient, GenerationSuccess
from pitchcraft.core.prompts import SUMMARY_SYSTEM_PROMPT, build_summary_prompt
from pitchcraft.core.slide_generator import DEFAULT_SLIDE_MAX_TOKENS, generate_slide
from pitchcraft.schemas.deck_content import (
    AssembledPitch,
    DeckStatus,
    PitchDeckContent,
    PitchSlide,
    SlideKind,
)
from pitchcraft.schemas.idea import InvestorPersona, StartupIdeaBase

logger = logging.getLogger(__name__)


class PitchAssembler:
    """Builds decks and summaries, live or from demo content.

    *demo_mode* is fixed at construction so every slide of a run comes from
    the same source when the backend is simply not configured.
    """

    def __init__(
        self,
        client: GenerationClient | None,
        *,
        demo_mode: bool,
        slide_max_tokens: int = DEFAULT_SLIDE_MAX_TOKENS,
        summary_max_tokens: int = 1000,
    ) -> None:
        if client is None and not demo_mode:
            raise ValueError("a generation client is required unless demo_mode is set")
        self.client = client
        self.demo_mode = demo_mode
        self.slide_max_tokens = slide_max_tokens
        self.summary_max_tokens = summary_max_tokens

    async def generate_slides(
        self,
        idea: StartupIdeaBase,
        persona: InvestorPersona | None = None,
    ) -> list[PitchSlide]:
        return list(await asyncio.gather(*(
            generate_slide(
                idea,
                kind,
                client=self.client,
                persona=persona,
                demo_mode=self.demo_mode,
                max_tokens=self.slide_max_tokens,
            )
            for kind in SlideKind
        )))

    async def generate_executive_summary(self, idea: StartupIdeaBase) -> str:
        if self.demo_mode:
            return demo_executive_summary(idea)

        outcome = await self.client.generate(
            SUMMARY_SYSTEM_PROMPT,
            build_summary_prompt(idea),
            max_tokens=self.summary_max_tokens,
        )
        if isinstance(outcome, GenerationSuccess):
            return outcome.text

        logger.warning("Falling back to demo executive summary (%s)", outcome.kind)
        return demo_executive_summary(idea)

    async def assemble(
        self,
        idea: StartupIdeaBase,
        persona: InvestorPersona | None = None,
    ) -> AssembledPitch:
        """Generate the full deck and the executive summary for *idea*."""
        if self.demo_mode:
            logger.info("Using demo mode for pitch generation: %s", idea.startup_name)

        slides, summary = await asyncio.gather(
            self.generate_slides(idea, persona),
            self.generate_executive_summary(idea),
        )
        deck = PitchDeckContent(
            title=f"{idea.startup_name} Pitch Deck",
            slides=slides,
            investor_persona=persona,
            status=DeckStatus.completed,
        )
        return AssembledPitch(deck=deck, executive_summary=summary)


def build_pitch_assembler(config: Settings) -> PitchAssembler:
    """Create the assembler for *config*, deciding demo mode once."""
    if config.demo_mode:
        logger.warning("OpenAI API key not configured - pitch generation runs in demo mode")
        return PitchAssembler(None, demo_mode=True)
    return PitchAssembler(
        GenerationClient.from_settings(config),
        demo_mode=False,
        slide_max_tokens=config.SLIDE_MAX_TOKENS,
        summary_max_tokens=config.SUMMARY_MAX_TOKENS,
    )
