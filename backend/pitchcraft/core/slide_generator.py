"""
Generation of a single pitch slide.

A slide moves through ``PROMPTED -> REQUESTED -> PARSED | FALLBACK -> DONE``.
The backend is asked once; on any non-success outcome the slide is taken from
the demo content for the same kind.  ``generate_slide`` always returns a slide.
"""

import logging
import re

from pitchcraft.core.demo_content import demo_slide
from pitchcraft.core.generation_client import GenerationClient, GenerationSuccess
from pitchcraft.core.prompts import SLIDE_SYSTEM_PROMPT, build_slide_prompt
from pitchcraft.schemas.deck_content import PitchSlide, SlideKind
from pitchcraft.schemas.idea import InvestorPersona, StartupIdeaBase

logger = logging.getLogger(__name__)

FAILURE_NOTICE = "Content generation failed. Please try again."

DEFAULT_SLIDE_MAX_TOKENS = 500

_HEADING_MARKERS = re.compile(r"^#+\s*")


def parse_slide_response(text: str, kind: SlideKind) -> tuple[str, str] | None:
    """Split raw model output into ``(title, body)``.

    The first non-empty line, minus any leading ``#`` markers, is the title;
    the remaining non-empty lines form the body.  Returns ``None`` when there
    is no body to show.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        return None
    title = _HEADING_MARKERS.sub("", lines[0].strip()).strip() or kind.default_title
    body = "\n".join(lines[1:]).strip()
    if not body:
        return None
    return title, body


def fallback_slide(idea: StartupIdeaBase, kind: SlideKind) -> PitchSlide:
    """Demo slide for *kind*, or a failure notice if even that is unavailable."""
    try:
        slide = demo_slide(idea, kind)
    except Exception:
        logger.exception("Demo content unavailable for %s slide", kind.value)
        slide = None
    if slide is None:
        return PitchSlide.for_kind(kind, kind.default_title, FAILURE_NOTICE)
    return slide


async def generate_slide(
    idea: StartupIdeaBase,
    kind: SlideKind,
    *,
    client: GenerationClient | None,
    persona: InvestorPersona | None = None,
    demo_mode: bool = False,
    max_tokens: int = DEFAULT_SLIDE_MAX_TOKENS,
) -> PitchSlide:
    """Generate one slide of *kind* for *idea*."""
    if demo_mode or client is None:
        return fallback_slide(idea, kind)

    prompt = build_slide_prompt(idea, kind, persona)
    outcome = await client.generate(SLIDE_SYSTEM_PROMPT, prompt, max_tokens=max_tokens)

    if isinstance(outcome, GenerationSuccess):
        parsed = parse_slide_response(outcome.text, kind)
        if parsed is not None:
            title, body = parsed
            return PitchSlide.for_kind(kind, title, body)
        reason = "malformed"
    else:
        reason = outcome.kind

    logger.warning("Falling back to demo content for %s slide (%s)", kind.value, reason)
    return fallback_slide(idea, kind)
