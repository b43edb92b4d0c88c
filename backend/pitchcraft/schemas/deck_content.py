"""
Pydantic models for generated pitch deck content.

The pitch assembler produces a ``PitchDeckContent`` with exactly one
``PitchSlide`` per ``SlideKind``, in ``SlideKind`` order.  The persistence
layer stores the slides as JSON on the ``pitch_decks`` table.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, model_validator

from pitchcraft.schemas.idea import InvestorPersona


class SlideKind(str, Enum):
    title = "title"
    problem = "problem"
    solution = "solution"
    market = "market"
    business_model = "business-model"
    go_to_market = "go-to-market"
    competitive_advantage = "competitive-advantage"
    team = "team"
    financials = "financials"
    ask = "ask"

    @property
    def position(self) -> int:
        """1-based position of this kind in the deck."""
        return list(SlideKind).index(self) + 1

    @property
    def default_title(self) -> str:
        return DEFAULT_SLIDE_TITLES[self]


DEFAULT_SLIDE_TITLES: dict[SlideKind, str] = {
    SlideKind.title: "Company Overview",
    SlideKind.problem: "The Problem",
    SlideKind.solution: "Our Solution",
    SlideKind.market: "Market Opportunity",
    SlideKind.business_model: "Business Model",
    SlideKind.go_to_market: "Go-to-Market Strategy",
    SlideKind.competitive_advantage: "Competitive Advantage",
    SlideKind.team: "Our Team",
    SlideKind.financials: "Financial Projections",
    SlideKind.ask: "The Ask",
}


class DeckStatus(str, Enum):
    draft = "draft"
    completed = "completed"
    shared = "shared"


class PitchSlide(BaseModel):
    id: str
    kind: SlideKind
    title: str
    body: str
    order: int
    notes: str | None = None

    @classmethod
    def for_kind(cls, kind: SlideKind, title: str, body: str) -> PitchSlide:
        order = kind.position
        return cls(id=f"slide-{order}", kind=kind, title=title, body=body, order=order)


class PitchDeckContent(BaseModel):
    title: str
    slides: list[PitchSlide]
    investor_persona: InvestorPersona | None = None
    status: DeckStatus = DeckStatus.draft

    @model_validator(mode="after")
    def check_slide_sequence(self) -> PitchDeckContent:
        kinds = [slide.kind for slide in self.slides]
        if kinds != list(SlideKind):
            raise ValueError("slides must contain exactly one slide per kind, in deck order")
        for expected, slide in enumerate(self.slides, start=1):
            if slide.order != expected:
                raise ValueError(f"slide {slide.kind.value} has order {slide.order}, expected {expected}")
        return self


class AssembledPitch(BaseModel):
    deck: PitchDeckContent
    executive_summary: str
