import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

from pitchcraft.schemas.deck_content import DeckStatus, PitchSlide
from pitchcraft.schemas.idea import InvestorPersona


class SummaryFormat(str, Enum):
    docx = "DOCX"
    pdf = "PDF"
    notion = "Notion"


class PitchDeckRead(BaseModel):
    id: UUID
    idea_id: UUID
    user_id: str
    title: str
    slides: list[PitchSlide]
    investor_persona: InvestorPersona | None = None
    status: DeckStatus
    created_at: datetime.datetime
    updated_at: datetime.datetime | None

    model_config = {"from_attributes": True}


class PitchDeckUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    status: DeckStatus | None = None  # forward only: draft -> completed -> shared


class ExecutiveSummaryRead(BaseModel):
    id: UUID
    idea_id: UUID
    user_id: str
    content: str
    format: SummaryFormat
    created_at: datetime.datetime
    updated_at: datetime.datetime | None

    model_config = {"from_attributes": True}
