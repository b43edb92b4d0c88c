from uuid import UUID

from sqlalchemy import Column, JSON, Text
from sqlmodel import Field

from pitchcraft.models.base import OwnedDocument


class PitchDeck(OwnedDocument, table=True):
    __tablename__ = "pitch_decks"

    # Weak reference to the idea; no foreign key, no cascade
    idea_id: UUID = Field(index=True)
    title: str = Field(max_length=200)
    status: str = Field(default="draft", max_length=20)  # draft, completed, shared

    # Ordered list of PitchSlide dicts
    slides: list[dict] = Field(default_factory=list, sa_column=Column(JSON))
    investor_persona: dict | None = Field(default=None, sa_column=Column(JSON, nullable=True))


class ExecutiveSummary(OwnedDocument, table=True):
    __tablename__ = "executive_summaries"

    idea_id: UUID = Field(index=True)
    content: str = Field(default="", sa_column=Column(Text, default=""))
    format: str = Field(default="PDF", max_length=10)  # DOCX, PDF, Notion
