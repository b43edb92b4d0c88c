from sqlalchemy import Column, Text
from sqlmodel import Field

from pitchcraft.models.base import OwnedDocument


class StartupIdea(OwnedDocument, table=True):
    __tablename__ = "startup_ideas"

    startup_name: str = Field(max_length=100)
    problem_statement: str = Field(sa_column=Column(Text, nullable=False))
    target_audience: str = Field(sa_column=Column(Text, nullable=False))
    solution: str = Field(sa_column=Column(Text, nullable=False))
    monetization_plan: str = Field(sa_column=Column(Text, nullable=False))
    competitors: str = Field(sa_column=Column(Text, nullable=False))
    market_size: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
    team_overview: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
    industry: str = Field(max_length=20)  # B2B, B2C, SaaS, E-commerce, FinTech, HealthTech, EdTech, Other
