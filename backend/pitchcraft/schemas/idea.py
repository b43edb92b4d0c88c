"""
Pydantic models for the startup idea and the optional investor persona.

``StartupIdeaBase`` is frozen: once an idea enters the generation pipeline its
content is read-only.  Changing an idea means creating a new one.
"""

import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Industry(str, Enum):
    B2B = "B2B"
    B2C = "B2C"
    SAAS = "SaaS"
    ECOMMERCE = "E-commerce"
    FINTECH = "FinTech"
    HEALTHTECH = "HealthTech"
    EDTECH = "EdTech"
    OTHER = "Other"


class InvestorType(str, Enum):
    angel = "Angel"
    vc = "VC"
    corporate = "Corporate"
    government = "Government"


class InvestorRegion(str, Enum):
    au = "AU"
    us = "US"
    eu = "EU"
    asia = "Asia"


class InvestorPersona(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: InvestorType
    region: InvestorRegion
    focus_areas: list[str] | None = None
    investment_range: str | None = None


class StartupIdeaBase(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    startup_name: str = Field(min_length=1)
    problem_statement: str = Field(min_length=1)
    target_audience: str = Field(min_length=1)
    solution: str = Field(min_length=1)
    monetization_plan: str = Field(min_length=1)
    competitors: str = Field(min_length=1)
    market_size: str | None = None
    team_overview: str | None = None
    industry: Industry

    @field_validator("market_size", "team_overview")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        return v or None


class StartupIdeaCreate(StartupIdeaBase):
    """Incoming idea from the creation form, with the form's length limits."""

    startup_name: str = Field(min_length=1, max_length=100)
    problem_statement: str = Field(min_length=10, max_length=2000)
    target_audience: str = Field(min_length=5, max_length=1000)
    solution: str = Field(min_length=10, max_length=2000)
    monetization_plan: str = Field(min_length=10, max_length=1000)
    competitors: str = Field(min_length=5, max_length=1000)
    market_size: str | None = Field(default=None, max_length=1000)
    team_overview: str | None = Field(default=None, max_length=1000)


class StartupIdeaRead(StartupIdeaBase):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: UUID
    user_id: str
    created_at: datetime.datetime
    updated_at: datetime.datetime | None
