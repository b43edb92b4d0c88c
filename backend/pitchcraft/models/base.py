from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import DateTime, func
from sqlmodel import SQLModel, Field


def utc_now() -> datetime:
    """Return current UTC datetime with timezone info."""
    return datetime.now(timezone.utc)


def created_at_field() -> Any:
    """Factory for created_at field to avoid shared Column objects."""
    return Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"server_default": func.now(), "nullable": False},
        index=True,
    )


def updated_at_field() -> Any:
    """Factory for updated_at field to avoid shared Column objects."""
    return Field(
        default=None,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"onupdate": func.now(), "nullable": True},
    )


class OwnedDocument(SQLModel):
    """Base for stored documents: UUID key, owning user id, timestamps.

    ``user_id`` is the opaque identifier handed out by the identity provider;
    there is no users table to reference.
    """

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        index=True,
    )
    user_id: str = Field(max_length=128, index=True)

    created_at: datetime = created_at_field()
    updated_at: datetime | None = updated_at_field()
