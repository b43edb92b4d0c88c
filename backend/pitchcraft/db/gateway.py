"""
Document-store style access to persisted ideas, decks and summaries.

Records go in as plain dicts and come out as SQLModel instances.  Collections
are looked up by name so controllers never touch table classes directly.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm.attributes import flag_modified
from sqlmodel.ext.asyncio.session import AsyncSession

from pitchcraft.models.base import OwnedDocument, utc_now
from pitchcraft.models.idea import StartupIdea
from pitchcraft.models.pitch_deck import ExecutiveSummary, PitchDeck

logger = logging.getLogger(__name__)

IDEAS = "ideas"
PITCH_DECKS = "pitch_decks"
EXECUTIVE_SUMMARIES = "executive_summaries"

COLLECTIONS: dict[str, type[OwnedDocument]] = {
    IDEAS: StartupIdea,
    PITCH_DECKS: PitchDeck,
    EXECUTIVE_SUMMARIES: ExecutiveSummary,
}

_JSON_FIELDS = {"slides", "investor_persona"}


class DocumentGateway:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @staticmethod
    def _model(collection: str) -> type[OwnedDocument]:
        try:
            return COLLECTIONS[collection]
        except KeyError:
            raise KeyError(f"Unknown collection '{collection}'") from None

    async def create(self, collection: str, record: dict[str, Any]) -> UUID:
        """Insert *record* and return its generated id."""
        model = self._model(collection)
        doc = model(**record)
        self.db.add(doc)
        await self.db.flush()
        await self.db.refresh(doc)
        logger.debug("Created %s/%s", collection, doc.id)
        return doc.id

    async def get(self, collection: str, doc_id: UUID) -> OwnedDocument | None:
        return await self.db.get(self._model(collection), doc_id)

    async def list_by_owner(self, collection: str, owner_id: str) -> list[OwnedDocument]:
        """All records of *owner_id*, newest first."""
        model = self._model(collection)
        result = await self.db.execute(
            select(model)
            .where(model.user_id == owner_id)
            .order_by(model.created_at.desc())
        )
        return list(result.scalars().all())

    async def find_first(self, collection: str, **criteria: Any) -> OwnedDocument | None:
        """Newest record whose columns equal every value in *criteria*."""
        model = self._model(collection)
        query = select(model)
        for column, value in criteria.items():
            query = query.where(getattr(model, column) == value)
        result = await self.db.execute(query.order_by(model.created_at.desc()).limit(1))
        return result.scalars().first()

    async def update(self, collection: str, doc_id: UUID, partial: dict[str, Any]) -> OwnedDocument | None:
        """Apply *partial* to an existing record.  Returns ``None`` if it does not exist."""
        doc = await self.get(collection, doc_id)
        if doc is None:
            return None
        for key, value in partial.items():
            setattr(doc, key, value)
            if key in _JSON_FIELDS:
                # JSON columns don't track in-place mutations
                flag_modified(doc, key)
        doc.updated_at = utc_now()
        self.db.add(doc)
        await self.db.flush()
        await self.db.refresh(doc)
        return doc

    async def delete(self, collection: str, doc_id: UUID) -> bool:
        doc = await self.get(collection, doc_id)
        if doc is None:
            return False
        await self.db.delete(doc)
        await self.db.flush()
        return True

    async def commit(self) -> None:
        await self.db.commit()
