# Import all models so SQLModel.metadata registers them for Alembic autogenerate.
from pitchcraft.models.base import OwnedDocument  # noqa: F401
from pitchcraft.models.idea import StartupIdea  # noqa: F401
from pitchcraft.models.pitch_deck import ExecutiveSummary, PitchDeck  # noqa: F401
