import pytest

from helpers import ACME
from pitchcraft.controllers.generation_controller import generate_pitch
from pitchcraft.core.pitch_assembler import PitchAssembler
from pitchcraft.db.gateway import EXECUTIVE_SUMMARIES, IDEAS, PITCH_DECKS
from pitchcraft.schemas.generation import GeneratePitchRequest


class RecordingAssembler(PitchAssembler):
    """Demo assembler that notes whether the session was in a transaction."""

    def __init__(self, gateway, *, fail: bool = False):
        super().__init__(None, demo_mode=True)
        self.gateway = gateway
        self.fail = fail
        self.in_transaction: list[bool] = []

    async def assemble(self, idea, persona=None):
        self.in_transaction.append(self.gateway.db.in_transaction())
        if self.fail:
            raise RuntimeError("assembly failed")
        return await super().assemble(idea, persona)


@pytest.fixture
def payload() -> GeneratePitchRequest:
    return GeneratePitchRequest(startup_idea=ACME)


@pytest.mark.asyncio
async def test_assembles_before_touching_the_session(gateway, payload):
    assembler = RecordingAssembler(gateway)
    response = await generate_pitch("user-1", payload, gateway, assembler)

    assert assembler.in_transaction == [False]
    assert response.pitch_deck.idea_id == response.idea.id
    assert response.executive_summary.idea_id == response.idea.id


@pytest.mark.asyncio
async def test_stores_idea_deck_and_summary(gateway, payload):
    await generate_pitch("user-1", payload, gateway, RecordingAssembler(gateway))

    assert len(await gateway.list_by_owner(IDEAS, "user-1")) == 1
    assert len(await gateway.list_by_owner(PITCH_DECKS, "user-1")) == 1
    assert len(await gateway.list_by_owner(EXECUTIVE_SUMMARIES, "user-1")) == 1


@pytest.mark.asyncio
async def test_failed_assembly_stores_nothing(gateway, payload):
    with pytest.raises(RuntimeError):
        await generate_pitch("user-1", payload, gateway, RecordingAssembler(gateway, fail=True))

    assert await gateway.list_by_owner(IDEAS, "user-1") == []
    assert await gateway.list_by_owner(PITCH_DECKS, "user-1") == []
