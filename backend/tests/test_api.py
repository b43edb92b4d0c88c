"""End-to-end tests for the HTTP layer with demo-mode generation."""

import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from helpers import ACME, FakeGenerationClient
from pitchcraft.api.deps import get_db, get_pitch_assembler
from pitchcraft.core.demo_content import demo_executive_summary, demo_pitch_deck
from pitchcraft.core.generation_client import QuotaExceeded
from pitchcraft.core.pitch_assembler import PitchAssembler
from pitchcraft.core.security import create_access_token
from pitchcraft.db.database import build_sessionmaker
from pitchcraft.main import app
from pitchcraft.schemas.deck_content import SlideKind
from pitchcraft.schemas.idea import StartupIdeaBase

API = "/api/v1"


def auth(user_id: str = "user-1") -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def assembler() -> PitchAssembler:
    return PitchAssembler(None, demo_mode=True)


@pytest_asyncio.fixture
async def client(engine, assembler):
    sessions = build_sessionmaker(engine)

    async def override_get_db():
        async with sessions() as session:
            yield session
            await session.commit()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_pitch_assembler] = lambda: assembler
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def generate(client, user_id: str = "user-1", **extra):
    return await client.post(
        f"{API}/pitches/generate",
        json={"startup_idea": ACME, **extra},
        headers=auth(user_id),
    )


class TestGeneratePitch:
    @pytest.mark.asyncio
    async def test_demo_scenario(self, client):
        response = await generate(client)
        assert response.status_code == 201
        data = response.json()

        deck = data["pitch_deck"]
        assert deck["title"] == "Acme Pitch Deck"
        assert deck["status"] == "completed"
        assert [s["kind"] for s in deck["slides"]] == [k.value for k in SlideKind]
        assert [s["order"] for s in deck["slides"]] == list(range(1, 11))

        idea = StartupIdeaBase(**ACME)
        expected = [s.model_dump(mode="json") for s in demo_pitch_deck(idea)]
        assert deck["slides"] == expected

        summary = data["executive_summary"]
        assert summary["content"] == demo_executive_summary(idea)
        assert summary["format"] == "PDF"
        assert summary["idea_id"] == data["idea"]["id"] == deck["idea_id"]
        assert data["idea"]["user_id"] == "user-1"

    @pytest.mark.asyncio
    async def test_persona_is_stored(self, client):
        response = await generate(client, investor_persona={"type": "VC", "region": "EU", "focus_areas": ["retail"]})
        persona = response.json()["pitch_deck"]["investor_persona"]
        assert persona["type"] == "VC"
        assert persona["focus_areas"] == ["retail"]

    @pytest.mark.asyncio
    async def test_validation_before_generation(self, client, monkeypatch):
        calls = []

        async def tracking_assemble(self, idea, persona=None):
            calls.append(idea)

        monkeypatch.setattr(PitchAssembler, "assemble", tracking_assemble)
        response = await client.post(
            f"{API}/pitches/generate",
            json={"startup_idea": {**ACME, "problem_statement": ""}},
            headers=auth(),
        )

        assert response.status_code == 422
        assert calls == []
        assert (await client.get(f"{API}/ideas/", headers=auth())).json() == []

    @pytest.mark.asyncio
    async def test_unknown_industry_rejected(self, client):
        response = await client.post(
            f"{API}/pitches/generate",
            json={"startup_idea": {**ACME, "industry": "Crypto"}},
            headers=auth(),
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_requires_identity(self, client):
        response = await client.post(f"{API}/pitches/generate", json={"startup_idea": ACME})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_rejects_bad_token(self, client):
        response = await client.post(
            f"{API}/pitches/generate",
            json={"startup_idea": ACME},
            headers={"Authorization": "Bearer not-a-jwt"},
        )
        assert response.status_code == 401


class TestLiveGeneration:
    @pytest.fixture
    def assembler(self) -> PitchAssembler:
        client = FakeGenerationClient({SlideKind.team: QuotaExceeded(detail="HTTP 429")})
        return PitchAssembler(client, demo_mode=False)

    @pytest.mark.asyncio
    async def test_team_quota_falls_back(self, client):
        slides = {s["kind"]: s for s in (await generate(client)).json()["pitch_deck"]["slides"]}
        demo_team = demo_pitch_deck(StartupIdeaBase(**ACME))[SlideKind.team.position - 1]

        assert slides["team"] == demo_team.model_dump(mode="json")
        assert slides["problem"]["title"] == "Live problem"


class TestPitchDecks:
    @pytest.mark.asyncio
    async def test_list_newest_first_per_owner(self, client):
        first = (await generate(client)).json()["pitch_deck"]["id"]
        second = (await generate(client)).json()["pitch_deck"]["id"]
        await generate(client, user_id="user-2")

        decks = (await client.get(f"{API}/pitches/", headers=auth())).json()
        assert [d["id"] for d in decks] == [second, first]

    @pytest.mark.asyncio
    async def test_get_other_users_deck_is_404(self, client):
        deck_id = (await generate(client)).json()["pitch_deck"]["id"]
        assert (await client.get(f"{API}/pitches/{deck_id}", headers=auth())).status_code == 200
        assert (await client.get(f"{API}/pitches/{deck_id}", headers=auth("user-2"))).status_code == 404

    @pytest.mark.asyncio
    async def test_share_then_cannot_go_back(self, client):
        deck_id = (await generate(client)).json()["pitch_deck"]["id"]

        shared = await client.patch(f"{API}/pitches/{deck_id}", json={"status": "shared"}, headers=auth())
        assert shared.status_code == 200
        assert shared.json()["status"] == "shared"

        back = await client.patch(f"{API}/pitches/{deck_id}", json={"status": "draft"}, headers=auth())
        assert back.status_code == 400

    @pytest.mark.asyncio
    async def test_rename(self, client):
        deck_id = (await generate(client)).json()["pitch_deck"]["id"]
        renamed = await client.patch(f"{API}/pitches/{deck_id}", json={"title": "Seed deck"}, headers=auth())
        assert renamed.json()["title"] == "Seed deck"
        assert renamed.json()["status"] == "completed"

    @pytest.mark.asyncio
    async def test_delete_keeps_idea_and_summary(self, client):
        data = (await generate(client)).json()
        deck_id, idea_id = data["pitch_deck"]["id"], data["idea"]["id"]

        assert (await client.delete(f"{API}/pitches/{deck_id}", headers=auth())).status_code == 204
        assert (await client.get(f"{API}/pitches/{deck_id}", headers=auth())).status_code == 404
        assert (await client.get(f"{API}/ideas/{idea_id}", headers=auth())).status_code == 200
        summary = await client.get(f"{API}/ideas/{idea_id}/executive-summary", headers=auth())
        assert summary.status_code == 200


class TestIdeas:
    @pytest.mark.asyncio
    async def test_list_and_get(self, client):
        idea_id = (await generate(client)).json()["idea"]["id"]

        ideas = (await client.get(f"{API}/ideas/", headers=auth())).json()
        assert [i["id"] for i in ideas] == [idea_id]
        assert ideas[0]["market_size"] is None

        idea = (await client.get(f"{API}/ideas/{idea_id}", headers=auth())).json()
        assert idea["startup_name"] == "Acme"
        assert idea["industry"] == "B2C"

    @pytest.mark.asyncio
    async def test_summary_of_unknown_idea(self, client):
        response = await client.get(f"{API}/ideas/{uuid.uuid4()}/executive-summary", headers=auth())
        assert response.status_code == 404


class TestSetupCheck:
    @pytest.mark.asyncio
    async def test_reports_demo_mode(self, client):
        data = (await client.get(f"{API}/setup-check")).json()
        assert data["demo_mode"] is True
        assert data["status"] == "warning"
        assert data["checks"]["openai"]["status"] == "warning"
        assert data["recommendations"]["openai"]
