"""Test data and a stand-in generation client shared by the test modules."""

import asyncio

from pitchcraft.core.generation_client import GenerationSuccess
from pitchcraft.core.prompts import SLIDE_CHECKLISTS, SUMMARY_SYSTEM_PROMPT

ACME = {
    "startup_name": "Acme",
    "problem_statement": "Widgets are expensive",
    "solution": "Cheaper widgets",
    "target_audience": "Retailers",
    "monetization_plan": "Per-unit markup",
    "competitors": "WidgetCo",
    "industry": "B2C",
}

class FakeGenerationClient:
    """Stand-in for GenerationClient that answers per slide kind.

    *outcomes* maps a SlideKind (or ``"summary"``) to the outcome to return;
    anything not listed gets a successful, kind-specific response.
    """

    def __init__(self, outcomes: dict | None = None, default=None, delay: float = 0.0):
        self.outcomes = outcomes or {}
        self.default = default
        self.delay = delay
        self.calls: list[tuple[str, str, int]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @staticmethod
    def kind_of(system_prompt: str, user_prompt: str):
        if system_prompt == SUMMARY_SYSTEM_PROMPT:
            return "summary"
        for kind, checklist in SLIDE_CHECKLISTS.items():
            if checklist in user_prompt:
                return kind
        raise AssertionError("prompt matches no slide kind")

    async def generate(self, system_prompt: str, user_prompt: str, *, max_tokens: int):
        self.calls.append((system_prompt, user_prompt, max_tokens))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1

        kind = self.kind_of(system_prompt, user_prompt)
        if kind in self.outcomes:
            return self.outcomes[kind]
        if self.default is not None:
            return self.default
        if kind == "summary":
            return GenerationSuccess(text="Live executive summary")
        return GenerationSuccess(text=f"# Live {kind.value}\nLive body for {kind.value}")

