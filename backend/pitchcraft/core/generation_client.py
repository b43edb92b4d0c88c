"""
Text-generation client for pitch content.

``GenerationClient.generate`` makes exactly one backend call and never raises:
every failure is folded into one variant of ``GenerationOutcome`` so callers
can decide on a fallback by matching on the outcome type instead of parsing
error messages.

Outcomes
--------
- ``GenerationSuccess``  – non-blank generated text
- ``QuotaExceeded``      – HTTP 429 or an ``insufficient_quota`` error body
- ``TransientFailure``   – 5xx / 408 responses, timeouts, connection errors
- ``MalformedResponse``  – blank text or unexpected model behaviour
- ``GenerationFailed``   – anything else (auth errors, bad requests, ...)
"""

import asyncio
import logging
from typing import Annotated, Literal

import httpx
from openai import APIConnectionError, AsyncOpenAI
from pydantic import BaseModel, Field
from pydantic_ai import Agent
from pydantic_ai.exceptions import ModelHTTPError, UnexpectedModelBehavior
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings

from pitchcraft.core.config import Settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Outcome variants
# ---------------------------------------------------------------------------

class GenerationSuccess(BaseModel):
    kind: Literal["success"] = "success"
    text: str


class QuotaExceeded(BaseModel):
    kind: Literal["quota_exceeded"] = "quota_exceeded"
    detail: str = ""


class TransientFailure(BaseModel):
    kind: Literal["transient"] = "transient"
    detail: str = ""


class MalformedResponse(BaseModel):
    kind: Literal["malformed"] = "malformed"
    detail: str = ""


class GenerationFailed(BaseModel):
    kind: Literal["failed"] = "failed"
    detail: str = ""


GenerationOutcome = Annotated[
    GenerationSuccess | QuotaExceeded | TransientFailure | MalformedResponse | GenerationFailed,
    Field(discriminator="kind"),
]

_QUOTA_CODES = {"insufficient_quota", "rate_limit_exceeded"}


def _error_code(body: object) -> str | None:
    if isinstance(body, dict):
        code = body.get("code") or body.get("type")
        if code is None and isinstance(body.get("error"), dict):
            return _error_code(body["error"])
        return code
    return None


def classify_http_error(exc: ModelHTTPError) -> GenerationOutcome:
    """Map a backend HTTP error onto an outcome variant."""
    detail = f"HTTP {exc.status_code} from {exc.model_name}"
    if exc.status_code == 429 or _error_code(exc.body) in _QUOTA_CODES:
        return QuotaExceeded(detail=detail)
    if exc.status_code >= 500 or exc.status_code == 408:
        return TransientFailure(detail=detail)
    return GenerationFailed(detail=detail)


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

class GenerationClient:
    """Single-attempt text generation with a bounded number of in-flight calls."""

    def __init__(
        self,
        model: Model | str,
        *,
        temperature: float = 0.7,
        max_concurrency: int = 10,
    ) -> None:
        self._model = model
        self._temperature = temperature
        self._semaphore = asyncio.Semaphore(max_concurrency)
        self._agents: dict[str, Agent[None, str]] = {}

    @classmethod
    def from_settings(cls, config: Settings) -> "GenerationClient":
        """Build a client for the configured OpenAI model.

        The SDK's own retry loop is disabled, as is the agent's output retry
        (see ``_agent_for``): a failed call falls back to demo content.
        """
        openai_client = AsyncOpenAI(api_key=config.OPENAI_API_KEY, max_retries=0)
        model = OpenAIChatModel(
            config.GENERATION_MODEL,
            provider=OpenAIProvider(openai_client=openai_client),
        )
        return cls(
            model,
            temperature=config.GENERATION_TEMPERATURE,
            max_concurrency=config.GENERATION_MAX_CONCURRENCY,
        )

    def _agent_for(self, system_prompt: str) -> Agent[None, str]:
        agent = self._agents.get(system_prompt)
        if agent is None:
            agent = Agent(
                self._model,
                output_type=str,
                system_prompt=system_prompt,
                retries=0,
            )
            self._agents[system_prompt] = agent
        return agent

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        max_tokens: int,
    ) -> GenerationOutcome:
        """Run one generation and return its classified outcome."""
        agent = self._agent_for(system_prompt)
        model_settings = ModelSettings(max_tokens=max_tokens, temperature=self._temperature)

        try:
            async with self._semaphore:
                result = await agent.run(user_prompt, model_settings=model_settings)
        except ModelHTTPError as e:
            outcome = classify_http_error(e)
        except (APIConnectionError, httpx.TransportError, asyncio.TimeoutError) as e:
            outcome = TransientFailure(detail=f"{type(e).__name__}: {e}")
        except UnexpectedModelBehavior as e:
            outcome = MalformedResponse(detail=str(e))
        except Exception as e:
            logger.exception("Unclassified generation failure")
            outcome = GenerationFailed(detail=f"{type(e).__name__}: {e}")
        else:
            text = (result.output or "").strip()
            if not text:
                return MalformedResponse(detail="empty response")
            return GenerationSuccess(text=text)

        logger.warning("Generation failed (%s): %s", outcome.kind, outcome.detail)
        return outcome
