import logging
from collections.abc import Callable

from anthropic import AsyncAnthropic
from openai import AsyncOpenAI

from app.config import (
    ANTHROPIC_API_KEY,
    LLM_PROVIDER,
    OPENAI_API_KEY,
    OPENAI_BASE_URL,
    SUMMARY_MAX_TOKENS,
    SUMMARY_MODEL,
)
from app.models.summary import GenerationResult

logger = logging.getLogger(__name__)

_SUMMARY_MODEL_DEFAULTS = {
    "openai": "gpt-4.1-mini",
    "anthropic": "claude-3-haiku-20240307",
}


def default_summary_model(provider: str) -> str:
    """Model for summaries: ``SUMMARY_MODEL`` if set, else the provider's default."""
    if SUMMARY_MODEL:
        return SUMMARY_MODEL
    return _SUMMARY_MODEL_DEFAULTS.get(provider, _SUMMARY_MODEL_DEFAULTS["openai"])


class LLMClient:
    def __init__(self) -> None:
        provider = (LLM_PROVIDER or "auto").lower()
        if provider == "auto":
            if ANTHROPIC_API_KEY:
                provider = "anthropic"
            elif OPENAI_API_KEY:
                provider = "openai"
            else:
                provider = "none"
        self.provider = provider

        self._anthropic = AsyncAnthropic(api_key=ANTHROPIC_API_KEY) if ANTHROPIC_API_KEY else None
        self._openai = (
            AsyncOpenAI(api_key=OPENAI_API_KEY, base_url=OPENAI_BASE_URL or None)
            if OPENAI_API_KEY
            else None
        )

    def available(self) -> bool:
        if self.provider == "anthropic":
            return self._anthropic is not None
        if self.provider == "openai":
            return self._openai is not None
        return False

    def summary_model(self) -> str:
        return default_summary_model(self.provider)

    async def generate_text(
        self,
        prompt: str,
        model: str,
        *,
        max_tokens: int = SUMMARY_MAX_TOKENS,
    ) -> GenerationResult:
        """Send one prompt to the configured provider and return its text.

        Makes exactly one request; provider and transport errors propagate.
        """
        if not self.available():
            raise RuntimeError("LLM provider unavailable")

        if self.provider == "anthropic":
            message = await self._anthropic.messages.create(
                model=model,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
            text = ""
            for block in message.content:
                if hasattr(block, "text"):
                    text += block.text
        else:
            response = await self._openai.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
            )
            text = response.choices[0].message.content or ""

        logger.info("Generated %d chars with %s/%s", len(text), self.provider, model)
        return GenerationResult(text=text)


_client: LLMClient | None = None


def get_llm_client() -> LLMClient:
    global _client
    if _client is None:
        _client = LLMClient()
    return _client


def get_llm_client_factory() -> Callable[[], LLMClient]:
    """FastAPI dependency; the shared client is built on first call."""
    return get_llm_client
