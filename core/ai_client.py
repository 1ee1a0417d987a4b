# core/ai_client.py
"""
Text generation client.

The rest of the app only needs one call: prompt + model in, text out.
Anything with a matching `generate` method can stand in for OpenAI
(tests pass simple fakes).
"""

import logging
from typing import Optional, Protocol

from openai import OpenAI, OpenAIError

from core import settings

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """The language model did not return usable text."""


class TextGenerator(Protocol):
    def generate(self, prompt: str, model: str) -> str:
        ...


class OpenAITextGenerator:
    """
    OpenAI chat-completions backed generator.

    SDK-level retries are disabled: callers apply their own bounded retry.
    """

    def __init__(
        self,
        api_key: str,
        timeout: float = 60.0,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ):
        self.client = OpenAI(api_key=api_key, max_retries=0, timeout=timeout)
        self.max_tokens = max_tokens
        self.temperature = temperature

    def generate(self, prompt: str, model: str) -> str:
        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except OpenAIError as exc:
            raise GenerationError(f"AI generate request failed: {exc}") from exc

        text = response.choices[0].message.content if response.choices else None
        if not text or not text.strip():
            raise GenerationError("AI generate returned an empty response")
        return text.strip()


def build_generator() -> Optional[OpenAITextGenerator]:
    """
    Generator from environment settings.
    None when no API key is configured.
    """
    api_key = settings.get_api_key()
    if not api_key:
        logger.warning("OPENAI_API_KEY not set; report summaries use fallback text")
        return None
    return OpenAITextGenerator(api_key=api_key)
