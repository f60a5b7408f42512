"""
OpenAI completion client.

Sends single-turn chat completion requests through the official async SDK.
"""

import logging

from openai import AsyncOpenAI

from lingualink.config import DEFAULT_OPENAI_MODEL

from .interface import BaseCompletionClient

logger = logging.getLogger(__name__)


class OpenAICompletionClient(BaseCompletionClient):
    """Completion client backed by the OpenAI chat completions API.

    SDK-level retries are disabled: failures are reported to the caller,
    who decides whether to resubmit.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_OPENAI_MODEL,
        timeout_seconds: float = 30.0,
        client: AsyncOpenAI | None = None,
    ):
        """Initialize the OpenAI client.

        Args:
            api_key: OpenAI secret key
            model: Chat model name
            timeout_seconds: Per-request timeout enforced by the SDK
            client: Pre-built SDK client (mainly for tests)
        """
        self._model = model
        self._client = client or AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,
        )

    @property
    def client_name(self) -> str:
        return f"openai-{self._model}"

    @property
    def model(self) -> str:
        return self._model

    async def complete(self, prompt: str, *, temperature: float, max_tokens: int) -> str:
        completion = await self._client.chat.completions.create(
            model=self._model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
            max_tokens=max_tokens,
        )

        if not completion.choices:
            logger.warning("Completion returned no choices")
            return ""

        content = completion.choices[0].message.content
        return (content or "").strip()

    async def close(self) -> None:
        await self._client.close()
