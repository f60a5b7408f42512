"""
Mock completion clients for testing.

Provide deterministic behavior without calling the completion API.
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass

from .interface import BaseCompletionClient


@dataclass
class CompletionCall:
    """A recorded call to a mock client."""

    prompt: str
    temperature: float
    max_tokens: int


class MockCompletionClient(BaseCompletionClient):
    """Deterministic client returning scripted responses.

    Responses are taken in order from ``responses``; once exhausted, the
    ``responder`` callable (if any) is used, then ``default_response``.
    Every call is recorded in ``calls``.
    """

    def __init__(
        self,
        responses: list[str] | None = None,
        default_response: str = "Hola",
        responder: Callable[[str], str] | None = None,
        latency_ms: int = 0,
    ):
        self._responses = list(responses or [])
        self._default_response = default_response
        self._responder = responder
        self._latency_ms = latency_ms
        self.calls: list[CompletionCall] = []
        self.closed = False

    @property
    def client_name(self) -> str:
        return "mock-completion-v1"

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def complete(self, prompt: str, *, temperature: float, max_tokens: int) -> str:
        self.calls.append(CompletionCall(prompt, temperature, max_tokens))

        if self._latency_ms > 0:
            await asyncio.sleep(self._latency_ms / 1000.0)

        if self._responses:
            return self._responses.pop(0).strip()
        if self._responder is not None:
            return self._responder(prompt).strip()
        return self._default_response.strip()

    async def close(self) -> None:
        self.closed = True


class MockFailingCompletionClient(MockCompletionClient):
    """Mock client that raises a configured exception.

    By default every call fails. ``fail_on_calls`` restricts failures to the
    given 1-based call numbers; other calls behave like MockCompletionClient.
    """

    def __init__(
        self,
        exception: Exception,
        fail_on_calls: set[int] | None = None,
        responses: list[str] | None = None,
        default_response: str = "Hola",
    ):
        super().__init__(responses=responses, default_response=default_response)
        self._exception = exception
        self._fail_on_calls = fail_on_calls

    @property
    def client_name(self) -> str:
        return f"mock-failing-{type(self._exception).__name__}"

    async def complete(self, prompt: str, *, temperature: float, max_tokens: int) -> str:
        call_number = len(self.calls) + 1
        if self._fail_on_calls is None or call_number in self._fail_on_calls:
            self.calls.append(CompletionCall(prompt, temperature, max_tokens))
            raise self._exception
        return await super().complete(prompt, temperature=temperature, max_tokens=max_tokens)
