"""
Completion client interface contract.

The translation pipeline talks to the external completion API only through
this interface. Clients are constructed explicitly and passed in, so real
providers and mocks are interchangeable.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class CompletionClient(Protocol):
    """Protocol defining the completion client contract.

    All completion clients (real and mock) must implement this interface.
    """

    @property
    def client_name(self) -> str:
        """Return the provider identifier (e.g., 'openai-gpt-3.5-turbo')."""
        ...

    async def complete(self, prompt: str, *, temperature: float, max_tokens: int) -> str:
        """Send a single-turn prompt and return the trimmed completion text.

        Args:
            prompt: User prompt
            temperature: Sampling temperature
            max_tokens: Upper bound on generated tokens

        Returns:
            Completion text, stripped; empty string when the provider
            returned no content.

        Raises:
            Provider exceptions unchanged; classification happens in the
            pipeline.
        """
        ...

    async def close(self) -> None:
        """Release resources (HTTP connections, etc.)."""
        ...


class BaseCompletionClient(ABC):
    """Abstract base class for completion client implementations."""

    @property
    @abstractmethod
    def client_name(self) -> str:
        """Subclasses must provide their identifier."""
        pass

    @abstractmethod
    async def complete(self, prompt: str, *, temperature: float, max_tokens: int) -> str:
        """Subclasses must implement the completion call."""
        pass

    async def close(self) -> None:
        """Default implementation does nothing. Override if cleanup needed."""
        return  # noqa: B027 - intentionally empty default implementation
