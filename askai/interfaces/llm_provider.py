"""Abstract base class for LLM provider adapters.

Defines the contract every provider adapter fulfils so the aggregator can
fan a prompt out without knowing which remote API sits behind each one.
The only concrete implementation today is the data-driven
``HTTPLLMProvider``; tests substitute small fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

# The literal text an adapter returns when the provider answered but the
# response held no recognisable answer.  Part of the public contract.
NO_CONTENT = "No content returned."


class ILLMProvider(ABC):
    """Contract for one remote LLM provider."""

    @abstractmethod
    async def ask(self, prompt: str) -> str:
        """Send *prompt* to the provider and return its answer text.

        Parameters
        ----------
        prompt:
            The already-normalised user prompt.

        Returns
        -------
        str
            The stripped answer text, or :data:`NO_CONTENT` when the call
            succeeded but the payload carried no text.

        Raises
        ------
        askai.utils.errors.ProviderCallError
            If the transport fails or the provider returns an HTTP error.
        """

    @abstractmethod
    def describe(self) -> dict[str, Any]:
        """Return public metadata: id, name, group, enabled, coming_soon, model."""

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return the registry id, e.g. ``"openai"``."""

    @abstractmethod
    def get_display_name(self) -> str:
        """Return the client-facing name, e.g. ``"OpenAI"``."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return ``True`` if a credential is configured.

        Does not contact the provider.  An unavailable adapter is still
        listed and still answers -- with a placeholder.
        """

    @property
    @abstractmethod
    def timeout(self) -> float:
        """Upper bound in seconds for one :meth:`ask` call, retries included."""

    def placeholder_text(self) -> str:
        """Text returned instead of calling out when no credential is set."""
        return f"{self.get_display_name()} placeholder response (no API key set)"
