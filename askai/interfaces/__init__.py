"""Public interface definitions for external data sources.

Every remote LLM and the AI directory are reached only through the abstract
base classes in this package; concrete adapters live in ``askai/providers/``
and are assembled in ``askai/main.py``.

    Interface            →  Concrete implementations
    ──────────────────────────────────────────────────
    ILLMProvider         →  HTTPLLMProvider (one instance per ProviderSpec)
    IDirectoryProvider   →  JSONDirectoryProvider
"""

from askai.interfaces.directory_provider import IDirectoryProvider
from askai.interfaces.llm_provider import NO_CONTENT, ILLMProvider

__all__ = ["IDirectoryProvider", "ILLMProvider", "NO_CONTENT"]
