"""LLM provider adapters.

A single concrete implementation of ILLMProvider (askai/interfaces/llm_provider.py):
    - HTTPLLMProvider -- one instance per ProviderSpec in askai/config/provider_catalog.py

At startup, main.py builds one adapter per catalog entry (filtered and ordered
by config/config.yaml) and registers them in the ProviderRegistry.
"""

from askai.providers.llm.http_provider import HTTPLLMProvider

__all__ = ["HTTPLLMProvider"]
