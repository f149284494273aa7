"""Ask-AI services -- provider registry and the fan-out aggregator."""

from askai.services.aggregator import QueryAggregator
from askai.services.provider_registry import ProviderRegistry, canonical_provider_id

__all__ = ["ProviderRegistry", "QueryAggregator", "canonical_provider_id"]
