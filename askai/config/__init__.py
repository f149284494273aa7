"""Configuration module -- Settings, the provider catalog, and the YAML loader."""

from askai.config.loader import load_config, resolve_provider_specs
from askai.config.provider_catalog import PROVIDER_CATALOG, catalog_by_id
from askai.config.settings import Settings

__all__ = [
    "PROVIDER_CATALOG",
    "Settings",
    "catalog_by_id",
    "load_config",
    "resolve_provider_specs",
]
