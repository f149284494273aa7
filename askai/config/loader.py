"""YAML configuration loader for the provider line-up.

# ─── WHERE SETTINGS COME FROM ──────────────────────────────────────────
#
#   .env / environment vars  -> Settings (credentials, timeouts, prompt
#                               policy, concurrency cap, paths, logging)
#   config/config.yaml       -> the provider line-up only
#
# The YAML file tunes which providers run and how:
#
#   providers:
#     order: [mistral, groq, gemini, bedrock_claude_sonnet]
#     overrides:
#       groq:
#         timeout: 15
#         fallback_models: [llama-3.1-8b-instant]
#
# `order` both filters and reorders the catalog; ids not in the catalog
# are logged and skipped.  Any other top-level section is ignored.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

import yaml
from pydantic import ValidationError

from askai.config.settings import Settings
from askai.models.provider import ProviderSpec
from askai.utils.errors import ConfigurationError
from askai.utils.logging import get_logger

_logger = get_logger(__name__)

# Only these ProviderSpec fields may be changed from YAML.
_OVERRIDABLE_FIELDS = frozenset({"timeout", "fallback_models", "default_model", "url"})


def load_config(path: str | None = None, settings: Settings | None = None) -> dict[str, Any]:
    """Read the YAML configuration file.

    Args:
        path: Path to the YAML configuration file.  Defaults to
              ``settings.config_path``.  A missing file is not an error.
        settings: Supplies the default path; a fresh instance when omitted.

    Returns:
        The parsed mapping, or an empty dict when the file is absent or empty.

    Raises:
        ConfigurationError: If the file exists but is not valid YAML or its
            top level is not a mapping.
    """
    settings = settings or Settings()
    config_path = Path(path or settings.config_path)

    if not config_path.exists():
        _logger.debug("config_file_absent", path=str(config_path))
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(message=f"Invalid YAML in {config_path}: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ConfigurationError(message=f"{config_path} must contain a mapping at top level")
    return loaded


def resolve_provider_specs(
    catalog: Iterable[ProviderSpec],
    config: dict | None = None,
) -> list[ProviderSpec]:
    """Apply the ``providers`` section of *config* to the catalog.

    Returns the specs in registry order: the YAML ``order`` list when given,
    otherwise catalog order.  Per-provider ``overrides`` replace individual
    spec fields.

    Raises:
        ConfigurationError: If an override names an unsupported field or
            fails validation.
    """
    section = (config or {}).get("providers") or {}
    by_id = {spec.id: spec for spec in catalog}

    order = section.get("order")
    if order:
        ids: list[str] = []
        for raw_id in order:
            provider_id = str(raw_id).strip().lower()
            if provider_id not in by_id:
                _logger.warning("config_unknown_provider", provider=provider_id)
                continue
            if provider_id not in ids:
                ids.append(provider_id)
    else:
        ids = list(by_id)

    overrides = section.get("overrides") or {}
    specs: list[ProviderSpec] = []
    for provider_id in ids:
        spec = by_id[provider_id]
        changes = overrides.get(provider_id) or {}
        if changes:
            unknown = set(changes) - _OVERRIDABLE_FIELDS
            if unknown:
                raise ConfigurationError(
                    message=f"Unsupported override field(s): {', '.join(sorted(unknown))}",
                    provider_name=provider_id,
                )
            try:
                spec = ProviderSpec.model_validate({**spec.model_dump(), **changes})
            except ValidationError as exc:
                raise ConfigurationError(
                    message=f"Invalid override: {exc}",
                    provider_name=provider_id,
                ) from exc
        specs.append(spec)
    return specs
