"""Configuration loading with deterministic precedence.

The cascade is always:
1) CLI/init params
2) Environment variables
3) ~/.config/terror/terror.yaml (or an explicit ``config_path``)
4) Built-in defaults

Environment variable format:
- Prefix: ``TERROR_``
- Nested keys: ``__`` separator
- Example: ``TERROR_CAPABILITIES__TIMESTAMP=true`` -> ``capabilities.timestamp = True``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from pydantic_settings import SettingsConfigDict

from .models import TerrorSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> TerrorSettings:
    """Load validated settings by applying the standard precedence cascade."""
    settings_cls = TerrorSettings
    if config_path is not None:
        resolved = Path(config_path)

        class _PathSettings(TerrorSettings):
            model_config = SettingsConfigDict(yaml_file=resolved)

        settings_cls = _PathSettings

    _require_mapping_file(settings_cls.model_config.get("yaml_file"))
    return settings_cls(**dict(cli_params or {}))


def _require_mapping_file(path: object) -> None:
    """Reject YAML config files whose top level is not a mapping."""
    if not isinstance(path, (str, Path)):
        return
    resolved = Path(path)
    if not resolved.exists():
        return

    import yaml

    with resolved.open("r", encoding="utf-8") as handle:
        parsed = yaml.safe_load(handle)
    if parsed is not None and not isinstance(parsed, dict):
        raise ValueError(f"Config file must contain a top-level mapping: {resolved}")
