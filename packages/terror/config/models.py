"""Typed configuration models for terror runtime settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from packages.terror.capabilities import Capabilities

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "terror" / "terror.yaml"


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "terror"
    environment: str = "dev"


class CapabilitySettings(BaseModel):
    """Optional error-object capabilities enabled for this deployment."""

    timestamp: bool = False
    identifier: bool = False
    reference: bool = True
    tags: bool = True

    def to_capabilities(self) -> Capabilities:
        """Return the immutable capability set these settings describe."""
        return Capabilities(
            timestamp=self.timestamp,
            identifier=self.identifier,
            reference=self.reference,
            tags=self.tags,
        )


class TerrorSettings(BaseSettings):
    """Root runtime settings resolved from init/env/yaml/defaults sources."""

    model_config = SettingsConfigDict(
        env_prefix="TERROR_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
        yaml_file=DEFAULT_CONFIG_PATH,
        yaml_file_encoding="utf-8",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    capabilities: CapabilitySettings = Field(default_factory=CapabilitySettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > built-in defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )
