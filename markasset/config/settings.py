"""Configuration settings using pydantic-settings."""

from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict, YamlConfigSettingsSource

from markasset.config.constants import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_HASH_SIZE,
    DEFAULT_IMAGE_BASE,
)


class OutputOptions(BaseModel):
    """A single bundler output target (Rollup ``output`` options)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Template string, or a callable receiving an AssetInfo
    asset_file_names: str | Callable[..., str] | None = Field(default=None, alias="assetFileNames")


class ImageConfig(BaseModel):
    """Image naming configuration."""

    hash_size: int = Field(default=DEFAULT_HASH_SIZE, ge=0)
    base: str = DEFAULT_IMAGE_BASE  # Prefix applied by the static image service


class ConcurrencyConfig(BaseModel):
    """Concurrency configuration."""

    image_workers: int | None = Field(default=None, ge=1)  # None = all images at once


class MarkassetSettings(BaseSettings):
    """Main configuration class for markasset."""

    model_config = SettingsConfigDict(
        env_prefix="MARKASSET_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        """Customize settings sources to include YAML file."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=DEFAULT_CONFIG_FILE),
            file_secret_settings,
        )

    # Project root; ~/assets/ references resolve below <root_path>/src/assets
    root_path: Path
    # Optional base URL used to make resolved sources absolute
    root_url: str | None = None
    # Bundler output options; a list means several outputs and is rejected at resolution time
    build_output: OutputOptions | list[OutputOptions] | None = None

    image: ImageConfig = Field(default_factory=ImageConfig)
    concurrency: ConcurrencyConfig = Field(default_factory=ConcurrencyConfig)

    # Global settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: str | None = None
    log_json: bool = False


@lru_cache
def get_settings() -> MarkassetSettings:
    """Get cached settings instance."""
    return MarkassetSettings()


def reload_settings() -> MarkassetSettings:
    """Force reload settings (clear cache)."""
    get_settings.cache_clear()
    return get_settings()
