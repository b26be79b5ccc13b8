"""Configuration module for markasset."""

from markasset.config.settings import (
    ConcurrencyConfig,
    ImageConfig,
    MarkassetSettings,
    OutputOptions,
    get_settings,
    reload_settings,
)

__all__ = [
    "ConcurrencyConfig",
    "ImageConfig",
    "MarkassetSettings",
    "OutputOptions",
    "get_settings",
    "reload_settings",
]
