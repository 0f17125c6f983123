"""Configuration management for blogcorpus."""

from .loader import Config, load_config, save_config
from .models import ConfigModel, ImageFormats, LintConfig, SiteConfig

__all__ = [
    "Config",
    "ConfigModel",
    "ImageFormats",
    "LintConfig",
    "SiteConfig",
    "load_config",
    "save_config",
]
