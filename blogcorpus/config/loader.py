"""Configuration loader."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .models import ConfigModel, SiteConfig

CONFIG_ENV = "BLOGCORPUS_CONFIG"
DEFAULT_CONFIG_NAME = "blogcorpus.yaml"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            env_path = os.environ.get(CONFIG_ENV)
            config_path = Path(env_path) if env_path else Path.cwd() / DEFAULT_CONFIG_NAME
        self.config_path = Path(config_path)
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, falling back to defaults when no file exists."""
        if self._config is None:
            if self.config_path.exists():
                self._config = load_config(self.config_path)
            else:
                self._config = ConfigModel()
        return self._config

    @property
    def root(self) -> Path:
        """Directory relative paths in the config resolve against."""
        return self.config_path.parent

    def resolve(self, value: Optional[str]) -> Optional[Path]:
        """Resolve a configured path relative to the config file."""
        if not value:
            return None
        path = Path(value).expanduser()
        if not path.is_absolute():
            path = self.root / path
        return path

    @property
    def content_dir(self) -> Path:
        """Get content directory path."""
        return self.resolve(self.config.content_dir)

    @property
    def report_dir(self) -> Optional[Path]:
        """Get report directory path, creating it if configured."""
        path = self.resolve(self.config.report_dir)
        if path is not None:
            path.mkdir(parents=True, exist_ok=True)
        return path

    def get_site_config(self) -> SiteConfig:
        """Get site configuration with environment overrides applied."""
        site = self.config.site.model_copy(deep=True)

        # Handle base URL from environment if specified
        if site.base_url_env:
            base_url = os.environ.get(site.base_url_env)
            if base_url:
                site.base_url = base_url

        return site


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
