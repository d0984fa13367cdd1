"""
Configuration management for mdlinks
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml

CONFIG_ENV_VAR = "MDLINKS_CONFIG"
DEFAULT_CONFIG_FILE = "mdlinks.yaml"


@dataclass
class OutputConfig:
    """How extracted links are rendered"""
    format: str = "csv"
    separator: str = ","
    fields: List[str] = field(default_factory=lambda: [
        "description", "url", "source_file"
    ])
    header: bool = True
    json_indent: int = 2


@dataclass
class LoggingConfig:
    """Diagnostic logging settings"""
    level: str = "WARNING"
    file: Optional[str] = None


@dataclass
class Config:
    """Main configuration class for mdlinks"""
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    _instance: Optional["Config"] = field(default=None, init=False, repr=False)

    @staticmethod
    def default_path() -> Path:
        """Config path from MDLINKS_CONFIG, else mdlinks.yaml in the working directory."""
        return Path(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE))

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """Load configuration from YAML file or use defaults.

        Args:
            config_path: Path to config file. Defaults to ``default_path()``.

        Returns:
            Config instance with loaded or default settings.
        """
        if config_path is None:
            config_path = cls.default_path()
        config_path = Path(config_path)

        if not config_path.exists():
            return cls()

        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "Config":
        """Create Config from dictionary."""
        config = cls()

        if "output" in data:
            out_data = data["output"] or {}
            for key in ["format", "separator", "fields", "header", "json_indent"]:
                if key in out_data:
                    setattr(config.output, key, out_data[key])

        if "logging" in data:
            log_data = data["logging"] or {}
            for key in ["level", "file"]:
                if key in log_data:
                    setattr(config.logging, key, log_data[key])

        return config

    @classmethod
    def get_instance(cls, config_path: Optional[Path] = None) -> "Config":
        """Get singleton instance of Config.

        Args:
            config_path: Path to config file (only used on first call).
        """
        if cls._instance is None:
            cls._instance = cls.load(config_path)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset singleton instance (useful for testing)."""
        cls._instance = None


def get_config(config_path: Optional[Path] = None) -> Config:
    """Convenience function to get config singleton."""
    return Config.get_instance(config_path)
