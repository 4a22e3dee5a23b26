"""
Runtime Configuration

Central configuration for tree defaults and logging.
"""

from __future__ import annotations

import copy
import logging
import os
import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from merkletree.crypto.hashing import DEFAULT_ALGORITHM, is_algorithm_available
from merkletree.schemas.errors import ConfigException

load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class TreeConfig:
    """Defaults applied when building trees from configuration."""
    default_algorithm: str = DEFAULT_ALGORITHM

    def __post_init__(self):
        if not is_algorithm_available(self.default_algorithm):
            raise ConfigException(
                f"Unknown digest algorithm: {self.default_algorithm!r}",
                field_path="tree.default_algorithm",
            )


@dataclass
class LoggingConfig:
    """Configuration for stdlib logging."""
    level: str = "INFO"
    format: str = _DEFAULT_LOG_FORMAT
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    def __post_init__(self):
        self.level = str(self.level).upper()
        if self.level not in _LOG_LEVELS:
            raise ConfigException(
                f"Unknown log level: {self.level!r}",
                field_path="logging.level",
            )


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    tree: TreeConfig = field(default_factory=TreeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - MERKLETREE_ALGORITHM: default digest algorithm name
        - MERKLETREE_LOG_LEVEL: log level
        - MERKLETREE_LOG_FORMAT: log record format
        """
        overrides: dict[str, Any] = {}

        if os.getenv("MERKLETREE_ALGORITHM"):
            overrides.setdefault("tree", {})["default_algorithm"] = os.getenv("MERKLETREE_ALGORITHM")

        if os.getenv("MERKLETREE_LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv("MERKLETREE_LOG_LEVEL")
        if os.getenv("MERKLETREE_LOG_FORMAT"):
            overrides.setdefault("logging", {})["format"] = os.getenv("MERKLETREE_LOG_FORMAT")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigException(
                f"Config file must contain a mapping, got {type(data).__name__}",
                details={"path": str(path)},
            )
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Create config from a dictionary."""
        tree_data = data.get("tree", {})
        logging_data = data.get("logging", {})

        for section, value in (("tree", tree_data), ("logging", logging_data)):
            if not isinstance(value, dict):
                raise ConfigException(
                    f"Config section {section!r} must be a mapping",
                    field_path=section,
                )

        try:
            tree = TreeConfig(**tree_data)
            log_conf = LoggingConfig(**logging_data)
        except TypeError as e:
            raise ConfigException(f"Invalid config key: {e}") from e

        return cls(
            tree=tree,
            logging=log_conf,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        merged = copy.deepcopy(self.to_dict())
        for section, values in overrides.items():
            merged.setdefault(section, {}).update(values)
        return self.from_dict(merged)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a plain dictionary."""
        return asdict(self)


def setup_logging(config: Optional[RuntimeConfig] = None) -> None:
    """Configure stdlib logging from the runtime config."""
    config = config or RuntimeConfig.from_env()
    logging.basicConfig(
        level=getattr(logging, config.logging.level, logging.INFO),
        format=config.logging.format,
        datefmt=config.logging.datefmt,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
