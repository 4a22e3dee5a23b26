"""
Runtime Configuration Module

Provides configuration loading and logging setup.
"""

from .runtime import LoggingConfig, RuntimeConfig, TreeConfig, setup_logging

__all__ = [
    "LoggingConfig",
    "RuntimeConfig",
    "TreeConfig",
    "setup_logging",
]
