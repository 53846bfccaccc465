"""Configuration management.

- ConfigManager: settings.conf loading, validation and saving
- Paths: path constants and utilities
- ConfigCommentManager: comments written into settings.conf
"""

from filehand.config.parser import ConfigCommentManager
from filehand.config.paths import Paths
from filehand.config.settings import ConfigManager
from filehand.domain.types import DemoConfig, GlobalConfig

__all__ = [
    "ConfigCommentManager",
    "ConfigManager",
    "DemoConfig",
    "GlobalConfig",
    "Paths",
]
