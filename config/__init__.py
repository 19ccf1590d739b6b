"""
Configuration management for the pattern catalog.
"""
from .config_manager import (
    Config,
    ConfigManager,
    get_config_manager,
    load_config,
    get_config,
    set_config
)
from .presets import ConfigPresets

__all__ = [
    'Config',
    'ConfigManager',
    'get_config_manager',
    'load_config',
    'get_config',
    'set_config',
    'ConfigPresets',
]
