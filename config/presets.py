"""
Predefined configuration presets.
"""
from typing import Dict, Any


class ConfigPresets:
    """Collection of predefined configuration presets."""

    @staticmethod
    def defaults() -> Dict[str, Any]:
        """Baseline configuration every manager starts from."""
        return {
            'logging': {
                'log_level': 'WARNING',
                'log_dir': 'logs',
                'enable_console': True,
                'enable_file': False,
                'enable_structured': False
            },
            'proxy': {
                'info_cache_capacity': 128
            }
        }

    @staticmethod
    def debug() -> Dict[str, Any]:
        """Verbose configuration for stepping through the examples."""
        return {
            'logging': {
                'log_level': 'DEBUG',
                'log_dir': 'logs/debug',
                'enable_console': True,
                'enable_file': True,
                'enable_structured': True
            },
            'proxy': {
                'info_cache_capacity': 16
            }
        }
