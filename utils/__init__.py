"""
Utility modules for the pattern catalog.
"""
from .logging_config import get_logger, configure_logging, LoggerFactory, LogContext
from .exceptions import *

__all__ = [
    'get_logger',
    'configure_logging',
    'LoggerFactory',
    'LogContext',
    'PatternCatalogError',
    'CreationalError',
    'UnsupportedVariantError',
    'AlreadyBuiltError',
    'UninitializedAttributeError',
    'StructuralError',
    'CompositionError',
    'CyclicCompositionError',
    'VideoNotFoundError',
    'ConfigurationError',
]
