"""
Custom exception hierarchy for the pattern catalog.
"""
from typing import Any, Dict, Optional


class PatternCatalogError(Exception):
    """Base exception for all pattern catalog errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


# Creational Exceptions
class CreationalError(PatternCatalogError):
    """Base exception for creational pattern errors."""
    pass


class UnsupportedVariantError(CreationalError):
    """Raised when a factory is given an unknown discriminant."""
    pass


class AlreadyBuiltError(CreationalError):
    """Raised when a builder is used after it has been finalized."""
    pass


class UninitializedAttributeError(CreationalError):
    """Raised when an attribute is read before it was ever set."""
    pass


# Structural Exceptions
class StructuralError(PatternCatalogError):
    """Base exception for structural pattern errors."""
    pass


class CompositionError(StructuralError):
    """Raised when a composite tree operation is invalid."""
    pass


class CyclicCompositionError(CompositionError):
    """Raised when a composite would contain itself."""
    pass


class VideoNotFoundError(StructuralError):
    """Raised when a video service has no entry for an id."""
    pass


# Configuration Exceptions
class ConfigurationError(PatternCatalogError):
    """Raised when configuration is invalid."""
    pass
