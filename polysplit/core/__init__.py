"""Core types and utilities for polysplit.

This module provides type definitions, enums, exceptions, and core utilities
used throughout the library.
"""

from .types import (
    DEFAULT_MAX_VERTICES,
    DEFAULT_MAX_DEPTH,
    DEFAULT_DRIVER,
    DEFAULT_ID_FIELD,
    GeometryKind,
    classify_geometry,
    SplitConfig,
    Feature,
)

from .errors import (
    PolysplitError,
    ValidationError,
    ConfigurationError,
    RepairError,
    DataSourceError,
    SplitWarning,
)

__all__ = [
    # Defaults
    'DEFAULT_MAX_VERTICES',
    'DEFAULT_MAX_DEPTH',
    'DEFAULT_DRIVER',
    'DEFAULT_ID_FIELD',

    # Types
    'GeometryKind',
    'classify_geometry',
    'SplitConfig',
    'Feature',

    # Exceptions
    'PolysplitError',
    'ValidationError',
    'ConfigurationError',
    'RepairError',
    'DataSourceError',
    'SplitWarning',
]
