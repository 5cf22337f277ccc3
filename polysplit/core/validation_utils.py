"""Common validation utilities.

Checks applied to split parameters and to data source schemas before any
work starts.
"""

from typing import Optional

from .errors import ConfigurationError

# A closed triangle ring: 3 distinct points plus closure.
MIN_RING_VERTICES = 4

INTEGER_FIELD_TYPES = ('int', 'int32', 'int64')


def validate_max_vertices(max_vertices: int, minimum: int = MIN_RING_VERTICES) -> int:
    """Check that ``max_vertices`` is an integer threshold of at least ``minimum``.

    Args:
        max_vertices: Threshold to validate
        minimum: Smallest accepted value

    Returns:
        The threshold, unchanged

    Raises:
        ConfigurationError: If the threshold is not an integer or is too small

    Examples:
        >>> validate_max_vertices(250)
        250
        >>> validate_max_vertices(5, minimum=6)
        Traceback (most recent call last):
        ...
        ConfigurationError: max_vertices must be at least 6, got 5
    """
    if isinstance(max_vertices, bool) or not isinstance(max_vertices, int):
        raise ConfigurationError(
            f"max_vertices must be an integer, got {type(max_vertices).__name__}"
        )
    if max_vertices < minimum:
        raise ConfigurationError(
            f"max_vertices must be at least {minimum}, got {max_vertices}"
        )
    return max_vertices


def validate_max_depth(max_depth: int) -> int:
    """Check that ``max_depth`` is a non-negative integer."""
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
        raise ConfigurationError(f"max_depth must be a non-negative integer, got {max_depth!r}")
    return max_depth


def validate_min_extent(min_extent: float) -> float:
    """Check that ``min_extent`` is a non-negative number."""
    if min_extent is None or min_extent < 0:
        raise ConfigurationError(f"min_extent must be non-negative, got {min_extent!r}")
    return float(min_extent)


def is_integer_field_type(field_type: Optional[str]) -> bool:
    """Return True if a fiona schema field type is an integer type.

    Fiona reports widths as a suffix (``'int:10'``), which is ignored.

    Examples:
        >>> is_integer_field_type('int:10')
        True
        >>> is_integer_field_type('str:80')
        False
    """
    if not field_type:
        return False
    return field_type.split(':', 1)[0] in INTEGER_FIELD_TYPES


__all__ = [
    'MIN_RING_VERTICES',
    'INTEGER_FIELD_TYPES',
    'validate_max_vertices',
    'validate_max_depth',
    'validate_min_extent',
    'is_integer_field_type',
]
