"""Polygon repair ahead of subdivision.

Invalid or non-simple polygons are cleaned with the buffer(0) trick before
they are split. Buffering by zero rebuilds the polygon from its noded
boundary, which resolves most self-intersections.
"""

from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry
from shapely.validation import explain_validity

from .core.errors import RepairError


def needs_repair(polygon: Polygon) -> bool:
    """Return True if ``polygon`` is not valid or not simple."""
    return not polygon.is_valid or not polygon.is_simple


def describe_invalidity(geometry: BaseGeometry) -> str:
    """Return Shapely's explanation of why ``geometry`` is invalid."""
    return explain_validity(geometry)


def repair_polygon(polygon: Polygon, verbose: bool = False) -> BaseGeometry:
    """Repair ``polygon`` with a zero-distance buffer.

    The result may be a Polygon, a MultiPolygon (when the repair separates
    lobes) or an empty geometry. Unlike a general-purpose fixer, all pieces
    are kept, so the caller sees the full repaired area.

    Args:
        polygon: Polygon to repair
        verbose: Print the validity diagnosis before repairing

    Returns:
        Repaired geometry, owned by the caller

    Raises:
        RepairError: If the geometry engine fails during the buffer

    Examples:
        >>> bowtie = Polygon([(0, 0), (2, 2), (2, 0), (0, 2)])
        >>> repair_polygon(bowtie).is_valid
        True
    """
    if verbose:
        print(f"Repairing polygon: {describe_invalidity(polygon)}")

    try:
        return polygon.buffer(0)
    except Exception as e:
        raise RepairError(f"Buffer repair failed: {e}") from e


__all__ = [
    'needs_repair',
    'describe_invalidity',
    'repair_polygon',
]
