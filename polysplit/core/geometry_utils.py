"""Common geometry manipulation utilities.

This module provides the small geometric building blocks the splitter is
made of: vertex counting, polygon cloning and quadrant construction.
"""

from typing import List, Tuple

import numpy as np
import shapely
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry

from .types import GeometryKind, classify_geometry

Bounds = Tuple[float, float, float, float]


def exterior_vertex_count(polygon: Polygon) -> int:
    """Return the number of points in the exterior ring of ``polygon``.

    The closing point is counted, so a triangle has 4 points and a square 5.
    Interior rings are not counted.

    Examples:
        >>> exterior_vertex_count(Polygon([(0, 0), (1, 0), (1, 1), (0, 1)]))
        5
    """
    if polygon.is_empty:
        return 0
    return len(polygon.exterior.coords)


def clone_polygon(polygon: Polygon) -> Polygon:
    """Create an independent copy of ``polygon``, holes included.

    Args:
        polygon: Polygon to copy

    Returns:
        New polygon with the same exterior and interior rings

    Examples:
        >>> original = Polygon(shell, [hole])
        >>> copy = clone_polygon(original)
        >>> copy.equals(original) and copy is not original
        True
    """
    if polygon.interiors:
        holes = [list(interior.coords) for interior in polygon.interiors]
        return Polygon(list(polygon.exterior.coords), holes=holes)
    return Polygon(list(polygon.exterior.coords))


def quadrant_bounds(envelope: Bounds, pivot: Tuple[float, float]) -> np.ndarray:
    """Build the four quadrant rectangles around ``pivot``.

    Each rectangle combines two extremes of ``envelope`` with the pivot's X
    and Y. The order of the rows carries no meaning.

    Args:
        envelope: ``(minx, miny, maxx, maxy)`` of the polygon being split
        pivot: ``(x, y)`` split point, normally the polygon centroid

    Returns:
        Array of shape ``(4, 4)``, one ``(minx, miny, maxx, maxy)`` row per quadrant

    Examples:
        >>> quadrant_bounds((0, 0, 10, 10), (5, 5))[0]
        array([0., 0., 5., 5.])
    """
    minx, miny, maxx, maxy = envelope
    px, py = pivot
    return np.array([
        [minx, miny, px, py],
        [minx, py, px, maxy],
        [px, miny, maxx, py],
        [px, py, maxx, maxy],
    ], dtype=float)


def quadrant_masks(envelope: Bounds, pivot: Tuple[float, float]) -> np.ndarray:
    """Return the four quadrant rectangles as an array of box polygons."""
    bounds = quadrant_bounds(envelope, pivot)
    return shapely.box(bounds[:, 0], bounds[:, 1], bounds[:, 2], bounds[:, 3])


def polygon_parts(geometry: BaseGeometry) -> List[Polygon]:
    """Flatten ``geometry`` into its non-empty polygons, in order.

    Polygons are returned as a one-element list, multipolygons and
    collections contribute their polygonal members (recursively). Everything
    else yields an empty list.
    """
    kind = classify_geometry(geometry)
    if kind is GeometryKind.POLYGON:
        return [geometry]
    if kind in (GeometryKind.MULTIPOLYGON, GeometryKind.COLLECTION):
        parts = []
        for member in geometry.geoms:
            parts.extend(polygon_parts(member))
        return parts
    return []


def envelope_extent(envelope: Bounds) -> Tuple[float, float]:
    """Return ``(width, height)`` of an envelope."""
    minx, miny, maxx, maxy = envelope
    return maxx - minx, maxy - miny


__all__ = [
    'Bounds',
    'exterior_vertex_count',
    'clone_polygon',
    'quadrant_bounds',
    'quadrant_masks',
    'polygon_parts',
    'envelope_extent',
]
