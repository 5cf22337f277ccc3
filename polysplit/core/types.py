"""Type definitions for polysplit operations.

This module defines the geometry variant enum the splitter dispatches on,
the split configuration, and the feature record handed to writers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from shapely.geometry import GeometryCollection, MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

DEFAULT_MAX_VERTICES = 250
DEFAULT_MAX_DEPTH = 32
DEFAULT_DRIVER = "ESRI Shapefile"
DEFAULT_ID_FIELD = "id"


class GeometryKind(Enum):
    """Geometry variants the splitter distinguishes.

    Attributes:
        NULL: No geometry at all (``None``)
        EMPTY: Empty geometry of any type
        POLYGON: Single polygon
        MULTIPOLYGON: Ordered sequence of polygons
        COLLECTION: Heterogeneous collection (only polygonal members are used)
        OTHER: Points, lines and anything else (ignored)

    Examples:
        >>> from shapely.geometry import Point
        >>> classify_geometry(Point(0, 0))
        <GeometryKind.OTHER: 'other'>
    """
    NULL = 'null'
    EMPTY = 'empty'
    POLYGON = 'polygon'
    MULTIPOLYGON = 'multipolygon'
    COLLECTION = 'collection'
    OTHER = 'other'


def classify_geometry(geometry: Optional[BaseGeometry]) -> GeometryKind:
    """Return the :class:`GeometryKind` of ``geometry``."""
    if geometry is None:
        return GeometryKind.NULL
    if geometry.is_empty:
        return GeometryKind.EMPTY
    if isinstance(geometry, Polygon):
        return GeometryKind.POLYGON
    if isinstance(geometry, MultiPolygon):
        return GeometryKind.MULTIPOLYGON
    if isinstance(geometry, GeometryCollection):
        return GeometryKind.COLLECTION
    return GeometryKind.OTHER


@dataclass
class SplitConfig:
    """Settings shared by every level of one split recursion.

    Attributes:
        max_vertices: Maximum exterior ring point count (closing point included)
        max_depth: Quadrant recursion depth at which oversized polygons are
            emitted as-is
        min_extent: Envelope size at or below which oversized polygons are
            emitted as-is (0 disables the check)
        verbose: Print repair diagnostics
    """

    max_vertices: int = DEFAULT_MAX_VERTICES
    max_depth: int = DEFAULT_MAX_DEPTH
    min_extent: float = 0.0
    verbose: bool = False


@dataclass(frozen=True)
class Feature:
    """One output record: an identifier and one split piece."""

    id: int
    geometry: Polygon


__all__ = [
    'DEFAULT_MAX_VERTICES',
    'DEFAULT_MAX_DEPTH',
    'DEFAULT_DRIVER',
    'DEFAULT_ID_FIELD',
    'GeometryKind',
    'classify_geometry',
    'SplitConfig',
    'Feature',
]
