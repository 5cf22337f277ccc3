"""Recursive quadrant splitting of polygons.

A polygon whose exterior ring has more points than the threshold is cut into
four pieces by the axis-aligned quadrants around its centroid, and each piece
is split again until it is small enough. Multipolygons are split part by
part. Invalid polygons are repaired with buffer(0) before being cut.

The centroid is used as the pivot rather than the envelope center so that the
cuts balance area, which converges faster on skewed shapes.
"""

from __future__ import annotations

import warnings
from typing import Iterable, Iterator, List, Optional, Tuple

import shapely
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry

from .core.errors import SplitWarning
from .core.geometry_utils import (
    clone_polygon,
    envelope_extent,
    exterior_vertex_count,
    polygon_parts,
    quadrant_masks,
)
from .core.types import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_VERTICES,
    Feature,
    GeometryKind,
    SplitConfig,
    classify_geometry,
)
from .core.validation_utils import (
    validate_max_depth,
    validate_max_vertices,
    validate_min_extent,
)
from .repair import needs_repair, repair_polygon

# Quadrilateral ring. An axis-aligned clip cannot reduce it further.
IRREDUCIBLE_VERTICES = 5


def split_polygons(
    geometry: Optional[BaseGeometry],
    max_vertices: int = DEFAULT_MAX_VERTICES,
    max_depth: int = DEFAULT_MAX_DEPTH,
    min_extent: float = 0.0,
    verbose: bool = False,
) -> List[Polygon]:
    """Split a (multi)polygon into polygons of at most ``max_vertices`` points.

    Each oversized polygon is divided into quadrants around its centroid and
    the intersection of every quadrant with the polygon is split again,
    until the pieces have at most ``max_vertices`` exterior points.

    Args:
        geometry: Geometry to split. ``None`` yields no pieces and a
            :class:`SplitWarning`; empty and non-polygonal geometries yield
            no pieces silently.
        max_vertices: Maximum exterior ring point count per piece, closing
            point included (default: 250)
        max_depth: Quadrant recursion depth at which a still oversized
            polygon is emitted as-is with a warning (default: 32)
        min_extent: Emit an oversized polygon as-is, with a warning, once
            both envelope dimensions are at or below this size (default: 0.0)
        verbose: Print repair diagnostics (default: False)

    Returns:
        List of polygons. Multipolygon parts are split in order and their
        pieces concatenated in that order. The order of pieces within one
        polygon is unspecified.

    Raises:
        ConfigurationError: If a parameter is out of range
        RepairError: If buffer(0) repair fails in the geometry engine

    Examples:
        >>> square = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
        >>> pieces = split_polygons(square, max_vertices=4)
        >>> len(pieces), sum(p.area for p in pieces)
        (4, 100.0)

    Notes:
        - Only exterior ring points are counted; holes are carried through
          the intersections but do not drive the split
        - Fragments of a clip that are at most quadrilaterals are emitted
          with a :class:`SplitWarning` when ``max_vertices`` is smaller
        - Invalid polygons are repaired and the repaired parts are always
          cut into quadrants, even when they are already small
        - Intersections that degenerate to lines or points are dropped
    """
    config = SplitConfig(
        max_vertices=validate_max_vertices(max_vertices),
        max_depth=validate_max_depth(max_depth),
        min_extent=validate_min_extent(min_extent),
        verbose=verbose,
    )
    return _split_with_config(geometry, config)


def split_features(
    records: Iterable[Tuple[int, Optional[BaseGeometry]]],
    max_vertices: int = DEFAULT_MAX_VERTICES,
    max_depth: int = DEFAULT_MAX_DEPTH,
    min_extent: float = 0.0,
    verbose: bool = False,
) -> Iterator[Feature]:
    """Split every ``(id, geometry)`` record, yielding one feature per piece.

    Each yielded :class:`Feature` carries the identifier of the record it
    came from. Records are processed lazily, in order.

    Examples:
        >>> features = list(split_features([(7, square)], max_vertices=4))
        >>> {f.id for f in features}
        {7}
    """
    config = SplitConfig(
        max_vertices=validate_max_vertices(max_vertices),
        max_depth=validate_max_depth(max_depth),
        min_extent=validate_min_extent(min_extent),
        verbose=verbose,
    )
    for feature_id, geometry in records:
        for piece in _split_with_config(geometry, config):
            yield Feature(feature_id, piece)


def _split_with_config(geometry: Optional[BaseGeometry], config: SplitConfig) -> List[Polygon]:
    # Frames: this function, its public caller, the user's call site.
    pieces: List[Polygon] = []
    if geometry is None:
        warnings.warn("Null geometry passed to split_polygons", SplitWarning, stacklevel=3)
        return pieces

    unsplit: List[str] = []
    _split_into(pieces, unsplit, geometry, config, depth=0)
    for message in unsplit:
        warnings.warn(message, SplitWarning, stacklevel=3)
    return pieces


def _split_into(
    pieces: List[Polygon],
    unsplit: List[str],
    geometry: BaseGeometry,
    config: SplitConfig,
    depth: int,
) -> None:
    """Dispatch on the geometry variant and append its pieces."""
    kind = classify_geometry(geometry)

    if kind is GeometryKind.POLYGON:
        _split_polygon(pieces, unsplit, geometry, config, depth)
    elif kind in (GeometryKind.MULTIPOLYGON, GeometryKind.COLLECTION):
        for part in polygon_parts(geometry):
            _split_polygon(pieces, unsplit, part, config, depth)
    # NULL, EMPTY and OTHER contribute nothing


def _split_polygon(
    pieces: List[Polygon],
    unsplit: List[str],
    polygon: Polygon,
    config: SplitConfig,
    depth: int,
) -> None:
    count = exterior_vertex_count(polygon)
    if count <= config.max_vertices:
        pieces.append(clone_polygon(polygon))
        return

    if depth > 0 and count <= IRREDUCIBLE_VERTICES:
        _emit_oversized(pieces, unsplit, polygon, "quadrilateral fragment cannot be reduced further")
        return

    if not needs_repair(polygon):
        _subdivide(pieces, unsplit, polygon, config, depth)
        return

    # The repaired geometry replaces the input for every remaining step.
    repaired = repair_polygon(polygon, verbose=config.verbose)
    for part in polygon_parts(repaired):
        _subdivide(pieces, unsplit, part, config, depth)


def _subdivide(
    pieces: List[Polygon],
    unsplit: List[str],
    polygon: Polygon,
    config: SplitConfig,
    depth: int,
) -> None:
    """Cut ``polygon`` into centroid quadrants and split each fragment."""
    envelope = polygon.bounds

    if depth >= config.max_depth:
        _emit_oversized(pieces, unsplit, polygon, f"maximum recursion depth {config.max_depth} reached")
        return

    width, height = envelope_extent(envelope)
    if width <= config.min_extent and height <= config.min_extent:
        _emit_oversized(pieces, unsplit, polygon, f"envelope {width:g} x {height:g} below minimum extent")
        return

    centroid = polygon.centroid
    masks = quadrant_masks(envelope, (centroid.x, centroid.y))
    for fragment in shapely.intersection(masks, polygon):
        _split_into(pieces, unsplit, fragment, config, depth + 1)


def _emit_oversized(
    pieces: List[Polygon],
    unsplit: List[str],
    polygon: Polygon,
    reason: str,
) -> None:
    """Keep ``polygon`` whole and record why for the caller's warning."""
    unsplit.append(
        f"Emitting polygon with {exterior_vertex_count(polygon)} vertices unsplit: {reason}"
    )
    pieces.append(clone_polygon(polygon))


__all__ = [
    'IRREDUCIBLE_VERTICES',
    'split_polygons',
    'split_features',
]
