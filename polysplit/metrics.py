"""Shared measurement helpers for split results.

A split is judged on two things: every piece should respect the vertex
threshold, and the pieces together should cover the area of the input.
Centralizing the measurements here keeps tests and the command line free
from ad-hoc area sums.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import numpy as np
import shapely
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry


def exterior_vertex_counts(pieces: Sequence[Polygon]) -> np.ndarray:
    """Return the exterior ring point count of every piece."""
    if len(pieces) == 0:
        return np.zeros(0, dtype=int)
    rings = shapely.get_exterior_ring(list(pieces))
    return shapely.get_num_coordinates(rings)


def oversized_pieces(pieces: Sequence[Polygon], max_vertices: int) -> List[Polygon]:
    """Return the pieces whose exterior ring has more than ``max_vertices`` points."""
    counts = exterior_vertex_counts(pieces)
    return [piece for piece, count in zip(pieces, counts) if count > max_vertices]


def measure_pieces(
    pieces: Sequence[Polygon],
    original: Optional[BaseGeometry] = None,
) -> Dict[str, Optional[float]]:
    """Return core metrics for the pieces of one split.

    Args:
        pieces: Polygons returned by a split
        original: Geometry that was split, used for the area ratio

    Returns:
        Dictionary with keys ``piece_count``, ``max_vertex_count``,
        ``total_area``, ``original_area`` and ``area_ratio``. The last two are
        None without an original, and ``area_ratio`` is None when the original
        has no area.

    Examples:
        >>> metrics = measure_pieces(split_polygons(square, 4), original=square)
        >>> metrics["area_ratio"]
        1.0
    """
    counts = exterior_vertex_counts(pieces)
    total_area = float(np.sum(shapely.area(list(pieces)))) if len(pieces) else 0.0

    original_area = getattr(original, "area", None) if original is not None else None
    area_ratio: Optional[float] = None
    if original_area:
        area_ratio = total_area / original_area

    return {
        "piece_count": len(pieces),
        "max_vertex_count": int(counts.max()) if counts.size else 0,
        "total_area": total_area,
        "original_area": original_area,
        "area_ratio": area_ratio,
    }


__all__ = [
    "exterior_vertex_counts",
    "oversized_pieces",
    "measure_pieces",
]
