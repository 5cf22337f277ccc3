"""Polysplit - Split complex polygons into pieces with bounded vertex counts.

This library recursively divides polygons and multipolygons into quadrants
around their centroids until every piece has at most a given number of
exterior points, using Shapely as the geometry engine and Fiona for vector
data sources.
"""


# Splitting functions
from .split import split_polygons, split_features

# Repair functions
from .repair import needs_repair, repair_polygon, describe_invalidity

# Measurement functions
from .metrics import measure_pieces, oversized_pieces, exterior_vertex_counts

# Data source processing
from .io import split_file, SplitStats

# Core types
from .core import (
    GeometryKind,
    SplitConfig,
    Feature,
    classify_geometry,
    DEFAULT_MAX_VERTICES,
    DEFAULT_MAX_DEPTH,
)

# Core exceptions
from .core import (
    PolysplitError,
    ValidationError,
    ConfigurationError,
    RepairError,
    DataSourceError,
    SplitWarning,
)

__all__ = [

    # Splitting
    'split_polygons',
    'split_features',

    # Repair
    'needs_repair',
    'repair_polygon',
    'describe_invalidity',

    # Measurement
    'measure_pieces',
    'oversized_pieces',
    'exterior_vertex_counts',

    # Data sources
    'split_file',
    'SplitStats',

    # Core types
    'GeometryKind',
    'SplitConfig',
    'Feature',
    'classify_geometry',
    'DEFAULT_MAX_VERTICES',
    'DEFAULT_MAX_DEPTH',

    # Core exceptions
    'PolysplitError',
    'ValidationError',
    'ConfigurationError',
    'RepairError',
    'DataSourceError',
    'SplitWarning',
]
