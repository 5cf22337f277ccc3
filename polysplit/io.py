"""Split every polygon of a vector data source into a new data source.

Records are read with fiona, split with :func:`polysplit.split.split_features`
and each piece is written as one output record carrying the identifier of the
record it came from. The output has a single integer field, named after the
source ID field (or ``id`` when the FID is used).
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

import fiona
from fiona.errors import FionaError
from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry

from .core.errors import DataSourceError, ValidationError
from .core.types import (
    DEFAULT_DRIVER,
    DEFAULT_ID_FIELD,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_VERTICES,
)
from .core.validation_utils import is_integer_field_type, validate_max_vertices
from .split import split_features

PathLike = Union[str, os.PathLike]

# Rings need 4 distinct points plus closure before splitting makes sense.
MIN_MAX_VERTICES = 6

OUTPUT_GEOMETRY_TYPE = "Polygon"


@dataclass
class SplitStats:
    """Counters for one :func:`split_file` run."""

    features_read: int = 0
    features_written: int = 0

    def __str__(self) -> str:
        return f"{self.features_read} features read, {self.features_written} written."


def split_file(
    source: PathLike,
    destination: PathLike,
    max_vertices: int = DEFAULT_MAX_VERTICES,
    source_layer: Optional[str] = None,
    destination_layer: Optional[str] = None,
    driver: str = DEFAULT_DRIVER,
    id_field: Optional[str] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    verbose: bool = False,
) -> SplitStats:
    """Split the polygons of ``source`` and write the pieces to ``destination``.

    Args:
        source: Path of the input data source
        destination: Path of the output data source to create
        max_vertices: Maximum exterior ring point count per piece; must be
            greater than 5 (default: 250)
        source_layer: Input layer name; the first layer is used if None
        destination_layer: Output layer name; driver default if None
        driver: Fiona/OGR driver name for the output (default: 'ESRI Shapefile')
        id_field: Integer field of the input carried to the output. If None,
            the feature ID of each input record is used instead.
        max_depth: Quadrant recursion guard passed to the splitter
        verbose: Print progress to stderr (default: False)

    Returns:
        :class:`SplitStats` with the number of records read and pieces written

    Raises:
        ConfigurationError: If ``max_vertices`` is 5 or less
        ValidationError: If ``id_field`` is missing or not an integer field
        DataSourceError: If the input cannot be opened or the output cannot
            be created or written

    Examples:
        >>> stats = split_file("countries.shp", "pieces.shp", max_vertices=100)
        >>> print(stats)
        250 features read, 3121 written.
    """
    validate_max_vertices(max_vertices, minimum=MIN_MAX_VERTICES)
    stats = SplitStats()

    with _open_source(source, source_layer) as src:
        _check_id_field(src.schema, id_field)

        output_field = id_field or DEFAULT_ID_FIELD
        schema = {
            "geometry": OUTPUT_GEOMETRY_TYPE,
            "properties": {output_field: "int"},
        }

        with _create_destination(destination, driver, destination_layer, schema, src.crs) as dst:
            records = _read_records(src, id_field, stats, verbose)
            features = split_features(
                records,
                max_vertices=max_vertices,
                max_depth=max_depth,
                verbose=verbose,
            )
            for feature in features:
                _write_piece(dst, feature.geometry, output_field, feature.id)
                stats.features_written += 1

    if verbose:
        print(file=sys.stderr)

    return stats


def _open_source(source: PathLike, layer: Optional[str]):
    """Open the input layer, the first one unless ``layer`` is named."""
    try:
        if layer is not None and layer not in fiona.listlayers(source):
            raise DataSourceError(f"Can't find input layer {layer}")
        return fiona.open(source, layer=layer)
    except (FionaError, OSError) as e:
        raise DataSourceError(f"Opening {source} failed: {e}") from e


def _create_destination(
    destination: PathLike,
    driver: str,
    layer: Optional[str],
    schema: dict,
    crs,
):
    """Create the output data source with a single polygon layer."""
    try:
        return fiona.open(
            destination,
            "w",
            driver=driver,
            schema=schema,
            crs=crs,
            layer=layer,
        )
    except (FionaError, OSError) as e:
        raise DataSourceError(f"Creation of output file {destination} failed: {e}") from e


def _check_id_field(schema: dict, id_field: Optional[str]) -> None:
    """Make sure ``id_field`` exists in the input and holds integers."""
    if id_field is None:
        return
    properties = schema.get("properties", {})
    if id_field not in properties:
        raise ValidationError(f"Can't find ID field {id_field}")
    if not is_integer_field_type(properties[id_field]):
        raise ValidationError(f"ID field {id_field} isn't integer type")


def _read_records(
    src,
    id_field: Optional[str],
    stats: SplitStats,
    verbose: bool,
) -> Iterator[Tuple[int, Optional[BaseGeometry]]]:
    """Yield ``(id, geometry)`` for every input record, counting as it goes."""
    total = len(src)
    for feature in src:
        yield _feature_id(feature, id_field), _feature_geometry(feature)

        stats.features_read += 1
        if verbose:
            print(f"{stats.features_read} / {total}", end="\r", file=sys.stderr)


def _feature_id(feature, id_field: Optional[str]) -> int:
    if id_field is None:
        return int(feature.id)
    value = feature.properties[id_field]
    # Unset integer fields read as 0, as OGR does.
    return int(value) if value is not None else 0


def _feature_geometry(feature) -> Optional[BaseGeometry]:
    if feature.geometry is None:
        return None
    return shape(feature.geometry)


def _write_piece(dst, piece: BaseGeometry, field_name: str, feature_id: int) -> None:
    record = fiona.Feature.from_dict({
        "geometry": mapping(piece),
        "properties": {field_name: feature_id},
    })
    try:
        dst.write(record)
    except (FionaError, OSError) as e:
        raise DataSourceError(f"Failed to create feature in output: {e}") from e


__all__ = [
    "MIN_MAX_VERTICES",
    "SplitStats",
    "split_file",
]
