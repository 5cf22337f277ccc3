"""Tests for polygon repair ahead of splitting."""

from unittest.mock import patch

import pytest
import shapely
from shapely.geometry import MultiPolygon, Polygon

from polysplit import split_polygons
from polysplit.core.errors import RepairError
from polysplit.repair import describe_invalidity, needs_repair, repair_polygon


def _bowtie() -> Polygon:
    """Self-intersecting bowtie polygon."""
    return Polygon([(0, 0), (2, 2), (2, 0), (0, 2)])


def _ring_self_intersection() -> Polygon:
    """Polygon whose ring touches itself (figure-8 shape)."""
    return Polygon([
        (0, 0), (4, 0), (4, 4), (2, 2), (0, 4), (2, 2), (0, 0),
    ])


class TestNeedsRepair:
    """Tests for needs_repair()."""

    def test_valid_polygon(self):
        poly = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
        assert not needs_repair(poly)

    def test_bowtie(self):
        assert needs_repair(_bowtie())

    def test_ring_self_intersection(self):
        assert needs_repair(_ring_self_intersection())


class TestRepairPolygon:
    """Tests for repair_polygon()."""

    def test_fix_bowtie(self):
        result = repair_polygon(_bowtie())
        assert result.is_valid
        assert result.area > 0

    def test_fix_ring_self_intersection(self):
        result = repair_polygon(_ring_self_intersection())
        assert result.is_valid
        assert isinstance(result, (Polygon, MultiPolygon))

    def test_valid_polygon_keeps_area(self):
        poly = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
        result = repair_polygon(poly)
        assert result.area == pytest.approx(100.0)

    def test_returns_new_geometry(self):
        bowtie = _bowtie()
        result = repair_polygon(bowtie)
        assert result is not bowtie

    def test_verbose_flag(self, capsys):
        repair_polygon(_bowtie(), verbose=True)
        captured = capsys.readouterr()
        assert "Repairing polygon" in captured.out
        assert "Self-intersection" in captured.out

    def test_engine_failure_raises_repair_error(self):
        with patch.object(Polygon, "buffer", side_effect=RuntimeError("GEOS exploded")):
            with pytest.raises(RepairError, match="Buffer repair failed"):
                repair_polygon(_bowtie())

    def test_engine_failure_propagates_from_split(self):
        dense = shapely.segmentize(_bowtie(), 0.1)
        with patch.object(Polygon, "buffer", side_effect=RuntimeError("GEOS exploded")):
            with pytest.raises(RepairError):
                split_polygons(dense, max_vertices=8)


class TestDescribeInvalidity:

    def test_valid(self):
        poly = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert describe_invalidity(poly) == "Valid Geometry"

    def test_self_intersection(self):
        assert "Self-intersection" in describe_invalidity(_bowtie())
