"""normalize_curve 단위 테스트."""

import math

import pytest

from shape_similarity.domain.value_objects.point import Point, as_curve
from shape_similarity.usecase.normalize_curve import normalize_curve
from shape_similarity.usecase.resample_curve import resample_curve


def _centroid(curve):
    n = len(curve)
    return sum(p.x for p in curve) / n, sum(p.y for p in curve) / n


def _rms_radius(curve):
    return math.sqrt(sum(p.x ** 2 + p.y ** 2 for p in curve) / len(curve))


class TestNormalizeCurve:
    def test_centroid_at_origin(self, sample_curve):
        result = normalize_curve(resample_curve(sample_curve, 50))
        cx, cy = _centroid(result)
        assert cx == pytest.approx(0.0, abs=1e-12)
        assert cy == pytest.approx(0.0, abs=1e-12)

    def test_unit_rms_radius(self, sample_curve):
        result = normalize_curve(resample_curve(sample_curve, 50))
        assert _rms_radius(result) == pytest.approx(1.0)

    def test_two_point_segment(self):
        result = normalize_curve(as_curve([(0, 0), (4, 0)]))
        assert result[0].x == pytest.approx(-1.0)
        assert result[1].x == pytest.approx(1.0)
        assert result[0].y == pytest.approx(0.0)

    def test_scale_and_translation_removed(self, sample_curve):
        moved = as_curve([(p.x * 7 + 3, p.y * 7 - 11) for p in sample_curve])
        for a, b in zip(normalize_curve(sample_curve), normalize_curve(moved)):
            assert a.x == pytest.approx(b.x)
            assert a.y == pytest.approx(b.y)

    def test_identical_points_collapse_to_origin(self):
        result = normalize_curve(as_curve([(5, -2)] * 4))
        assert result == (Point(0.0, 0.0),) * 4

    def test_length_preserved(self, sample_curve):
        assert len(normalize_curve(sample_curve)) == len(sample_curve)
