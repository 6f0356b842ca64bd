"""공통 테스트 fixture."""

import pytest

from shape_similarity.domain.geometry import (
    rotate_curve,
    scale_curve,
    translate_curve,
)
from shape_similarity.domain.value_objects.point import Point, as_curve
from shape_similarity.usecase.ports.config_port import SimilarityConfig


@pytest.fixture
def sample_curve():
    return as_curve([(0, 0), (2, 4), (18, -3)])


@pytest.fixture
def similar_curve():
    return as_curve([(0.3, -0.2), (2.2, 4.5), (16, -4)])


@pytest.fixture
def triangle_curve():
    return as_curve([(0, 0), (2, 4), (4, 0), (0, 0)])


@pytest.fixture
def line_curve():
    return as_curve([(0, 0), (4, 4)])


@pytest.fixture
def sample_config():
    return SimilarityConfig(estimation_points=50, rotations=20, decay_rate=6.0)


@pytest.fixture
def transform_curve():
    """곡선을 (translation, translation) 이동 → 스케일 → 회전한다."""
    def _transform(curve, translation, scale, theta):
        moved = translate_curve(curve, translation, translation)
        return rotate_curve(scale_curve(moved, scale), theta)
    return _transform


@pytest.fixture
def unit_square():
    return (
        Point(0.0, 0.0),
        Point(1.0, 0.0),
        Point(1.0, 1.0),
        Point(0.0, 1.0),
        Point(0.0, 0.0),
    )
