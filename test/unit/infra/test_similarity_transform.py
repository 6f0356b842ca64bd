"""estimate_transform 유닛 테스트."""

import logging
import math

import pytest

from shape_similarity.domain.exceptions import InvalidOptionError
from shape_similarity.domain.geometry import (
    rotate_curve,
    scale_curve,
    translate_curve,
)
from shape_similarity.infra.transform.similarity_transform import (
    CurveTransform,
    estimate_transform,
)


@pytest.fixture
def moved_curve(sample_curve):
    return translate_curve(
        rotate_curve(scale_curve(sample_curve, 3.0), 0.5), 10.0, -5.0
    )


class TestEstimateTransform:
    def test_recovers_similarity_transform(self, sample_curve, moved_curve):
        tf = estimate_transform(sample_curve, moved_curve)

        assert tf.rotation == pytest.approx(0.5, abs=1e-6)
        assert tf.scale == pytest.approx(3.0, rel=1e-6)
        assert tf.translation[0] == pytest.approx(10.0, abs=1e-6)
        assert tf.translation[1] == pytest.approx(-5.0, abs=1e-6)
        assert tf.mse == pytest.approx(0.0, abs=1e-9)

    def test_apply_maps_source_onto_target(self, sample_curve, moved_curve):
        tf = estimate_transform(sample_curve, moved_curve, num_points=20)

        for a, b in zip(tf.apply(sample_curve), moved_curve):
            assert a.x == pytest.approx(b.x, abs=1e-6)
            assert a.y == pytest.approx(b.y, abs=1e-6)

    def test_nonzero_error_for_different_shapes(
        self, triangle_curve, line_curve
    ):
        tf = estimate_transform(line_curve, triangle_curve)
        assert tf.mse > 0.1

    def test_logs_mse(self, sample_curve, moved_curve, caplog):
        caplog.set_level(logging.INFO)
        estimate_transform(sample_curve, moved_curve)
        assert 'Curve transform MSE' in caplog.text

    def test_invalid_point_count(self, sample_curve):
        with pytest.raises(InvalidOptionError):
            estimate_transform(sample_curve, sample_curve, num_points=1)


class TestCurveTransform:
    def test_identity(self, sample_curve):
        tf = CurveTransform(
            rotation=0.0, scale=1.0, translation=(0.0, 0.0), mse=0.0
        )
        assert tf.apply(sample_curve) == sample_curve

    def test_apply_order(self, unit_square):
        tf = CurveTransform(
            rotation=math.pi / 2, scale=2.0, translation=(1.0, 0.0), mse=0.0
        )
        p = tf.apply(unit_square)[1]
        assert p.x == pytest.approx(1.0)
        assert p.y == pytest.approx(2.0)
