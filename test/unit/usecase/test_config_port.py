"""SimilarityConfig 단위 테스트."""

import math

import pytest

from shape_similarity.domain.exceptions import InvalidOptionError
from shape_similarity.usecase.ports.config_port import SimilarityConfig


class TestSimilarityConfigValidate:
    def test_defaults_are_valid(self):
        SimilarityConfig().validate()

    def test_minimal_valid_values(self):
        SimilarityConfig(
            estimation_points=2, rotations=0, decay_rate=1e-3
        ).validate()

    def test_integer_decay_rate_is_valid(self):
        SimilarityConfig(decay_rate=4).validate()

    @pytest.mark.parametrize('points', [1, 0, -3, 2.7, '50', True, None])
    def test_invalid_estimation_points(self, points):
        with pytest.raises(InvalidOptionError, match='estimation_points'):
            SimilarityConfig(estimation_points=points).validate()

    @pytest.mark.parametrize('rotations', [-1, 1.5, 'many', False, None])
    def test_invalid_rotations(self, rotations):
        with pytest.raises(InvalidOptionError, match='rotations'):
            SimilarityConfig(rotations=rotations).validate()

    @pytest.mark.parametrize(
        'rate', [0, 0.0, -1.0, math.inf, math.nan, 'fast', True, None]
    )
    def test_invalid_decay_rate(self, rate):
        with pytest.raises(InvalidOptionError, match='decay_rate'):
            SimilarityConfig(decay_rate=rate).validate()
