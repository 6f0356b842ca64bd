"""형상 비교 유스케이스.

옵션 검증 → 재샘플링 → 정규화 → 회전 정렬 → 점수화 순서로
두 곡선의 유사도를 계산한다. 호출 간 공유 상태는 없다.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Any

from shape_similarity.domain.value_objects.comparison import ShapeComparison
from shape_similarity.domain.value_objects.options import SimilarityOptions
from shape_similarity.domain.value_objects.point import as_curve
from shape_similarity.usecase.align_rotation import align_rotation
from shape_similarity.usecase.normalize_curve import normalize_curve
from shape_similarity.usecase.ports.config_port import SimilarityConfig
from shape_similarity.usecase.resample_curve import resample_curve
from shape_similarity.usecase.score_similarity import score_similarity

logger = logging.getLogger(__name__)


class CompareShapes:
    """형상 비교 유스케이스.

    Args:
        config: 기본 설정. None이면 SimilarityConfig 기본값.

    Raises:
        InvalidOptionError: 설정 값이 유효 범위를 벗어날 때.
    """

    def __init__(self, config: SimilarityConfig | None = None) -> None:
        self._config = config or SimilarityConfig()
        self._config.validate()

    @property
    def config(self) -> SimilarityConfig:
        return self._config

    def execute(
        self,
        curve_a: Iterable[Any],
        curve_b: Iterable[Any],
        options: SimilarityOptions | None = None,
    ) -> ShapeComparison:
        """두 곡선을 비교하여 상세 결과를 반환한다.

        Args:
            curve_a: 기준 곡선 (Point 또는 (x, y) 시퀀스).
            curve_b: 비교 곡선.
            options: 호출 단위 옵션.

        Returns:
            ShapeComparison 객체.

        Raises:
            InvalidOptionError: 옵션이 유효 범위를 벗어날 때.
            InvalidCurveError: 곡선의 점이 2개 미만이거나 형식이 잘못됐을 때.
        """
        options = options or SimilarityOptions()
        options.validate()

        first = as_curve(curve_a)
        second = as_curve(curve_b)

        num_points = (
            options.estimation_points
            if options.estimation_points is not None
            else self._config.estimation_points
        )
        strategy = options.rotation_strategy(self._config.rotations)

        norm_a = normalize_curve(resample_curve(first, num_points))
        norm_b = normalize_curve(resample_curve(second, num_points))
        alignment = align_rotation(norm_a, norm_b, strategy)
        similarity = score_similarity(
            alignment.cost, num_points, self._config.decay_rate
        )

        logger.debug(
            'Compared curves: mode=%s, n=%d, theta=%.6f, cost=%.6f, '
            'similarity=%.6f',
            strategy.mode, num_points, alignment.theta, alignment.cost,
            similarity,
        )
        return ShapeComparison(
            similarity=similarity,
            theta=alignment.theta,
            cost=alignment.cost,
            estimation_points=num_points,
            rotation_mode=strategy.mode,
        )

    def similarity(
        self,
        curve_a: Iterable[Any],
        curve_b: Iterable[Any],
        options: SimilarityOptions | None = None,
    ) -> float:
        """두 곡선의 유사도 (0.0~1.0)."""
        return self.execute(curve_a, curve_b, options).similarity


def shape_similarity(
    curve_a: Iterable[Any],
    curve_b: Iterable[Any],
    options: SimilarityOptions | None = None,
) -> float:
    """기본 설정으로 두 곡선의 형상 유사도를 계산한다.

    이동, 등방 스케일, 회전에 불변이며 restrict_rotation_angle이
    주어지면 그 범위 밖의 회전은 낮은 점수를 받는다.

    Args:
        curve_a: 기준 곡선.
        curve_b: 비교 곡선.
        options: 호출 단위 옵션.

    Returns:
        유사도 (0.0~1.0).
    """
    return CompareShapes().similarity(curve_a, curve_b, options)
