"""곡선 간 유사 변환 추정.

재샘플링된 대응점으로부터 source → target 의 스케일, 회전, 이동을
최소제곱으로 추정한다.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging
from typing import Any

import nudged

from shape_similarity.domain.geometry import (
    rotate_curve,
    scale_curve,
    translate_curve,
)
from shape_similarity.domain.value_objects.options import SimilarityOptions
from shape_similarity.domain.value_objects.point import Curve, as_curve
from shape_similarity.usecase.resample_curve import resample_curve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveTransform:
    """추정된 유사 변환.

    Args:
        rotation: 회전 각도 (rad).
        scale: 스케일 팩터.
        translation: (tx, ty) 이동 벡터.
        mse: 대응점 평균 제곱 오차.
    """

    rotation: float
    scale: float
    translation: tuple[float, float]
    mse: float

    def apply(self, curve: Curve) -> Curve:
        """곡선에 스케일 → 회전 → 이동 순서로 변환을 적용한다."""
        moved = rotate_curve(scale_curve(curve, self.scale), self.rotation)
        return translate_curve(moved, *self.translation)


def estimate_transform(
    source: Iterable[Any],
    target: Iterable[Any],
    num_points: int = 50,
) -> CurveTransform:
    """source 곡선을 target 곡선에 맞추는 유사 변환을 계산한다.

    Args:
        source: 변환할 곡선.
        target: 기준 곡선.
        num_points: 대응점 개수 (재샘플링 점 개수).

    Returns:
        CurveTransform 객체 (source → target).

    Raises:
        InvalidOptionError: num_points가 2 미만일 때.
        InvalidCurveError: 곡선 형식이 잘못됐을 때.
    """
    SimilarityOptions(estimation_points=num_points).validate()
    domain = [
        [p.x, p.y] for p in resample_curve(as_curve(source), num_points)
    ]
    range_ = [
        [p.x, p.y] for p in resample_curve(as_curve(target), num_points)
    ]

    tf = nudged.estimate(domain, range_)
    mse = nudged.estimate_error(tf, domain, range_)
    logger.info('Curve transform MSE: %.6f', mse)

    tx, ty = tf.get_translation()
    return CurveTransform(
        rotation=float(tf.get_rotation()),
        scale=float(tf.get_scale()),
        translation=(float(tx), float(ty)),
        mse=float(mse),
    )
