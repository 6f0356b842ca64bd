"""회전 정렬.

정규화된 두 곡선에 대해 C(theta) = sum |A_i - R(theta) B_i|^2 를
최소화하는 회전각을 찾는다. 제한이 없으면 닫힌 해를, 회전 범위가
제한되면 [-bound, bound] 구간의 황금분할 탐색을 사용한다. 탐색은 비용
함수를 iterations + 2 회 평가한다.
"""

from __future__ import annotations

import math

from shape_similarity.domain.value_objects.point import Curve
from shape_similarity.domain.value_objects.rotation import (
    AlignmentResult,
    RestrictedRotation,
    RotationStrategy,
)

_INV_PHI = (math.sqrt(5.0) - 1.0) / 2.0


def rotation_cost(curve_a: Curve, curve_b: Curve, theta: float) -> float:
    """curve_b를 theta만큼 회전했을 때 점별 제곱 거리 합."""
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    total = 0.0
    for a, b in zip(curve_a, curve_b):
        dx = a.x - (b.x * cos_t - b.y * sin_t)
        dy = a.y - (b.x * sin_t + b.y * cos_t)
        total += dx * dx + dy * dy
    return total


def align_rotation(
    curve_a: Curve, curve_b: Curve, strategy: RotationStrategy
) -> AlignmentResult:
    """curve_b를 curve_a에 맞추는 회전각과 그 비용을 구한다.

    Args:
        curve_a: 기준 곡선 (정규화됨).
        curve_b: 회전할 곡선 (정규화됨, curve_a와 같은 길이).
        strategy: 회전 정렬 전략.

    Returns:
        AlignmentResult.
    """
    if isinstance(strategy, RestrictedRotation):
        return _bounded_search(
            curve_a, curve_b, strategy.bound, strategy.iterations
        )
    return _closed_form(curve_a, curve_b)


def _closed_form(curve_a: Curve, curve_b: Curve) -> AlignmentResult:
    """C(theta) = const - 2 (P cos + Q sin) 의 최소점 atan2(Q, P)."""
    dot = 0.0
    cross = 0.0
    for a, b in zip(curve_a, curve_b):
        dot += a.x * b.x + a.y * b.y
        cross += b.x * a.y - b.y * a.x
    theta = math.atan2(cross, dot)
    return AlignmentResult(
        theta=theta, cost=rotation_cost(curve_a, curve_b, theta)
    )


def _bounded_search(
    curve_a: Curve, curve_b: Curve, bound: float, iterations: int
) -> AlignmentResult:
    """[-bound, bound] 구간에서 황금분할 탐색으로 국소 최소를 찾는다.

    비용 함수는 iterations + 2 회 평가하며 최종 구간의 두 탐색점 중
    비용이 작은 쪽을 반환한다. iterations가 0이면 구간 중앙(theta=0)만
    평가한다. 구간 밖의 최적 회전은 보정하지 않으며 경계 부근의 더 큰
    비용이 반환된다.
    """
    if iterations == 0:
        return AlignmentResult(
            theta=0.0, cost=rotation_cost(curve_a, curve_b, 0.0)
        )

    lo, hi = -bound, bound
    x1 = hi - _INV_PHI * (hi - lo)
    x2 = lo + _INV_PHI * (hi - lo)
    f1 = rotation_cost(curve_a, curve_b, x1)
    f2 = rotation_cost(curve_a, curve_b, x2)

    for _ in range(iterations):
        if f1 <= f2:
            hi, x2, f2 = x2, x1, f1
            x1 = hi - _INV_PHI * (hi - lo)
            f1 = rotation_cost(curve_a, curve_b, x1)
        else:
            lo, x1, f1 = x1, x2, f2
            x2 = lo + _INV_PHI * (hi - lo)
            f2 = rotation_cost(curve_a, curve_b, x2)

    cost, theta = min((f1, x1), (f2, x2))
    return AlignmentResult(theta=theta, cost=cost)
