"""곡선 정규화 (중심 이동 + 단위 RMS 반경 스케일)."""

import math

from shape_similarity.domain.value_objects.point import Curve, Point


def normalize_curve(curve: Curve) -> Curve:
    """무게중심을 원점으로 옮기고 RMS 반경이 1이 되도록 스케일한다.

    모든 점이 같으면 스케일을 생략한다 (원점에 모인 곡선).
    """
    n = len(curve)
    cx = sum(p.x for p in curve) / n
    cy = sum(p.y for p in curve) / n
    centered = [(p.x - cx, p.y - cy) for p in curve]

    mean_sq = sum(x * x + y * y for x, y in centered) / n
    scale = 1.0 / math.sqrt(mean_sq) if mean_sq > 0 else 1.0
    return tuple(Point(x=x * scale, y=y * scale) for x, y in centered)
