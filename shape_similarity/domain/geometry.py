"""곡선 기하 연산.

점 간 거리, 곡선 길이, 원점 기준 회전/이동/스케일 변환을 제공한다.
모든 함수는 입력을 변경하지 않고 새 Curve를 반환한다.
"""

from __future__ import annotations

import math

from shape_similarity.domain.value_objects.point import Curve, Point


def point_distance(a: Point, b: Point) -> float:
    """두 점 사이의 유클리드 거리."""
    return math.hypot(b.x - a.x, b.y - a.y)


def curve_length(curve: Curve) -> float:
    """곡선(폴리라인)의 전체 호 길이."""
    return sum(point_distance(a, b) for a, b in zip(curve, curve[1:]))


def rotate_curve(curve: Curve, theta: float) -> Curve:
    """원점을 중심으로 곡선을 회전한다.

    Args:
        curve: 입력 곡선.
        theta: 회전각 (rad), 반시계 방향이 양수.

    Returns:
        회전된 곡선.
    """
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return tuple(
        Point(x=p.x * cos_t - p.y * sin_t, y=p.x * sin_t + p.y * cos_t)
        for p in curve
    )


def translate_curve(curve: Curve, dx: float, dy: float) -> Curve:
    """곡선을 (dx, dy)만큼 평행 이동한다."""
    return tuple(Point(x=p.x + dx, y=p.y + dy) for p in curve)


def scale_curve(curve: Curve, factor: float) -> Curve:
    """원점 기준으로 곡선을 등방 스케일한다."""
    return tuple(Point(x=p.x * factor, y=p.y * factor) for p in curve)
