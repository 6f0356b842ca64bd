"""점 및 곡선 값 객체."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from shape_similarity.domain.exceptions import InvalidCurveError


@dataclass(frozen=True)
class Point:
    """2차원 평면 위의 점.

    Args:
        x: X 좌표.
        y: Y 좌표.
    """

    x: float
    y: float


Curve = tuple[Point, ...]
"""순서가 있는 점 시퀀스. 닫힌 곡선은 첫 점을 마지막에 반복한다."""

MIN_CURVE_POINTS = 2


def as_point(value: Any) -> Point:
    """Point, (x, y) 쌍, {'x', 'y'} 매핑을 Point로 변환한다.

    Raises:
        InvalidCurveError: 변환할 수 없는 값일 때.
    """
    if isinstance(value, Point):
        return value
    try:
        if isinstance(value, Mapping):
            return Point(x=float(value['x']), y=float(value['y']))
        x, y = value
        return Point(x=float(x), y=float(y))
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidCurveError(
            f'점으로 변환할 수 없는 값입니다: {value!r}'
        ) from e


def as_curve(points: Iterable[Any]) -> Curve:
    """점 시퀀스를 Curve로 변환하고 최소 길이를 검증한다.

    Args:
        points: Point 또는 좌표 쌍의 시퀀스.

    Returns:
        불변 Curve.

    Raises:
        InvalidCurveError: 점이 2개 미만이거나 변환 불가한 점이 있을 때.
    """
    if isinstance(points, (str, bytes, Mapping)):
        raise InvalidCurveError(f'곡선은 점의 시퀀스여야 합니다: {points!r}')
    try:
        curve = tuple(as_point(p) for p in points)
    except TypeError as e:
        raise InvalidCurveError(
            f'곡선은 점의 시퀀스여야 합니다: {points!r}'
        ) from e
    if len(curve) < MIN_CURVE_POINTS:
        raise InvalidCurveError(
            f'곡선에는 최소 {MIN_CURVE_POINTS}개의 점이 필요합니다 '
            f'(입력: {len(curve)}개).'
        )
    return curve
