"""곡선 재샘플링.

폴리라인을 따라 같은 호 길이 간격으로 정확히 N개의 점을 배치한다.
"""

from shape_similarity.domain.geometry import point_distance
from shape_similarity.domain.value_objects.point import Curve, Point


def resample_curve(curve: Curve, num_points: int) -> Curve:
    """곡선을 같은 호 길이 간격의 num_points개 점으로 재샘플링한다.

    첫 점과 마지막 점은 원래 곡선의 양 끝점과 같고, 내부 점은
    해당 호 길이 위치를 포함하는 선분 위에서 선형 보간한다.
    전체 길이가 0이면 첫 점을 num_points번 반복한 곡선을 반환한다.

    Args:
        curve: 2개 이상의 점으로 이루어진 곡선.
        num_points: 출력 점 개수 (2 이상).

    Returns:
        재샘플링된 곡선.
    """
    cumulative = [0.0]
    for a, b in zip(curve, curve[1:]):
        cumulative.append(cumulative[-1] + point_distance(a, b))
    total = cumulative[-1]

    if total == 0:
        return (curve[0],) * num_points

    step = total / (num_points - 1)
    last_segment = len(curve) - 2
    points = [curve[0]]
    segment = 0
    for i in range(1, num_points - 1):
        target = i * step
        while segment < last_segment and cumulative[segment + 1] < target:
            segment += 1
        start = curve[segment]
        end = curve[segment + 1]
        seg_len = cumulative[segment + 1] - cumulative[segment]
        t = (target - cumulative[segment]) / seg_len if seg_len > 0 else 0.0
        points.append(
            Point(
                x=start.x + (end.x - start.x) * t,
                y=start.y + (end.y - start.y) * t,
            )
        )
    points.append(curve[-1])
    return tuple(points)
