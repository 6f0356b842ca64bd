"""최소 제곱 거리 합을 [0, 1] 유사도로 변환한다."""

import math


def score_similarity(
    cost: float, num_points: int, decay_rate: float = 6.0
) -> float:
    """exp(-decay_rate * cost / num_points).

    단위 RMS 곡선끼리의 점당 평균 잔차가 0이면 1, 잔차가 커질수록
    0에 가까워지지만 유한한 잔차에서는 0이 되지 않는다.

    Args:
        cost: 정렬 후 점별 제곱 거리 합 (0 이상).
        num_points: 재샘플링 점 개수.
        decay_rate: 감쇠율 (양수).
    """
    residual = max(cost, 0.0) / num_points
    return math.exp(-decay_rate * residual)
