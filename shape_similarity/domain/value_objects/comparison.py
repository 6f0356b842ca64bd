"""형상 비교 결과 값 객체."""

from dataclasses import dataclass

from shape_similarity.domain.enums import RotationMode


@dataclass(frozen=True)
class ShapeComparison:
    """두 곡선 비교의 상세 결과.

    Args:
        similarity: 유사도 (0.0~1.0).
        theta: 두 번째 곡선을 첫 번째에 맞추는 회전각 (rad).
        cost: 정규화된 곡선 간 최소 제곱 거리 합.
        estimation_points: 재샘플링 점 개수.
        rotation_mode: 사용된 회전 정렬 방식.
    """

    similarity: float
    theta: float
    cost: float
    estimation_points: int
    rotation_mode: RotationMode
