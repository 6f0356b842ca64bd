"""회전 정렬 전략 및 결과 값 객체."""

from dataclasses import dataclass

from shape_similarity.domain.enums import RotationMode


@dataclass(frozen=True)
class UnrestrictedRotation:
    """제한 없는 회전 정렬 (닫힌 해)."""

    mode: RotationMode = RotationMode.UNRESTRICTED


@dataclass(frozen=True)
class RestrictedRotation:
    """[-bound, bound] 구간으로 제한된 회전 정렬 (유계 탐색).

    Args:
        bound: 허용 회전 크기 (rad), 0 ~ PI.
        iterations: 구간 축소 반복 횟수.
    """

    bound: float
    iterations: int
    mode: RotationMode = RotationMode.RESTRICTED


RotationStrategy = UnrestrictedRotation | RestrictedRotation


@dataclass(frozen=True)
class AlignmentResult:
    """회전 정렬 결과.

    Args:
        theta: 두 번째 곡선에 적용할 회전각 (rad).
        cost: 해당 회전에서의 점별 제곱 거리 합.
    """

    theta: float
    cost: float
