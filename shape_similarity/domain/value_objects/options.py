"""유사도 계산 옵션 값 객체."""

from dataclasses import dataclass
import math

from shape_similarity.domain.exceptions import InvalidOptionError
from shape_similarity.domain.value_objects.point import MIN_CURVE_POINTS
from shape_similarity.domain.value_objects.rotation import (
    RestrictedRotation,
    RotationStrategy,
    UnrestrictedRotation,
)


@dataclass(frozen=True)
class SimilarityOptions:
    """호출 단위 유사도 옵션. None인 필드는 설정 기본값을 따른다.

    Args:
        estimation_points: 재샘플링 점 개수 (2 이상).
        rotations: 제한 회전 탐색 반복 횟수 (0 이상).
            restrict_rotation_angle이 있을 때만 사용된다.
        restrict_rotation_angle: 허용 회전 크기 (rad). 부호는 무시되며
            절댓값이 PI 이하여야 한다. None이면 회전 제한 없음.
    """

    estimation_points: int | None = None
    rotations: int | None = None
    restrict_rotation_angle: float | None = None

    def validate(self) -> None:
        """옵션 유효성을 검증한다.

        Raises:
            InvalidOptionError: 유효 범위를 벗어난 옵션이 있을 때.
        """
        angle = self.restrict_rotation_angle
        if angle is not None and not abs(angle) <= math.pi:
            raise InvalidOptionError(
                f'restrict_rotation_angle cannot be larger than PI '
                f'(입력: {angle}).'
            )

        if self.estimation_points is not None and (
            not _is_int(self.estimation_points)
            or self.estimation_points < MIN_CURVE_POINTS
        ):
            raise InvalidOptionError(
                f'estimation_points는 {MIN_CURVE_POINTS} 이상의 정수여야 '
                f'합니다 (입력: {self.estimation_points}).'
            )

        if self.rotations is not None and (
            not _is_int(self.rotations) or self.rotations < 0
        ):
            raise InvalidOptionError(
                f'rotations는 0 이상의 정수여야 합니다 '
                f'(입력: {self.rotations}).'
            )

    def rotation_strategy(self, default_rotations: int) -> RotationStrategy:
        """회전 정렬 전략을 선택한다.

        Args:
            default_rotations: rotations 미지정 시 사용할 반복 횟수.
        """
        if self.restrict_rotation_angle is None:
            return UnrestrictedRotation()
        iterations = (
            default_rotations if self.rotations is None else self.rotations
        )
        return RestrictedRotation(
            bound=abs(self.restrict_rotation_angle), iterations=iterations
        )


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
