"""설정 포트 인터페이스.

유사도 계산 기본 설정의 로딩을 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import math

from shape_similarity.domain.exceptions import InvalidOptionError
from shape_similarity.domain.value_objects.point import MIN_CURVE_POINTS


@dataclass(frozen=True)
class SimilarityConfig:
    """유사도 계산 기본 설정.

    Args:
        estimation_points: 기본 재샘플링 점 개수.
        rotations: 제한 회전 탐색의 기본 반복 횟수.
        decay_rate: 평균 잔차를 유사도로 변환하는 지수 감쇠율.
    """

    estimation_points: int = 50
    rotations: int = 20
    decay_rate: float = 6.0

    def validate(self) -> None:
        """설정 유효성을 검증한다.

        Raises:
            InvalidOptionError: 유효 범위를 벗어난 설정이 있을 때.
        """
        if (
            not _is_int(self.estimation_points)
            or self.estimation_points < MIN_CURVE_POINTS
        ):
            raise InvalidOptionError(
                f'설정 estimation_points는 {MIN_CURVE_POINTS} 이상의 정수여야 '
                f'합니다 (입력: {self.estimation_points!r}).'
            )

        if not _is_int(self.rotations) or self.rotations < 0:
            raise InvalidOptionError(
                f'설정 rotations는 0 이상의 정수여야 합니다 '
                f'(입력: {self.rotations!r}).'
            )

        if (
            not isinstance(self.decay_rate, (int, float))
            or isinstance(self.decay_rate, bool)
            or not math.isfinite(self.decay_rate)
            or self.decay_rate <= 0
        ):
            raise InvalidOptionError(
                f'설정 decay_rate는 0보다 큰 유한한 수여야 합니다 '
                f'(입력: {self.decay_rate!r}).'
            )


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigPort(ABC):
    """설정 로더 인터페이스."""

    @abstractmethod
    def load(self) -> SimilarityConfig:
        """설정을 로드한다.

        Returns:
            SimilarityConfig 객체.

        Raises:
            InvalidOptionError: 설정 값이 유효 범위를 벗어날 때.
        """
