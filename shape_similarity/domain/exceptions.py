"""형상 유사도 도메인 예외 정의."""


class DomainError(Exception):
    """도메인 계층 기본 예외."""


class ShapeSimilarityError(DomainError):
    """형상 유사도 계산 관련 예외."""


class InvalidOptionError(ShapeSimilarityError):
    """유사도 옵션 유효성 검증 실패 시."""


class InvalidCurveError(ShapeSimilarityError):
    """곡선 입력이 형식에 맞지 않을 때."""
