"""형상 유사도 도메인 열거형 정의."""

from enum import StrEnum


class RotationMode(StrEnum):
    """회전 정렬 방식."""

    UNRESTRICTED = 'UNRESTRICTED'
    RESTRICTED = 'RESTRICTED'
