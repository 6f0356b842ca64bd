"""유스케이스 포트 인터페이스 (ABC).

infra 레이어에서 구현해야 하는 추상 인터페이스를 정의한다.
"""

from shape_similarity.usecase.ports.config_port import (
    ConfigPort,
    SimilarityConfig,
)

__all__ = [
    "ConfigPort",
    "SimilarityConfig",
]
