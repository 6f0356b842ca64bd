"""형상 유사도 유스케이스 레이어.

재샘플링, 정규화, 회전 정렬, 점수화 단계와 이를 조율하는
비교 유스케이스를 정의한다. domain 레이어만 의존한다.
"""

from shape_similarity.usecase.align_rotation import (
    align_rotation,
    rotation_cost,
)
from shape_similarity.usecase.compare_shapes import (
    CompareShapes,
    shape_similarity,
)
from shape_similarity.usecase.normalize_curve import normalize_curve
from shape_similarity.usecase.resample_curve import resample_curve
from shape_similarity.usecase.score_similarity import score_similarity

__all__ = [
    "CompareShapes",
    "align_rotation",
    "normalize_curve",
    "resample_curve",
    "rotation_cost",
    "score_similarity",
    "shape_similarity",
]
