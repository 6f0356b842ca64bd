"""평면 곡선 형상 유사도 라이브러리.

두 곡선을 호 길이 기준으로 재샘플링하고 정규화한 뒤
회전 정렬 잔차를 [0, 1] 유사도로 변환한다.
"""

from shape_similarity.domain.exceptions import (
    InvalidCurveError,
    InvalidOptionError,
    ShapeSimilarityError,
)
from shape_similarity.domain.geometry import rotate_curve
from shape_similarity.domain.value_objects.comparison import ShapeComparison
from shape_similarity.domain.value_objects.options import SimilarityOptions
from shape_similarity.domain.value_objects.point import Curve, Point
from shape_similarity.usecase.compare_shapes import (
    CompareShapes,
    shape_similarity,
)

__all__ = [
    'CompareShapes',
    'Curve',
    'InvalidCurveError',
    'InvalidOptionError',
    'Point',
    'ShapeComparison',
    'ShapeSimilarityError',
    'SimilarityOptions',
    'rotate_curve',
    'shape_similarity',
]
