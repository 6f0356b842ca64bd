"""형상 유사도 값 객체 (불변, 동등성 기반 비교)."""

from shape_similarity.domain.value_objects.comparison import ShapeComparison
from shape_similarity.domain.value_objects.options import SimilarityOptions
from shape_similarity.domain.value_objects.point import (
    Curve,
    Point,
    as_curve,
    as_point,
)
from shape_similarity.domain.value_objects.rotation import (
    AlignmentResult,
    RestrictedRotation,
    RotationStrategy,
    UnrestrictedRotation,
)

__all__ = [
    'AlignmentResult',
    'Curve',
    'Point',
    'RestrictedRotation',
    'RotationStrategy',
    'ShapeComparison',
    'SimilarityOptions',
    'UnrestrictedRotation',
    'as_curve',
    'as_point',
]
