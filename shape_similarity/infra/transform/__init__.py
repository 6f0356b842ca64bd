"""곡선 간 유사 변환 추정 인프라 (nudged)."""

from shape_similarity.infra.transform.similarity_transform import (
    CurveTransform,
    estimate_transform,
)

__all__ = ["CurveTransform", "estimate_transform"]
