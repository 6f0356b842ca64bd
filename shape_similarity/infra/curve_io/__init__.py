"""곡선 파일 입출력 인프라."""

from shape_similarity.infra.curve_io.curve_loader import load_curve

__all__ = ["load_curve"]
