"""곡선 파일 로더.

YAML(JSON 포함) 파일에서 곡선을 읽는다. 허용 형식:

    - [0, 0]
    - [2, 4]

또는 ``curve:`` / ``points:`` 키 아래의 같은 목록, 각 점은
``[x, y]`` 또는 ``{x: ..., y: ...}`` 형태.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from shape_similarity.domain.exceptions import InvalidCurveError
from shape_similarity.domain.value_objects.point import Curve, as_curve

logger = logging.getLogger(__name__)

_CURVE_KEYS = ('curve', 'points')


def load_curve(path: Path | str) -> Curve:
    """파일에서 곡선을 로드한다.

    Args:
        path: YAML 또는 JSON 파일 경로.

    Returns:
        로드된 Curve.

    Raises:
        InvalidCurveError: 파일을 읽을 수 없거나 형식이 잘못됐을 때.
    """
    path = Path(path)
    try:
        with open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise InvalidCurveError(f'곡선 파일을 읽을 수 없습니다: {path}') from e
    except yaml.YAMLError as e:
        raise InvalidCurveError(f'곡선 파일 파싱 실패: {path}') from e

    curve = as_curve(_extract_points(data, path))
    logger.debug('Loaded curve from %s: %d points', path, len(curve))
    return curve


def _extract_points(data: Any, path: Path) -> Any:
    """최상위 목록 또는 curve/points 키의 값을 꺼낸다."""
    if isinstance(data, dict):
        for key in _CURVE_KEYS:
            if key in data:
                return data[key]
        raise InvalidCurveError(
            f'곡선 파일에 {"/".join(_CURVE_KEYS)} 키가 없습니다: {path}'
        )
    if data is None:
        raise InvalidCurveError(f'곡선 파일이 비어있습니다: {path}')
    return data
