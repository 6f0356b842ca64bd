"""YAML 파일 기반 설정 로더 구현체."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from shape_similarity.usecase.ports.config_port import (
    ConfigPort,
    SimilarityConfig,
)

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent.parent
    / "config"
    / "default_params.yaml"
)


class YamlConfigLoader(ConfigPort):
    """ConfigPort의 YAML 파일 구현체.

    YAML 파일에서 설정을 읽어 SimilarityConfig로 변환한다.
    파일이 없거나 형식이 잘못되면 기본값을 사용한다.

    Args:
        config_path: YAML 설정 파일 경로. None이면 기본 경로 사용.
    """

    def __init__(self, config_path: Path | str | None = None) -> None:
        self._path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    def load(self) -> SimilarityConfig:
        """YAML 파일에서 설정을 로드한다.

        Raises:
            InvalidOptionError: 설정 값이 유효 범위를 벗어날 때.
        """
        params = self._extract_params(self._read_yaml())
        defaults = SimilarityConfig()

        config = SimilarityConfig(
            estimation_points=params.get(
                "estimation_points", defaults.estimation_points
            ),
            rotations=params.get("rotations", defaults.rotations),
            decay_rate=params.get("decay_rate", defaults.decay_rate),
        )
        config.validate()

        logger.info("Config loaded from %s", self._path)
        return config

    def _read_yaml(self) -> dict[str, Any]:
        """YAML 파일을 dict로 읽는다."""
        if not self._path.exists():
            logger.warning(
                "Config file not found: %s, using defaults", self._path
            )
            return {}

        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            logger.warning("Invalid YAML format, using defaults")
            return {}

        return data

    def _extract_params(self, raw: dict[str, Any]) -> dict[str, Any]:
        """YAML 구조에서 shape_similarity 섹션을 추출한다."""
        section = raw.get("shape_similarity", raw)
        if isinstance(section, dict):
            return section
        return {}
