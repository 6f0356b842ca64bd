"""설정 인프라 (ConfigPort 구현)."""

from shape_similarity.infra.config.yaml_config_loader import YamlConfigLoader

__all__ = ["YamlConfigLoader"]
