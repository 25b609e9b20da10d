import os
from typing import Any, Dict, Optional, Union

import pydantic
import yaml
from loguru import logger

from suitey_fixtures.errors import ConfigError
from suitey_fixtures.models import FixtureConfig, OverflowPolicy

ENV_OVERFLOW_POLICY = "SUITEY_OVERFLOW_POLICY"
ENV_LOG_LEVEL = "SUITEY_LOG_LEVEL"

_active_config: Optional[FixtureConfig] = None


def load_yaml_config(yaml_file: str) -> Dict[str, Any]:
    """加载YAML配置文件, 文件不存在时返回空配置"""
    if not os.path.exists(yaml_file):
        logger.debug(f"Config file {yaml_file} not found, using defaults")
        return {}
    try:
        with open(yaml_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error loading yaml file {yaml_file}: {str(e)}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {yaml_file} must contain a mapping, got {type(data).__name__}")
    return data


def load_config(path: Optional[str] = None) -> FixtureConfig:
    """
    Build a FixtureConfig from an optional YAML file and environment overrides.

    Environment variables win over the file:
    SUITEY_OVERFLOW_POLICY and SUITEY_LOG_LEVEL.

    Args:
        path (Optional[str]): YAML file with overflow_policy / log_level keys.

    Returns:
        FixtureConfig: The validated configuration.

    Raises:
        ConfigError: If the file is not valid YAML or a value is invalid.
    """
    values: Dict[str, Any] = {}
    if path:
        values.update(load_yaml_config(path))

    if os.environ.get(ENV_OVERFLOW_POLICY):
        values["overflow_policy"] = os.environ[ENV_OVERFLOW_POLICY].strip().lower()
    if os.environ.get(ENV_LOG_LEVEL):
        values["log_level"] = os.environ[ENV_LOG_LEVEL].strip().upper()

    try:
        config = FixtureConfig(**values)
    except pydantic.ValidationError as e:
        raise ConfigError(f"Invalid fixture configuration: {e}") from e

    logger.debug(f"Loaded fixture config: {config}")
    return config


def get_config() -> FixtureConfig:
    global _active_config
    if _active_config is None:
        _active_config = load_config()
    return _active_config


def set_config(config: FixtureConfig) -> None:
    global _active_config
    _active_config = config


def reset_config() -> None:
    """Forget the active config; the next get_config() reloads from the environment."""
    global _active_config
    _active_config = None


def resolve_overflow_policy(policy: Optional[Union[OverflowPolicy, str]] = None) -> OverflowPolicy:
    """Return the explicit policy if given, otherwise the active config's policy."""
    if policy is None:
        return get_config().overflow_policy
    return OverflowPolicy(policy)
