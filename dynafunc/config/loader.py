# dynafunc/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML

Example config.yml:

    conversion:
      numeric: true
      collections: false
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from dynafunc.core.errors import ConfigError

from .conversion import ConversionConfig

logger = logging.getLogger(__name__)


def _load_yaml(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {config_path}", {"path": str(config_path)}) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}", {"path": str(config_path)}) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config root must be a mapping, got {type(data).__name__}",
            {"path": str(config_path)},
        )
    return data


def _merge_conversion(base: ConversionConfig, data: Mapping[str, Any]) -> ConversionConfig:
    """Apply known boolean keys onto base; unknown keys are ignored."""
    if not isinstance(data, Mapping):
        raise ConfigError("'conversion' must be a mapping", {"value": repr(data)})

    updates = {}
    for key in ConversionConfig.field_names():
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, bool):
            raise ConfigError(
                f"conversion.{key} must be a boolean, got {type(value).__name__}",
                {"key": key, "value": repr(value)},
            )
        updates[key] = value

    ignored = sorted(set(data) - set(ConversionConfig.field_names()))
    if ignored:
        logger.debug("Ignoring unknown conversion keys: %s", ", ".join(map(str, ignored)))

    return replace(base, **updates)


@dataclass(frozen=True)
class DynaFuncConfig:
    """
    Unified dynafunc configuration.

    All fields have code defaults - YAML is optional.
    """

    conversion: ConversionConfig = field(default_factory=ConversionConfig)

    @classmethod
    def default(cls) -> "DynaFuncConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "DynaFuncConfig":
        config = cls.default()
        if not data:
            return config
        if "conversion" in data:
            config = replace(config, conversion=_merge_conversion(config.conversion, data["conversion"]))
        return config

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "DynaFuncConfig":
        """
        Load configuration from a YAML file.

        Raises:
            ConfigError: missing file, invalid YAML or invalid values
        """
        path = Path(config_path)
        config = cls.from_dict(_load_yaml(path))
        logger.debug("Loaded dynafunc config from %s: %s", path, config.to_dict())
        return config

    def to_dict(self) -> Dict[str, Any]:
        return {"conversion": self.conversion.to_dict()}


def load_config(config_path: Optional[Union[str, Path]] = None) -> DynaFuncConfig:
    """
    Load configuration.

    Args:
        config_path: YAML file to read. None returns the code defaults.
    """
    if config_path is None:
        return DynaFuncConfig.default()
    return DynaFuncConfig.from_yaml(config_path)
