#!/usr/bin/env python3
import os
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import yaml

from .core import DEFAULT_LOCALE


@dataclass
class AppConfig:
    """Settings passed to the application at startup."""
    locale: str = DEFAULT_LOCALE
    resource_dir: Optional[str] = None
    dictionary_file: Optional[str] = None
    log_level: str = "INFO"
    window_width: int = 600
    window_height: int = 700


def load_yaml_file(file_path: str) -> Dict[str, Any]:
    """Load a YAML file.

    Args:
        file_path: Path to the YAML file.

    Returns:
        The parsed document, or an empty dict for an empty file.
    """
    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if data is not None else {}


def load_config(config_file: Optional[str] = None, **overrides: Any) -> AppConfig:
    """Build the application config.

    Values come from the defaults, then the YAML file if given, then any
    override that is not None.

    Args:
        config_file: Optional path to a YAML config file.
        **overrides: Explicit values, typically from command line arguments.

    Returns:
        The resulting AppConfig.
    """
    known = {f.name for f in fields(AppConfig)}
    values: Dict[str, Any] = {}

    if config_file:
        if not os.path.isfile(config_file):
            raise ValueError(f"Config file '{config_file}' not found.")
        try:
            data = load_yaml_file(config_file)
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing config file '{config_file}': {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Config file '{config_file}' must contain a mapping.")
        values.update(data)
        logging.debug(f"Loaded config from {config_file}")

    values.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    for key in ("window_width", "window_height"):
        if key in values:
            try:
                values[key] = int(values[key])
            except (TypeError, ValueError):
                raise ValueError(f"{key} must be an integer, got {values[key]!r}") from None
    if "log_level" in values:
        level = str(values["log_level"]).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log_level '{values['log_level']}'")
        values["log_level"] = level

    return AppConfig(**values)
