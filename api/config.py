"""API server configuration with support for environment variables and YAML files.

Configuration priority (highest to lowest):
1. Explicit kwargs passed to load_config()
2. Environment variables (QRMENU_*)
3. YAML config file (if provided)
4. Default values
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from shared.config import load_section


@dataclass
class APIConfig:
    """API server configuration.

    Attributes:
        host: Server bind address (default: 0.0.0.0).
        port: Server port (default: 8000).
        debug: Enable debug mode (default: False).
        log_level: Root logging level (default: INFO).
    """

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"


def load_config(
    config_file: str | Path | None = None,
    **overrides: Any,
) -> APIConfig:
    """Load API configuration with priority: overrides > env vars > yaml > defaults.

    Args:
        config_file: Optional path to YAML config file. Reads its `api:` section.
        **overrides: Direct config overrides (highest priority).

    Returns:
        APIConfig instance.

    Example:
        # QRMENU_LOG_LEVEL=debug in the environment
        config = load_config()
        assert config.log_level == "DEBUG"

        # api: section of the shared file, served on localhost only
        config = load_config(find_config_file(), host="127.0.0.1")
    """
    config: dict[str, Any] = {}

    # 1. Load from YAML file (lowest priority after defaults)
    if config_file:
        config.update(load_section(config_file, "api"))

    # 2. Override with environment variables
    env_mapping = {
        "host": "QRMENU_HOST",
        "port": "QRMENU_PORT",
        "debug": "QRMENU_DEBUG",
        "log_level": "QRMENU_LOG_LEVEL",
    }

    for key, env_var in env_mapping.items():
        if env_val := os.getenv(env_var):
            config[key] = env_val

    # 3. Override with explicit kwargs (highest priority)
    config.update({k: v for k, v in overrides.items() if v is not None})

    # Type conversions
    if "port" in config:
        config["port"] = int(config["port"])
    if "debug" in config:
        config["debug"] = (
            config["debug"]
            if isinstance(config["debug"], bool)
            else str(config["debug"]).lower() in ("true", "1", "yes")
        )
    if "log_level" in config:
        config["log_level"] = str(config["log_level"]).upper()

    return APIConfig(**config)
