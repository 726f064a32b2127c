"""Menu engine configuration with support for environment variables and YAML files.

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

DEFAULT_BASE_URL = "https://api.qrmenu.e-prometrik.com"
DEFAULT_PLACEHOLDER_IMAGE = "https://placehold.co/400x300?text=No+Image"


@dataclass
class MenuConfig:
    """Configuration for the menu client and rendering.

    Attributes:
        base_url: Upstream menu service URL.
        http_timeout: Seconds before an upstream request is abandoned (default: 10.0).
        placeholder_image: Image shown for products without an image path.
        logo_timeout: Seconds a menu response waits for its logo before
            falling back to the unresolved reference (default: 2.0).
    """

    base_url: str = DEFAULT_BASE_URL
    http_timeout: float = 10.0
    placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE
    logo_timeout: float = 2.0


def load_config(
    config_file: str | Path | None = None,
    **overrides: Any,
) -> MenuConfig:
    """Load menu configuration with priority: overrides > env vars > yaml > defaults.

    Args:
        config_file: Optional path to YAML config file. Reads its `menu:` section.
        **overrides: Direct config overrides (highest priority).

    Returns:
        MenuConfig instance.

    Example:
        # From environment variables
        config = load_config()

        # From YAML file with overrides
        config = load_config("qrmenu.config.yaml", http_timeout=3.0)
    """
    config: dict[str, Any] = {}

    # 1. Load from YAML file (lowest priority after defaults)
    if config_file:
        config.update(load_section(config_file, "menu"))

    # 2. Override with environment variables
    env_mapping = {
        "base_url": "QRMENU_BASE_URL",
        "http_timeout": "QRMENU_HTTP_TIMEOUT",
        "placeholder_image": "QRMENU_PLACEHOLDER_IMAGE",
        "logo_timeout": "QRMENU_LOGO_TIMEOUT",
    }

    for key, env_var in env_mapping.items():
        if env_val := os.getenv(env_var):
            config[key] = env_val

    # 3. Override with explicit kwargs (highest priority)
    config.update({k: v for k, v in overrides.items() if v is not None})

    # Type conversions
    if "http_timeout" in config:
        config["http_timeout"] = float(config["http_timeout"])
    if "logo_timeout" in config:
        config["logo_timeout"] = float(config["logo_timeout"])
    if "base_url" in config:
        config["base_url"] = str(config["base_url"]).rstrip("/")

    return MenuConfig(**config)
