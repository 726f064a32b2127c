"""Shared configuration utilities for the menu engine and API.

Both the engine and the API read from a single config file: `qrmenu.config.yaml`
in the project root.

Configuration priority (highest to lowest):
1. Explicit kwargs passed to load functions
2. Environment variables (QRMENU_*)
3. qrmenu.config.yaml file
4. Default values

Example qrmenu.config.yaml:
```yaml
menu:
  base_url: https://api.qrmenu.e-prometrik.com
  http_timeout: 10.0
  placeholder_image: https://placehold.co/400x300?text=No+Image

api:
  host: 0.0.0.0
  port: 8000
  log_level: INFO
```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

CONFIG_FILENAME = "qrmenu.config.yaml"


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find qrmenu.config.yaml by searching from start_path up to root.

    Args:
        start_path: Directory to start search from (default: cwd).

    Returns:
        Path to config file if found, None otherwise.
    """
    current = Path(start_path) if start_path else Path.cwd()

    for parent in [current, *current.parents]:
        config_path = parent / CONFIG_FILENAME
        if config_path.exists():
            return config_path

    return None


def load_yaml_file(config_file: str | Path) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        config_file: Path to YAML config file.

    Returns:
        Parsed YAML content as dict, or empty dict if file doesn't exist.
    """
    import yaml

    path = Path(config_file)
    if not path.exists():
        return {}

    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_section(config: dict[str, Any], section: str) -> dict[str, Any]:
    """Extract a section from config dict.

    Args:
        config: Full config dict.
        section: Section name ('menu' or 'api').

    Returns:
        Section dict, or empty dict if not found.
    """
    return config.get(section, {}) if isinstance(config.get(section), dict) else {}


def load_section(config_file: str | Path, section: str) -> dict[str, Any]:
    """Load one section of a config file.

    A file without any of the known top-level sections is treated as a
    section on its own, so single-purpose files stay flat.
    """
    raw = load_yaml_file(config_file)
    if any(isinstance(raw.get(name), dict) for name in ("menu", "api")):
        return get_section(raw, section)
    return raw
