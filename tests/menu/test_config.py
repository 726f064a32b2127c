"""Tests for menu configuration."""

import os
import tempfile
from unittest import mock

from menu.config import DEFAULT_BASE_URL, DEFAULT_PLACEHOLDER_IMAGE, MenuConfig, load_config


class TestMenuConfig:
    """Tests for MenuConfig dataclass."""

    def test_default_values(self) -> None:
        """Config has expected default values."""
        config = MenuConfig()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.http_timeout == 10.0
        assert config.placeholder_image == DEFAULT_PLACEHOLDER_IMAGE
        assert config.logo_timeout == 2.0

    def test_custom_values(self) -> None:
        """Config accepts custom values."""
        config = MenuConfig(
            base_url="http://localhost:9000",
            http_timeout=2.5,
            placeholder_image="/static/none.png",
        )
        assert config.base_url == "http://localhost:9000"
        assert config.http_timeout == 2.5
        assert config.placeholder_image == "/static/none.png"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_with_no_args(self) -> None:
        """Load config returns defaults when no args provided."""
        config = load_config()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.http_timeout == 10.0

    def test_env_var_override(self) -> None:
        """Environment variables override defaults."""
        env = {
            "QRMENU_BASE_URL": "http://env-url:8080",
            "QRMENU_HTTP_TIMEOUT": "3.5",
            "QRMENU_PLACEHOLDER_IMAGE": "/img/empty.png",
            "QRMENU_LOGO_TIMEOUT": "0.5",
        }
        with mock.patch.dict(os.environ, env, clear=False):
            config = load_config()

        assert config.base_url == "http://env-url:8080"
        assert config.http_timeout == 3.5
        assert config.placeholder_image == "/img/empty.png"
        assert config.logo_timeout == 0.5

    def test_kwargs_override_env_vars(self) -> None:
        """Explicit kwargs take priority over env vars."""
        env = {"QRMENU_BASE_URL": "http://env-url:8080"}
        with mock.patch.dict(os.environ, env, clear=False):
            config = load_config(base_url="http://kwarg-url:9090")

        assert config.base_url == "http://kwarg-url:9090"

    def test_trailing_slash_stripped(self) -> None:
        """Base URL is normalized without a trailing slash."""
        config = load_config(base_url="http://localhost:8000/")
        assert config.base_url == "http://localhost:8000"

    def test_yaml_section_loading(self) -> None:
        """Config reads the menu section of a shared YAML file."""
        yaml_content = """
menu:
  base_url: http://yaml-url:8000
  http_timeout: 4
api:
  port: 9999
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()
            yaml_path = f.name

        try:
            config = load_config(config_file=yaml_path)
            assert config.base_url == "http://yaml-url:8000"
            assert config.http_timeout == 4.0
            assert isinstance(config.http_timeout, float)
        finally:
            os.unlink(yaml_path)

    def test_env_vars_override_yaml(self) -> None:
        """Env vars take priority over YAML file."""
        yaml_content = """
base_url: http://yaml-url:8000
placeholder_image: /yaml.png
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()
            yaml_path = f.name

        try:
            env = {"QRMENU_BASE_URL": "http://env-url:9000"}
            with mock.patch.dict(os.environ, env, clear=False):
                config = load_config(config_file=yaml_path)

            # Env var wins
            assert config.base_url == "http://env-url:9000"
            # YAML still applies for others
            assert config.placeholder_image == "/yaml.png"
        finally:
            os.unlink(yaml_path)

    def test_nonexistent_yaml_file_ignored(self) -> None:
        """Nonexistent YAML file is silently ignored."""
        config = load_config(config_file="/nonexistent/path.yaml")
        assert config.http_timeout == 10.0

    def test_none_kwargs_ignored(self) -> None:
        """None kwargs don't override existing values."""
        env = {"QRMENU_BASE_URL": "http://env-url:8080"}
        with mock.patch.dict(os.environ, env, clear=False):
            config = load_config(base_url=None)

        assert config.base_url == "http://env-url:8080"


class TestConfigImports:
    """Tests for config module imports."""

    def test_importable_from_menu(self) -> None:
        """Config classes can be imported from menu package."""
        from menu import MenuConfig, load_config

        assert MenuConfig is not None
        assert load_config is not None
