"""Tests for GridConfig."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from permgrid import GridConfig, LogLevel, load_config_from_env


class TestGridConfig:
    """Tests for GridConfig model."""

    def test_create_default_config(self) -> None:
        config = GridConfig()
        assert config.log_level == LogLevel.INFO
        assert config.log_json is False
        assert config.base_path == "/admin/permissions"
        assert config.admin_group_name == "Admin"
        assert config.default_display_name == "All Users"

    def test_log_level_from_string(self) -> None:
        assert GridConfig(log_level="debug").log_level == LogLevel.DEBUG

    def test_log_level_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            GridConfig(log_level="INVALID")

    def test_base_path_trailing_slash(self) -> None:
        assert GridConfig(base_path="/admin/permissions/").base_path == "/admin/permissions"

    def test_base_path_must_be_absolute(self) -> None:
        with pytest.raises(ValueError, match="must start with"):
            GridConfig(base_path="admin/permissions")

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValueError):
            GridConfig(unknown_field="x")


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env()."""

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = load_config_from_env()
        assert config.log_level == LogLevel.INFO
        assert config.base_path == "/admin/permissions"

    def test_from_env(self) -> None:
        env = {
            "LOG_LEVEL": "WARNING",
            "LOG_JSON": "true",
            "PERMISSIONS_BASE_PATH": "/access",
            "PERMISSIONS_ADMIN_GROUP": "Owners",
            "PERMISSIONS_DEFAULT_GROUP": "Everyone",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config_from_env()
        assert config.log_level == LogLevel.WARNING
        assert config.log_json is True
        assert config.base_path == "/access"
        assert config.admin_group_name == "Owners"
        assert config.default_group_name == "Everyone"
