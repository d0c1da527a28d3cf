"""Tests for configuration loading."""

import os

import pytest

from photoaudit import config as config_module
from photoaudit.config import get_config, load_config, reset_config
from photoaudit.sources import IMAGE_EXTENSIONS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop PHOTOAUDIT_* variables and the cached global config."""
    for key in list(os.environ):
        if key.startswith("PHOTOAUDIT_"):
            monkeypatch.delenv(key)
    reset_config()
    yield
    reset_config()


class TestLoadConfig:
    """Test load_config."""

    def test_defaults(self, tmp_path):
        """Test defaults when no file or environment is present."""
        config = load_config([tmp_path / "absent.yaml"])
        assert config.processing.max_workers is None
        assert config.processing.hash_chunk_size == 65536
        assert config.processing.extensions == IMAGE_EXTENSIONS
        assert config.output.report_name == "image_report.csv"
        assert config.output.map_name == "image_map.kml"

    def test_yaml_file(self, tmp_path):
        """Test values from a YAML config file."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "processing:\n"
            "  max_workers: 3\n"
            "  extensions: ['.JPG', '.tif']\n"
            "output:\n"
            "  map_title: Case 7\n"
        )
        config = load_config([path])
        assert config.processing.max_workers == 3
        assert config.processing.extensions == [".jpg", ".tif"]
        assert config.output.map_title == "Case 7"
        assert config.output.report_name == "image_report.csv"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        """Test environment variables take priority over the file."""
        path = tmp_path / "config.yaml"
        path.write_text("processing:\n  max_workers: 3\n")
        monkeypatch.setenv("PHOTOAUDIT_MAX_WORKERS", "12")
        monkeypatch.setenv("PHOTOAUDIT_EXTENSIONS", "jpg, .PNG")
        monkeypatch.setenv("PHOTOAUDIT_REPORT_NAME", "inventory.csv")
        config = load_config([path])
        assert config.processing.max_workers == 12
        assert config.processing.extensions == [".jpg", ".png"]
        assert config.output.report_name == "inventory.csv"

    def test_invalid_yaml_ignored(self, tmp_path):
        """Test an unparsable config file falls back to defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("processing: [unclosed\n")
        config = load_config([path])
        assert config.processing.max_workers is None


class TestGlobalConfig:
    """Test the cached global config."""

    def test_cached_until_reset(self, monkeypatch, tmp_path):
        """Test get_config caches and reset_config clears."""
        monkeypatch.setattr(config_module, "CONFIG_LOCATIONS", [tmp_path / "none.yaml"])
        first = get_config()
        assert get_config() is first
        reset_config()
        assert get_config() is not first
