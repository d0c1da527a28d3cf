"""Configuration management for photoaudit.

Supports loading configuration from:
1. Environment variables (PHOTOAUDIT_*)
2. Config file (~/.photoaudit/config.yaml)
3. Default values

Example config file (~/.photoaudit/config.yaml):
    processing:
      max_workers: 8
      hash_chunk_size: 65536
      extensions: [".jpg", ".jpeg", ".tif"]
    output:
      output_dir: "/cases/1234/photoaudit"
      report_name: "image_report.csv"
      map_name: "image_map.kml"
      map_title: "Case 1234"
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from photoaudit.hashing import DEFAULT_CHUNK_SIZE
from photoaudit.sources import IMAGE_EXTENSIONS

logger = logging.getLogger(__name__)

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".photoaudit" / "config.yaml",
    Path.home() / ".config" / "photoaudit" / "config.yaml",
    Path(".photoaudit.yaml"),
]


@dataclass
class ProcessingConfig:
    """Processing configuration."""

    max_workers: int | None = None
    hash_chunk_size: int = DEFAULT_CHUNK_SIZE
    extensions: list[str] = field(default_factory=lambda: list(IMAGE_EXTENSIONS))


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: str = "photoaudit_output"
    report_name: str = "image_report.csv"
    map_name: str = "image_map.kml"
    map_title: str = "Image Locations"


@dataclass
class PhotoAuditConfig:
    """Main configuration for photoaudit."""

    processing: ProcessingConfig = field(default_factory=ProcessingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _load_yaml_config(locations: list[Path] | None = None) -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    for config_path in locations or CONFIG_LOCATIONS:
        if config_path.exists():
            try:
                with open(config_path) as f:
                    data = yaml.safe_load(f)
                    return data if isinstance(data, dict) else {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Ignoring unreadable config %s: %s", config_path, e)
                continue
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with PHOTOAUDIT_ prefix."""
    return os.environ.get(f"PHOTOAUDIT_{key}", default)


def _parse_extensions(value: str | None) -> list[str] | None:
    """Parse a comma-separated extension list."""
    if not value:
        return None
    exts = []
    for ext in value.split(","):
        ext = ext.strip().lower()
        if ext:
            exts.append(ext if ext.startswith(".") else f".{ext}")
    return exts


def load_config(locations: list[Path] | None = None) -> PhotoAuditConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (PHOTOAUDIT_*)
    2. Config file (~/.photoaudit/config.yaml)
    3. Default values
    """
    file_config = _load_yaml_config(locations)
    defaults = PhotoAuditConfig()

    # Processing config
    processing_config = file_config.get("processing") or {}
    max_workers = _get_env("MAX_WORKERS") or processing_config.get("max_workers")
    processing = ProcessingConfig(
        max_workers=int(max_workers) if max_workers else None,
        hash_chunk_size=int(
            _get_env("HASH_CHUNK_SIZE")
            or processing_config.get("hash_chunk_size", defaults.processing.hash_chunk_size)
        ),
        extensions=_parse_extensions(_get_env("EXTENSIONS"))
        or [e.lower() for e in processing_config.get("extensions", [])]
        or defaults.processing.extensions,
    )

    # Output config
    output_config = file_config.get("output") or {}
    output = OutputConfig(
        output_dir=_get_env("OUTPUT_DIR")
        or output_config.get("output_dir", defaults.output.output_dir),
        report_name=_get_env("REPORT_NAME")
        or output_config.get("report_name", defaults.output.report_name),
        map_name=_get_env("MAP_NAME") or output_config.get("map_name", defaults.output.map_name),
        map_title=_get_env("MAP_TITLE")
        or output_config.get("map_title", defaults.output.map_title),
    )

    return PhotoAuditConfig(processing=processing, output=output)


# Global config instance (lazy loaded)
_config: PhotoAuditConfig | None = None


def get_config() -> PhotoAuditConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
