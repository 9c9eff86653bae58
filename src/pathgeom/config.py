"""
Configuration management for pathgeom.

Loads YAML configuration with defaults for the codec, curve flattening,
SVG document export and tracing.
"""

import os
from dataclasses import asdict, dataclass, field

import yaml


@dataclass
class CodecConfig:
    """Configuration for the SVG path serializer."""
    precision: int = 3  # decimal places of every emitted coordinate


@dataclass
class FlattenConfig:
    """Configuration for sampling curves into polylines."""
    steps: int = 100


@dataclass
class DocumentConfig:
    """Configuration for standalone SVG document export."""
    stroke_width: float = 1.0
    stroke_color: str = "black"
    fill: str = "none"
    margin: float = 10.0


@dataclass
class TracingConfig:
    """Configuration for runtime tracing."""
    enabled: bool = False
    level: str = "INFO"
    file_path: str = None
    json_output: bool = False


@dataclass
class GeomConfig:
    """Complete configuration."""
    codec: CodecConfig = field(default_factory=CodecConfig)
    flatten: FlattenConfig = field(default_factory=FlattenConfig)
    document: DocumentConfig = field(default_factory=DocumentConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)


_SECTIONS = ("codec", "flatten", "document", "tracing")


def load_config(config_path=None):
    """
    Load configuration from YAML file.

    Falls back to defaults for any missing file, section or key.
    """
    config = GeomConfig()

    if config_path and os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

        config = _merge_config(config, yaml_data)

    return config


def _merge_config(config, yaml_data):
    """Merge YAML data into config dataclass; unknown keys are ignored."""
    for section in _SECTIONS:
        values = yaml_data.get(section) or {}
        target = getattr(config, section)
        for key, value in values.items():
            if hasattr(target, key):
                setattr(target, key, value)

    return config


def save_default_config(path):
    """Save default configuration to YAML file for reference."""
    yaml_data = asdict(GeomConfig())
    yaml_data["tracing"].pop("file_path")

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=False)
