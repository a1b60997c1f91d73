"""
Configuration management for splinefit.

Loads YAML configuration with sensible defaults for fitting, stitching,
output and tracing.
"""

import os
from dataclasses import asdict, dataclass, field, fields, is_dataclass

import yaml


@dataclass
class FitConfig:
    """Configuration for spline assembly."""
    strategy: str = "subdivision"  # "subdivision", "steps", "params" or "critical"
    tolerance: float = 0.25
    steps: int = 8
    max_depth: int = 32
    error_samples: int = 10


@dataclass
class CardinalConfig:
    """Configuration for cardinal spline stitching."""
    tension: float = 0.5


@dataclass
class OutputConfig:
    """Configuration for SVG/JSON output."""
    precision: int = 2
    stroke_width: float = 1.0
    stroke_color: str = "black"
    margin: float = 10.0


@dataclass
class TracingConfig:
    """Configuration for runtime tracing."""
    enabled: bool = False
    level: str = "INFO"
    file_path: str = None
    json_output: bool = False


@dataclass
class SplineFitConfig:
    """Complete splinefit configuration."""
    fit: FitConfig = field(default_factory=FitConfig)
    cardinal: CardinalConfig = field(default_factory=CardinalConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)


def load_config(config_path=None):
    """
    Load configuration from YAML file.

    Falls back to defaults for any missing values. Unknown keys are ignored.
    """
    config = SplineFitConfig()

    if config_path and os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

        config = _merge_config(config, yaml_data)

    return config


def _merge_config(config, yaml_data):
    """Merge YAML data into config dataclass sections."""
    for section in fields(config):
        values = yaml_data.get(section.name)
        if not isinstance(values, dict):
            continue
        target = getattr(config, section.name)
        if not is_dataclass(target):
            continue
        for key, value in values.items():
            if hasattr(target, key):
                setattr(target, key, value)

    return config


def save_default_config(path):
    """Save default configuration to YAML file for reference."""
    yaml_data = asdict(SplineFitConfig())
    yaml_data["tracing"].pop("file_path", None)

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=False)
