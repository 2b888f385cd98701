"""
Configuration management for bezierflat.

Loads YAML configuration with defaults for flattening, SVG preview and tracing.
"""

import os
from dataclasses import asdict, dataclass, field

import yaml


@dataclass
class FlattenConfig:
    """Configuration for curvature-adaptive spline sampling."""
    samples: int = 1000  # baseline samples per spline; min step is 1/(samples-1)
    curvature_epsilon: float = 0.1  # radians of slope change per minimum step


@dataclass
class PreviewConfig:
    """Configuration for SVG previews of flattened polygons."""
    stroke_width: float = 1.0
    stroke_color: str = "black"
    show_control_points: bool = False
    margin: float = 10.0


@dataclass
class TracingConfig:
    """Configuration for runtime tracing."""
    enabled: bool = False
    level: str = "INFO"
    file_path: str = None
    json_output: bool = False


@dataclass
class PipelineConfig:
    """Complete configuration."""
    flatten: FlattenConfig = field(default_factory=FlattenConfig)
    preview: PreviewConfig = field(default_factory=PreviewConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)


SECTIONS = ("flatten", "preview", "tracing")


def load_config(config_path=None):
    """
    Load configuration from YAML file.

    Falls back to defaults for any missing values.
    """
    config = PipelineConfig()

    if config_path and os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

        config = _merge_config(config, yaml_data)

    _check_config(config)
    return config


def _merge_config(config, yaml_data):
    """Merge YAML data into config dataclass. Unknown keys are ignored."""
    for section in SECTIONS:
        values = yaml_data.get(section) or {}
        target = getattr(config, section)
        for key, value in values.items():
            if hasattr(target, key):
                setattr(target, key, value)

    return config


def _check_config(config):
    check_flatten_config(config.flatten)


def check_flatten_config(flatten_config):
    """Raise ValueError for sampling settings the flattener cannot use."""
    if flatten_config.samples < 2:
        raise ValueError(f"flatten.samples must be at least 2, got {flatten_config.samples}")
    if flatten_config.curvature_epsilon <= 0:
        raise ValueError(f"flatten.curvature_epsilon must be positive, got {flatten_config.curvature_epsilon}")


def save_default_config(path):
    """Save default configuration to YAML file for reference."""
    config = PipelineConfig()

    yaml_data = {section: asdict(getattr(config, section)) for section in SECTIONS}
    # file_path has no useful default to document
    yaml_data["tracing"].pop("file_path")

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=False)
