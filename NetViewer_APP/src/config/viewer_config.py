"""
Configuration loading and validation for the particle viewer.

Loads YAML config and validates physics, camera and style parameters.
Every field has a default, so an empty file (or no file) gives the classic
viewer behaviour.
"""

import yaml
from dataclasses import dataclass, field
from typing import Optional, Tuple
from pathlib import Path

from ..models.exceptions import InvalidConfigError


@dataclass
class PhysicsConfig:
    """Particle system parameters."""
    edge_strength: float = 1.0
    spring_strength: float = 0.5
    damping: float = 0.1
    drag: float = 0.75
    time_step: float = 0.3
    particle_mass: float = 1.0
    attraction_min_distance: float = 0.1

    def validate(self) -> tuple[bool, Optional[str]]:
        if self.edge_strength <= 0:
            return False, "edge_strength must be positive"
        if self.spring_strength <= 0:
            return False, "spring_strength must be positive"
        if self.spring_strength == self.edge_strength:
            return False, "spring_strength must differ from edge_strength"
        if self.damping < 0:
            return False, "damping must be non-negative"
        if self.drag < 0:
            return False, "drag must be non-negative"
        if self.time_step <= 0:
            return False, "time_step must be positive"
        if self.particle_mass <= 0:
            return False, "particle_mass must be positive"
        if self.attraction_min_distance <= 0:
            return False, "attraction_min_distance must be positive"
        return True, None


@dataclass
class CameraConfig:
    """Camera centring and zoom parameters."""
    smoothness: float = 0.9
    view_padding: float = 1.2
    min_zoom: float = 0.05
    max_zoom: float = 50.0
    wheel_zoom_factor: float = 1.1

    def validate(self) -> tuple[bool, Optional[str]]:
        if not 0 <= self.smoothness < 1:
            return False, "smoothness must be in [0, 1)"
        if self.view_padding <= 0:
            return False, "view_padding must be positive"
        if self.min_zoom <= 0 or self.max_zoom <= self.min_zoom:
            return False, "zoom limits must satisfy 0 < min_zoom < max_zoom"
        if self.wheel_zoom_factor <= 1:
            return False, "wheel_zoom_factor must be greater than 1"
        return True, None


@dataclass
class StyleConfig:
    """Window and drawing style."""
    width: int = 800
    height: int = 600
    frame_ms: int = 33
    background: str = "grey90"
    node_diameter: float = 10.0
    edge_stroke: Tuple[int, int] = (0, 180)
    node_fill: Tuple[int, int, int, int] = (120, 50, 50, 180)
    selected_fill: Tuple[int, int, int, int] = (220, 60, 60, 255)
    stroke_weight: float = 1.0

    def validate(self) -> tuple[bool, Optional[str]]:
        if self.width <= 0 or self.height <= 0:
            return False, "width and height must be positive"
        if self.frame_ms < 1:
            return False, "frame_ms must be >= 1"
        if self.node_diameter <= 0:
            return False, "node_diameter must be positive"
        if self.stroke_weight < 0:
            return False, "stroke_weight must be non-negative"
        for name in ("edge_stroke", "node_fill", "selected_fill"):
            if any(not 0 <= c <= 255 for c in getattr(self, name)):
                return False, f"{name} components must be in [0, 255]"
        return True, None


@dataclass
class ViewerConfig:
    """Complete viewer configuration."""
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    camera: CameraConfig = field(default_factory=CameraConfig)
    style: StyleConfig = field(default_factory=StyleConfig)

    def validate(self) -> tuple[bool, Optional[str]]:
        for section_name in ["physics", "camera", "style"]:
            section = getattr(self, section_name)
            is_valid, error = section.validate()
            if not is_valid:
                return False, f"{section_name}: {error}"
        return True, None


def _section(raw: dict, name: str, cls):
    section_raw = raw.get(name) or {}
    if not isinstance(section_raw, dict):
        raise InvalidConfigError(f"Invalid configuration: '{name}' must be a mapping")
    unknown = set(section_raw) - set(cls.__dataclass_fields__)
    if unknown:
        raise InvalidConfigError(f"Invalid configuration: unknown {name} keys {sorted(unknown)}")
    values = dict(section_raw)
    # YAML gives lists for colours
    for key, value in values.items():
        if isinstance(value, list):
            values[key] = tuple(value)
    return cls(**values)


def load_config(path: Optional[Path] = None) -> ViewerConfig:
    """
    Load and validate configuration from a YAML file.

    Args:
        path: Path to YAML config file. None gives the defaults.

    Returns:
        Validated ViewerConfig.

    Raises:
        InvalidConfigError: If config is invalid (subclass of ValueError).
        FileNotFoundError: If file doesn't exist.
    """
    raw = {}
    if path is not None:
        with open(path, 'r') as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise InvalidConfigError("Invalid configuration: top level must be a mapping")

    config = ViewerConfig(
        physics=_section(raw, "physics", PhysicsConfig),
        camera=_section(raw, "camera", CameraConfig),
        style=_section(raw, "style", StyleConfig),
    )

    is_valid, error = config.validate()
    if not is_valid:
        raise InvalidConfigError(f"Invalid configuration: {error}")

    return config
