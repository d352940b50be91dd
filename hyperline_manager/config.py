"""
Configuration schema for geometry scenes.

A scene is the list of objects to load into a GeometryRegistry, the
points to check against them, and a few presentation settings.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from hyperline_geometry import VARIANTS, GeometricObject, create_object
from hyperline_logging import StructuredLogger
from hyperline_manager.registry import GeometryRegistry


# Dimensions the registry holds objects for (Line: 2, Hyperplane: 4)
SUPPORTED_DIMENSIONS = frozenset(variant.DIMENSION for variant in VARIANTS.values())

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class ObjectConfig:
    """One linear object (line or hyperplane)."""

    object_type: str  # "line" or "hyperplane"
    coefficients: Tuple[float, ...]

    def __post_init__(self):
        """Validate object configuration."""
        variant = VARIANTS.get(self.object_type)
        if variant is None:
            raise ValueError(
                f"Invalid object type: {self.object_type}. "
                f"Must be one of {sorted(VARIANTS)}"
            )

        if len(self.coefficients) != variant.ARITY:
            raise ValueError(
                f"{variant.OBJECT_TYPE} must have exactly {variant.ARITY} coefficients, "
                f"got {len(self.coefficients)}"
            )

    def build(self) -> GeometricObject:
        return create_object(self.object_type, self.coefficients)


@dataclass(frozen=True)
class SceneConfig:
    """
    Objects and points for one run.

    Loaded from YAML and validated at construction.
    Immutable after construction (frozen dataclass).
    """

    objects: List[ObjectConfig] = field(default_factory=list)
    points: List[Tuple[float, ...]] = field(default_factory=list)
    log_level: str = "INFO"
    precision: int = 6  # Digits printed for distances

    def __post_init__(self):
        """Validate scene configuration."""
        for point in self.points:
            if len(point) not in SUPPORTED_DIMENSIONS:
                raise ValueError(
                    f"Point {list(point)} has dimension {len(point)}, "
                    f"must be one of {sorted(SUPPORTED_DIMENSIONS)}"
                )

        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(LOG_LEVELS)}"
            )

        if not 0 <= self.precision <= 15:
            raise ValueError(
                f"precision must be in [0, 15], got {self.precision}"
            )

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def build_registry(self, logger: Optional[StructuredLogger] = None) -> GeometryRegistry:
        """Create a registry holding every configured object, in order."""
        registry = GeometryRegistry(logger=logger)
        for object_config in self.objects:
            registry.add(object_config.build())
        return registry

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SceneConfig":
        """
        Build from a parsed YAML mapping.

        Raises:
            ValueError: If the mapping is malformed
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError(f"Scene config must be a mapping, got {type(data).__name__}")

        try:
            objects = [
                ObjectConfig(
                    object_type=str(o["type"]).lower(),
                    coefficients=tuple(float(c) for c in o["coefficients"]),
                )
                for o in data.get("objects") or []
            ]
            points = [
                tuple(float(c) for c in p)
                for p in data.get("points") or []
            ]
            log_level = str(data.get("log_level", "INFO")).upper()
            precision = _as_precision(data.get("precision", 6))
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed scene config: {e!r}") from e

        return cls(
            objects=objects,
            points=points,
            log_level=log_level,
            precision=precision,
        )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "SceneConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            log_level: INFO
            precision: 6

            objects:
              - type: line
                coefficients: [0, 1, 1]        # a0, a1, a2
              - type: hyperplane
                coefficients: [0, 1, 1, 1, 1]  # a0, a1, a2, a3, a4

            points:
              - [3, -3]
              - [1, 1, 1, 1]

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the YAML is invalid or fails validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        return cls.from_dict(data)


def _as_precision(value: Any) -> int:
    """Accept whole numbers only (6 or 6.0, not 6.9, true or "6")."""
    if isinstance(value, bool):
        raise TypeError(f"precision must be an integer, got {value!r}")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise TypeError(f"precision must be an integer, got {value!r}")
    return value
