"""
hyperline_manager - Collection management for linear objects

This package owns the heterogeneous object collection and the scene
configuration that fills it.

Architecture:
- GeometryRegistry: Thread-safe ordered collection + bulk queries
- SceneConfig: YAML configuration (objects, points, presentation)
"""

from hyperline_manager.registry import (
    CheckStatus,
    GeometryRegistry,
    ObjectSummary,
    PointCheckResult,
    RegistryStats,
    ValidationResult,
)
from hyperline_manager.config import ObjectConfig, SceneConfig

__all__ = [
    "CheckStatus",
    "GeometryRegistry",
    "ObjectConfig",
    "ObjectSummary",
    "PointCheckResult",
    "RegistryStats",
    "SceneConfig",
    "ValidationResult",
]
