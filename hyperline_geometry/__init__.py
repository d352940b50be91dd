"""
Geometry Layer
==============

Bounded Context: Linear-equation objects and point queries.

Responsibilities:
- Object representation (Line, Hyperplane)
- Membership test and point distance
- NO collection management, NO logging, NO rendering

Design Philosophy:
- One contract for every variant
- Pure math in LinearFormOps
- Fail-fast validation
"""

from hyperline_geometry.errors import GeometryError, InvalidArgumentError, InvalidStateError
from hyperline_geometry.ops import EPSILON, LinearFormOps
from hyperline_geometry.shapes import (
    GeometricObject,
    Hyperplane,
    Line,
    LinearEquation,
    LinearObject,
    VARIANTS,
    create_object,
)

__all__ = [
    "EPSILON",
    "GeometricObject",
    "GeometryError",
    "Hyperplane",
    "InvalidArgumentError",
    "InvalidStateError",
    "Line",
    "LinearEquation",
    "LinearFormOps",
    "LinearObject",
    "VARIANTS",
    "create_object",
]
