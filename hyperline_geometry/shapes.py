"""
Linear Equation Shapes
======================

Affine objects defined by one linear equation.

- Line:       a1*x + a2*y + a0 = 0                       (2D, 3 coefficients)
- Hyperplane: a1*x1 + a2*x2 + a3*x3 + a4*x4 + a0 = 0     (4D, 5 coefficients)

Design:
- One contract (LinearObject) for every variant, no variant-only members
- Line and Hyperplane are siblings: they differ only in arity and dimension
- Coefficients live in a read-only numpy array that is replaced as a whole,
  so readers always see a consistent snapshot
- No logging, no I/O
"""

from typing import Dict, Iterable, Optional, Protocol, Tuple, Type, Union, runtime_checkable

import numpy as np

from hyperline_geometry.errors import InvalidArgumentError
from hyperline_geometry.ops import EPSILON, LinearFormOps


@runtime_checkable
class LinearObject(Protocol):
    """Protocol for linear-equation objects (interface)."""

    @property
    def arity(self) -> int:
        """Number of coefficients, a0 included."""
        ...

    @property
    def dimension(self) -> int:
        """Number of coordinates a point needs."""
        ...

    @property
    def object_type(self) -> str:
        """Human-readable discriminator."""
        ...

    @property
    def coefficients(self) -> Tuple[float, ...]:
        ...

    def set_coefficients(self, values: Iterable[float]) -> None:
        ...

    def is_valid(self) -> bool:
        ...

    def evaluate(self, point: Iterable[float]) -> float:
        ...

    def contains_point(self, point: Iterable[float]) -> bool:
        ...

    def distance_to_point(self, point: Iterable[float]) -> float:
        ...


class LinearEquation:
    """
    Shared implementation of the LinearObject contract.

    Subclasses only declare ARITY, DIMENSION and OBJECT_TYPE.

    Attributes:
        epsilon: Tolerance for containment and degeneracy checks
    """

    ARITY: int = 0
    DIMENSION: int = 0
    OBJECT_TYPE: str = "linear equation"

    epsilon: float = EPSILON

    def __init__(self, *coefficients: float):
        """
        Args:
            *coefficients: Either nothing (all zeros) or exactly ARITY values

        Raises:
            InvalidArgumentError: If the count does not match ARITY
        """
        if type(self) is LinearEquation:
            raise TypeError("LinearEquation is abstract, use Line or Hyperplane")

        self._coefficients = self._freeze(np.zeros(self.ARITY))
        if coefficients:
            self.set_coefficients(coefficients)

    @classmethod
    def from_coefficients(cls, values: Iterable[float]) -> "LinearEquation":
        obj = cls()
        obj.set_coefficients(values)
        return obj

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    @property
    def arity(self) -> int:
        return self.ARITY

    @property
    def dimension(self) -> int:
        return self.DIMENSION

    @property
    def object_type(self) -> str:
        return self.OBJECT_TYPE

    @property
    def coefficients(self) -> Tuple[float, ...]:
        """Snapshot of (a0, a1, ...)."""
        return tuple(float(c) for c in self._coefficients)

    def set_coefficients(self, values: Iterable[float]) -> None:
        """
        Replace all coefficients at once.

        Args:
            values: Exactly ARITY numbers, a0 first

        Raises:
            InvalidArgumentError: If values is None, non-numeric or has the wrong length
        """
        array = self._as_vector(values, "coefficients")
        if len(array) != self.ARITY:
            raise InvalidArgumentError(
                f"{self.OBJECT_TYPE} needs {self.ARITY} coefficients "
                f"(a0..a{self.ARITY - 1}), got {len(array)}"
            )

        # Single reference swap: readers see old or new, never a mix.
        self._coefficients = self._freeze(array)

    def is_valid(self) -> bool:
        """True unless every directional coefficient is ~0."""
        return LinearFormOps.is_valid(self._coefficients, self.epsilon)

    def evaluate(self, point: Iterable[float]) -> float:
        """Value of the linear form at point."""
        coefficients = self._coefficients
        return LinearFormOps.evaluate(coefficients, self._check_point(point))

    def contains_point(self, point: Iterable[float]) -> bool:
        """
        Check if point satisfies the equation (within epsilon).

        Raises:
            InvalidArgumentError: If len(point) != dimension
        """
        coefficients = self._coefficients
        return LinearFormOps.contains(coefficients, self._check_point(point), self.epsilon)

    def distance_to_point(self, point: Iterable[float]) -> float:
        """
        Euclidean distance from point to this object.

        Raises:
            InvalidArgumentError: If len(point) != dimension
            InvalidStateError: If the object is degenerate (is_valid() is False)
        """
        coefficients = self._coefficients
        return LinearFormOps.distance(coefficients, self._check_point(point), self.epsilon)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_point(self, point: Iterable[float]) -> np.ndarray:
        array = self._as_vector(point, "point")
        if len(array) != self.DIMENSION:
            raise InvalidArgumentError(
                f"{self.OBJECT_TYPE} needs a {self.DIMENSION}D point, got {len(array)}D"
            )
        return array

    @staticmethod
    def _as_vector(values: Optional[Iterable[float]], name: str) -> np.ndarray:
        if values is None:
            raise InvalidArgumentError(f"{name} must not be None")
        if isinstance(values, (str, bytes)):
            raise InvalidArgumentError(f"{name} must be a sequence of numbers, got {type(values).__name__}")

        try:
            array = np.asarray(list(values))
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"{name} must be a sequence of numbers: {e}") from e

        if array.ndim != 1:
            raise InvalidArgumentError(f"{name} must be a flat sequence, got shape {array.shape}")
        # Bool, int, uint or float only; numeric strings are not parsed.
        if array.dtype.kind not in "biuf":
            raise InvalidArgumentError(f"{name} must contain only numbers, got dtype {array.dtype}")
        return array.astype(np.float64)

    @staticmethod
    def _freeze(array: np.ndarray) -> np.ndarray:
        array = np.array(array, dtype=np.float64)
        array.flags.writeable = False
        return array

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._coefficients, other._coefficients))

    # Mutable (set_coefficients), so not hashable.
    __hash__ = None

    def __repr__(self) -> str:
        args = ", ".join(repr(c) for c in self.coefficients)
        return f"{type(self).__name__}({args})"


class Line(LinearEquation):
    """Line in the plane: a1*x + a2*y + a0 = 0."""

    ARITY = 3
    DIMENSION = 2
    OBJECT_TYPE = "Line"

    @property
    def a0(self) -> float:
        return float(self._coefficients[0])

    @property
    def a1(self) -> float:
        return float(self._coefficients[1])

    @property
    def a2(self) -> float:
        return float(self._coefficients[2])


class Hyperplane(LinearEquation):
    """Hyperplane in 4D space: a1*x1 + a2*x2 + a3*x3 + a4*x4 + a0 = 0."""

    ARITY = 5
    DIMENSION = 4
    OBJECT_TYPE = "Hyperplane"

    @property
    def a0(self) -> float:
        return float(self._coefficients[0])

    @property
    def a1(self) -> float:
        return float(self._coefficients[1])

    @property
    def a2(self) -> float:
        return float(self._coefficients[2])

    @property
    def a3(self) -> float:
        return float(self._coefficients[3])

    @property
    def a4(self) -> float:
        return float(self._coefficients[4])


# Union type for collections
GeometricObject = Union[Line, Hyperplane]

VARIANTS: Dict[str, Type[LinearEquation]] = {
    "line": Line,
    "hyperplane": Hyperplane,
}


def create_object(kind: str, coefficients: Optional[Iterable[float]] = None) -> GeometricObject:
    """
    Create a variant by name.

    Args:
        kind: "line" or "hyperplane" (case-insensitive)
        coefficients: Optional coefficients, zeros when omitted

    Raises:
        InvalidArgumentError: If kind is unknown or coefficients are invalid
    """
    variant = VARIANTS.get(str(kind).lower())
    if variant is None:
        raise InvalidArgumentError(
            f"Unknown object type: {kind}. Must be one of {sorted(VARIANTS)}"
        )

    obj = variant()
    if coefficients is not None:
        obj.set_coefficients(coefficients)
    return obj
