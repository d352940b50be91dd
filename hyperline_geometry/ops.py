"""
Linear Form Operations
======================

Stateless math shared by every linear-equation variant.

A coefficient vector is (a0, a1, ..., an) and a point is (x1, ..., xn).
The linear form is a1*x1 + ... + an*xn + a0.

Design:
- Static methods only (no instance state)
- Same structure for every variant: evaluate, compare against epsilon,
  normalize by the norm of the directional coefficients (a1..an)
- Shape checks belong to the caller; these functions assume len(point) == n
"""

import numpy as np

from hyperline_geometry.errors import InvalidStateError


EPSILON = 1e-10


class LinearFormOps:
    """
    Pure functions over (coefficients, point) pairs.

    Usage:
        coefficients = np.array([0.0, 1.0, 1.0])
        LinearFormOps.contains(coefficients, np.array([3.0, -3.0]))  # True
        LinearFormOps.distance(coefficients, np.array([1.0, 1.0]))   # 1.414...
    """

    @staticmethod
    def evaluate(coefficients: np.ndarray, point: np.ndarray) -> float:
        """Value of the linear form at point."""
        return float(np.dot(coefficients[1:], point) + coefficients[0])

    @staticmethod
    def normal_norm(coefficients: np.ndarray) -> float:
        """Euclidean norm of the directional coefficients (a1..an)."""
        return float(np.linalg.norm(coefficients[1:]))

    @staticmethod
    def is_valid(coefficients: np.ndarray, epsilon: float = EPSILON) -> bool:
        """
        True if at least one directional coefficient is non-zero.

        a0 is ignored: it shifts the object but never gives it a direction.
        """
        return bool(np.any(np.abs(coefficients[1:]) > epsilon))

    @staticmethod
    def contains(
        coefficients: np.ndarray,
        point: np.ndarray,
        epsilon: float = EPSILON
    ) -> bool:
        """True if the linear form vanishes at point (within epsilon)."""
        return abs(LinearFormOps.evaluate(coefficients, point)) < epsilon

    @staticmethod
    def distance(
        coefficients: np.ndarray,
        point: np.ndarray,
        epsilon: float = EPSILON
    ) -> float:
        """
        Euclidean distance from point to the object: |f(x)| / ||(a1..an)||.

        Raises:
            InvalidStateError: If is_valid() is False for the same epsilon
        """
        # The guard is is_valid() itself, so the norm below is > epsilon.
        if not LinearFormOps.is_valid(coefficients, epsilon):
            raise InvalidStateError("degenerate coefficients - cannot normalize")

        numerator = abs(LinearFormOps.evaluate(coefficients, point))
        return numerator / LinearFormOps.normal_norm(coefficients)
