"""
Geometry Errors
===============

Error taxonomy for the geometry layer.

- InvalidArgumentError: bad input (wrong length, absent, non-numeric).
  Caller-recoverable: re-prompt or skip.
- InvalidStateError: the object itself cannot answer the query
  (degenerate coefficients). Needs new coefficients, not a retry.
"""


class GeometryError(Exception):
    """Base class for geometry errors"""
    pass


class InvalidArgumentError(GeometryError, ValueError):
    """Raised when a coefficient or point array is absent or has the wrong shape"""
    pass


class InvalidStateError(GeometryError, RuntimeError):
    """Raised when an operation needs a normal direction the object lacks"""
    pass
