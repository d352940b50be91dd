"""
Geometry Registry - Thread-safe collection of linear objects.

This module provides the GeometryRegistry class which owns an ordered,
heterogeneous list of Line / Hyperplane objects and runs bulk queries
(describe, validate, point check) over all of them.

Design:
- Only the shared LinearObject contract is used (no isinstance branching
  on variants)
- Bulk queries never abort: a dimension mismatch is a distinct
  outcome, and per-object errors are caught and reported per object
- Objects are never removed

Thread Safety:
- threading.Lock protects the list during add() and snapshots
- Evaluation runs outside the lock on a snapshot
- Each object reads its coefficient array once per query
"""

import numbers
import threading
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from hyperline_geometry import InvalidArgumentError, LinearObject
from hyperline_logging import LogEvent, StructuredLogger, create_logger


class CheckStatus(str, Enum):
    """Outcome category of one object in a bulk point check."""

    EVALUATED = "evaluated"
    DIMENSION_MISMATCH = "dimension_mismatch"
    ERROR = "error"


@dataclass(frozen=True)
class ObjectSummary:
    """
    Display snapshot of one stored object.

    When describing the object failed, error holds the message,
    is_valid is False and dimension is None.
    """

    index: int
    object_type: str
    dimension: Optional[int]
    coefficients: Tuple[float, ...]
    is_valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class ValidationResult:
    index: int
    object_type: str
    is_valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class PointCheckResult:
    """
    Result of checking one point against one object.

    Fields are filled according to status:
    - EVALUATED: contains, distance
    - DIMENSION_MISMATCH: required_dimension, supplied_dimension
    - ERROR: error, error_type (contains may be set if only distance failed,
      required_dimension is None if the object could not report it)
    """

    index: int
    object_type: str
    status: CheckStatus
    required_dimension: Optional[int]
    supplied_dimension: int
    contains: Optional[bool] = None
    distance: Optional[float] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def evaluated(self) -> bool:
        return self.status is CheckStatus.EVALUATED


@dataclass(frozen=True)
class RegistryStats:
    """Immutable statistics snapshot for the registry."""

    total: int = 0
    valid: int = 0
    invalid: int = 0
    by_type: Dict[str, int] = field(default_factory=dict)

    def __str__(self) -> str:
        types = ", ".join(f"{name}={count}" for name, count in self.by_type.items())
        return f"objects={self.total} (valid={self.valid}, invalid={self.invalid}; {types})"


class GeometryRegistry:
    """
    Thread-safe, insertion-ordered collection of linear objects.

    Usage:
        registry = GeometryRegistry()
        registry.add(Line(0.0, 1.0, 1.0))
        registry.add(Hyperplane(0.0, 1.0, 1.0, 1.0, 1.0))

        results = registry.check_point((3.0, -3.0))
        # [PointCheckResult(index=0, status=EVALUATED, contains=True, distance=0.0, ...),
        #  PointCheckResult(index=1, status=DIMENSION_MISMATCH, ...)]
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        """
        Args:
            logger: Structured logger (default: hyperline.registry)
        """
        self._objects: List[LinearObject] = []
        self._lock = threading.Lock()
        self._logger = logger or create_logger("registry")

    def add(self, obj: Optional[LinearObject]) -> None:
        """
        Append an object to the collection.

        None is ignored (no-op, not an error).

        Raises:
            InvalidArgumentError: If obj does not implement LinearObject

        Thread-safe: Acquires lock for write operation.
        """
        if obj is None:
            self._logger.debug(
                event=LogEvent.OBJECT_ADD_SKIPPED,
                message="Ignored None object"
            )
            return

        if not isinstance(obj, LinearObject):
            raise InvalidArgumentError(f"Invalid object type: {type(obj).__name__}")

        with self._lock:
            self._objects.append(obj)
            index = len(self._objects) - 1

        self._logger.info(
            event=LogEvent.OBJECT_ADDED,
            message=f"Added {obj.object_type}",
            metadata={'index': index, 'dimension': obj.dimension}
        )

    def count(self) -> int:
        """
        Get the number of objects in the registry.

        Thread-safe: Acquires lock for read operation.
        """
        with self._lock:
            return len(self._objects)

    def objects(self) -> Tuple[LinearObject, ...]:
        """
        Read-only snapshot of the stored objects, in insertion order.

        Thread-safe: Acquires lock briefly.
        """
        with self._lock:
            return tuple(self._objects)

    def describe_all(self) -> List[ObjectSummary]:
        """
        Display snapshot of every object, in insertion order.

        An object that raises while being described yields an invalid
        summary carrying the error; the remaining objects are still described.
        """
        return [self._describe(index, obj) for index, obj in enumerate(self.objects())]

    def validate_all(self) -> List[ValidationResult]:
        """Validity of every object, in insertion order (failures count as invalid)."""
        results = [self._validate(index, obj) for index, obj in enumerate(self.objects())]

        invalid = [r.index for r in results if not r.is_valid]
        self._logger.info(
            event=LogEvent.OBJECTS_VALIDATED,
            message=f"Validated {len(results)} objects",
            metadata={'total': len(results), 'invalid_indices': invalid}
        )
        return results

    def check_point(self, point: Sequence[float]) -> List[PointCheckResult]:
        """
        Check a point against every stored object.

        Uses a snapshot pattern: the list is copied under the lock and
        evaluated outside it.

        Args:
            point: Coordinates; len(point) selects which objects are evaluated

        Returns:
            One PointCheckResult per object, in insertion order

        Raises:
            InvalidArgumentError: If point is None, not a sequence or not numeric
        """
        if point is None:
            raise InvalidArgumentError("point must not be None")
        if isinstance(point, (str, bytes)):
            raise InvalidArgumentError(f"point must be a sequence of numbers, got {type(point).__name__}")
        try:
            point = tuple(point)
        except TypeError as e:
            raise InvalidArgumentError(f"point must be a sequence of numbers: {e}") from e

        if not all(isinstance(c, numbers.Real) for c in point):
            raise InvalidArgumentError(f"point must contain only numbers, got {list(point)!r}")

        return [self._evaluate(index, obj, point) for index, obj in enumerate(self.objects())]

    def _evaluate(
        self,
        index: int,
        obj: LinearObject,
        point: Tuple[float, ...]
    ) -> PointCheckResult:
        """Evaluate one object; any exception becomes an ERROR result."""
        supplied = len(point)
        object_type = type(obj).__name__
        required = None
        contains = None
        try:
            object_type = obj.object_type
            required = obj.dimension

            if supplied != required:
                self._logger.info(
                    event=LogEvent.POINT_SKIPPED,
                    message=f"{object_type}: dimension mismatch",
                    metadata={'index': index, 'required': required, 'supplied': supplied}
                )
                return PointCheckResult(
                    index=index,
                    object_type=object_type,
                    status=CheckStatus.DIMENSION_MISMATCH,
                    required_dimension=required,
                    supplied_dimension=supplied,
                )

            contains = obj.contains_point(point)
            distance = obj.distance_to_point(point)
        except Exception as e:
            self._logger.error(
                event=LogEvent.POINT_CHECK_FAILED,
                message=f"{object_type}: {e}",
                metadata={'index': index, 'point': list(point)},
                exc_info=e
            )
            return PointCheckResult(
                index=index,
                object_type=object_type,
                status=CheckStatus.ERROR,
                required_dimension=required,
                supplied_dimension=supplied,
                contains=contains,
                error=str(e),
                error_type=type(e).__name__,
            )

        self._logger.debug(
            event=LogEvent.POINT_CHECKED,
            message=f"{object_type}: contains={contains}",
            metadata={'index': index, 'distance': distance}
        )
        return PointCheckResult(
            index=index,
            object_type=object_type,
            status=CheckStatus.EVALUATED,
            required_dimension=required,
            supplied_dimension=supplied,
            contains=contains,
            distance=distance,
        )

    def _describe(self, index: int, obj: LinearObject) -> ObjectSummary:
        object_type = type(obj).__name__
        try:
            object_type = obj.object_type
            return ObjectSummary(
                index=index,
                object_type=object_type,
                dimension=obj.dimension,
                coefficients=obj.coefficients,
                is_valid=obj.is_valid(),
            )
        except Exception as e:
            self._inspect_failed(index, object_type, "describe", e)
            return ObjectSummary(
                index=index,
                object_type=object_type,
                dimension=None,
                coefficients=(),
                is_valid=False,
                error=str(e),
            )

    def _validate(self, index: int, obj: LinearObject) -> ValidationResult:
        object_type = type(obj).__name__
        try:
            object_type = obj.object_type
            return ValidationResult(index=index, object_type=object_type, is_valid=obj.is_valid())
        except Exception as e:
            self._inspect_failed(index, object_type, "validate", e)
            return ValidationResult(index=index, object_type=object_type, is_valid=False, error=str(e))

    def _inspect_failed(self, index: int, object_type: str, operation: str, error: Exception) -> None:
        self._logger.error(
            event=LogEvent.OBJECT_INSPECT_FAILED,
            message=f"{object_type}: {operation} failed: {error}",
            metadata={'index': index, 'operation': operation},
            exc_info=error
        )

    def statistics(self) -> RegistryStats:
        """Counts by validity and by object type (failed objects count as invalid)."""
        summaries = self.describe_all()
        valid = sum(1 for s in summaries if s.is_valid)
        return RegistryStats(
            total=len(summaries),
            valid=valid,
            invalid=len(summaries) - valid,
            by_type=dict(Counter(s.object_type for s in summaries)),
        )
