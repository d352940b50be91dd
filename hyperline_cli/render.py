"""
Text Renderer Module
====================

Pure presentation layer for registry outputs.

Design:
- Stateless rendering (every method returns a string)
- No business logic: only formats what the registry returns
- Style (symbols, widths, precision) is configuration, not global state
"""

from typing import Iterable, Sequence

from hyperline_manager import (
    CheckStatus,
    ObjectSummary,
    PointCheckResult,
    RegistryStats,
    ValidationResult,
)


class TextRenderer:
    """
    Plain-text renderer for the command line.

    Usage:
        renderer = TextRenderer(precision=4, check="+", cross="-")
        print(renderer.render_objects(registry.describe_all()))
        print(renderer.render_check(point, registry.check_point(point)))
    """

    def __init__(
        self,
        precision: int = 6,
        width: int = 60,
        check: str = "✓",
        cross: str = "✗",
        separator: str = "─",
    ):
        """
        Args:
            precision: Digits after the decimal point for distances
            width: Width of separator lines
            check: Symbol for valid / contained
            cross: Symbol for invalid / not contained
            separator: Character repeated for separator lines
        """
        self.precision = precision
        self.width = width
        self.check = check
        self.cross = cross
        self.separator = separator

    def format_equation(self, coefficients: Sequence[float]) -> str:
        """
        Render (a0, a1, ..., an) as an equation.

        2D uses x, y; higher dimensions use x1..xn.
        """
        a0, directional = coefficients[0], coefficients[1:]
        if len(directional) == 2:
            names = ["x", "y"]
        else:
            names = [f"x{i}" for i in range(1, len(directional) + 1)]

        terms = [f"({a})*{name}" for a, name in zip(directional, names)]
        return " + ".join(terms + [f"({a0})"]) + " = 0"

    def _rule(self) -> str:
        return self.separator * self.width

    def _title(self, text: str) -> str:
        return f"{self._rule()}\n{text}\n{self._rule()}"

    def _status(self, ok: bool, yes: str, no: str) -> str:
        return f"{self.check} {yes}" if ok else f"{self.cross} {no}"

    def render_objects(self, summaries: Iterable[ObjectSummary]) -> str:
        summaries = list(summaries)
        lines = [self._title("OBJECTS")]
        if not summaries:
            lines.append("No objects.")
            return "\n".join(lines)

        for s in summaries:
            if s.error is not None:
                lines.append(f"[{s.index + 1}] {s.object_type}: error - {s.error}")
                continue
            lines.append(f"[{s.index + 1}] {s.object_type}: {self.format_equation(s.coefficients)}")
            lines.append(f"    Dimension: {s.dimension}D")
            lines.append(f"    Status: {self._status(s.is_valid, 'valid', 'invalid')}")
        return "\n".join(lines)

    def render_validation(self, results: Iterable[ValidationResult]) -> str:
        lines = [self._title("VALIDATION")]
        for r in results:
            if r.error is not None:
                lines.append(f"[{r.index + 1}] {r.object_type}: error - {r.error}")
                continue
            lines.append(f"[{r.index + 1}] {r.object_type}: {self._status(r.is_valid, 'valid', 'invalid')}")
        return "\n".join(lines)

    def render_check(self, point: Sequence[float], results: Iterable[PointCheckResult]) -> str:
        coordinates = ", ".join(str(c) for c in point)
        lines = [self._title(f"POINT ({coordinates})")]

        for r in results:
            prefix = f"[{r.index + 1}] {r.object_type}"
            if r.status is CheckStatus.DIMENSION_MISMATCH:
                lines.append(
                    f"{prefix}: skipped (needs {r.required_dimension}D, "
                    f"got {r.supplied_dimension}D)"
                )
            elif r.status is CheckStatus.ERROR:
                lines.append(f"{prefix}: error - {r.error}")
            else:
                lines.append(f"{prefix}: {self._status(r.contains, 'on object', 'not on object')}")
                lines.append(f"    Distance: {r.distance:.{self.precision}f}")
        return "\n".join(lines)

    def render_stats(self, stats: RegistryStats) -> str:
        lines = [self._title("STATISTICS")]
        lines.append(f"Objects: {stats.total}")
        for object_type, count in stats.by_type.items():
            lines.append(f"  {object_type}: {count}")
        lines.append(f"Valid: {stats.valid}")
        lines.append(f"Invalid: {stats.invalid}")
        return "\n".join(lines)
