"""
Test Scene Config, Logging and CLI
==================================

YAML scene loading/validation, structured log format and the
hyperline-cli commands (without a subprocess).

Usage:
    pytest test_config_cli.py
    python test_config_cli.py
"""

import io
import json
import logging
from pathlib import Path

import pytest

from hyperline_cli.cli import EXIT_ERROR, EXIT_INVALID_OBJECTS, EXIT_OK, main
from hyperline_cli.render import TextRenderer
from hyperline_geometry import Hyperplane, Line
from hyperline_logging import LogEvent, StructuredLogger, create_logger
from hyperline_logging.structured import StderrHandler
from hyperline_manager import GeometryRegistry, ObjectConfig, ObjectSummary, SceneConfig, ValidationResult


EXAMPLE_SCENE = Path(__file__).parent / "config" / "scene_example.yaml"

SCENE_YAML = """
log_level: error
precision: 3
objects:
  - type: line
    coefficients: [0, 1, 1]
  - type: Hyperplane
    coefficients: [0, 1, 1, 1, 1]
points:
  - [3, -3]
  - [1, 1, 1, 1]
"""


@pytest.fixture
def scene_file(tmp_path):
    path = tmp_path / "scene.yaml"
    path.write_text(SCENE_YAML)
    return path


# ----------------------------------------------------------------------
# Config
# ----------------------------------------------------------------------

def test_scene_from_yaml(scene_file):
    scene = SceneConfig.from_yaml(scene_file)

    assert scene.log_level == "ERROR"
    assert scene.logging_level == logging.ERROR
    assert scene.precision == 3
    assert scene.objects == [
        ObjectConfig(object_type="line", coefficients=(0.0, 1.0, 1.0)),
        ObjectConfig(object_type="hyperplane", coefficients=(0.0, 1.0, 1.0, 1.0, 1.0)),
    ]
    assert scene.points == [(3.0, -3.0), (1.0, 1.0, 1.0, 1.0)]


def test_example_scene_loads():
    scene = SceneConfig.from_yaml(EXAMPLE_SCENE)
    assert len(scene.objects) == 3
    assert len(scene.points) == 4


def test_build_registry(scene_file):
    registry = SceneConfig.from_yaml(scene_file).build_registry(
        logger=create_logger("test", level=logging.ERROR)
    )

    assert isinstance(registry, GeometryRegistry)
    assert registry.count() == 2
    line, plane = registry.objects()
    assert line == Line(0.0, 1.0, 1.0)
    assert plane == Hyperplane(0.0, 1.0, 1.0, 1.0, 1.0)


def test_empty_scene():
    scene = SceneConfig.from_dict(None)
    assert scene.objects == []
    assert scene.points == []
    assert scene.log_level == "INFO"
    assert scene.precision == 6


def test_whole_float_precision_accepted():
    assert SceneConfig.from_dict({"precision": 4.0}).precision == 4


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        SceneConfig.from_yaml(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("objects: [unclosed\n")
    with pytest.raises(ValueError):
        SceneConfig.from_yaml(path)


@pytest.mark.parametrize("data", [
    {"objects": [{"type": "circle", "coefficients": [1, 2, 3]}]},
    {"objects": [{"type": "line", "coefficients": [1, 2]}]},
    {"objects": [{"type": "hyperplane", "coefficients": [0, 1, 1]}]},
    {"objects": [{"coefficients": [0, 1, 1]}]},
    {"objects": ["line"]},
    {"points": [[1, 2, 3]]},
    {"points": [[]]},
    {"log_level": "LOUD"},
    {"precision": 40},
    {"precision": None},
    {"precision": [1]},
    {"precision": 6.9},
    {"precision": "6"},
    {"precision": True},
    ["not", "a", "mapping"],
])
def test_invalid_scene(data):
    with pytest.raises(ValueError):
        SceneConfig.from_dict(data)


# ----------------------------------------------------------------------
# Structured logging
# ----------------------------------------------------------------------

class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.lines = []

    def emit(self, record):
        self.lines.append(self.format(record))


def test_structured_log_format():
    handler = ListHandler()
    logger = StructuredLogger(
        component="test",
        logger_name="hyperline.test.format",
        handler=handler,
    )

    logger.info(event=LogEvent.CONFIG_LOADED, message="Loaded", metadata={"objects": 2})
    logger.debug(event=LogEvent.POINT_CHECKED, message="Below level")
    logger.error(
        event=LogEvent.CONFIG_INVALID,
        message="Rejected",
        exc_info=ValueError("bad coefficients"),
    )

    assert len(handler.lines) == 2
    info, error = (json.loads(line) for line in handler.lines)

    assert info["level"] == "INFO"
    assert info["component"] == "test"
    assert info["event"] == "config.loaded"
    assert info["message"] == "Loaded"
    assert info["metadata"] == {"objects": 2}
    assert "timestamp" in info
    assert "exception" not in info

    assert error["level"] == "ERROR"
    assert error["exception"] == {"type": "ValueError", "message": "bad coefficients"}


def test_set_level():
    handler = ListHandler()
    logger = StructuredLogger(
        component="test",
        level=logging.WARNING,
        logger_name="hyperline.test.level",
        handler=handler,
    )
    logger.info(event=LogEvent.OBJECT_ADDED, message="hidden")
    logger.set_level(logging.INFO)
    logger.info(event=LogEvent.OBJECT_ADDED, message="shown")

    assert [json.loads(line)["message"] for line in handler.lines] == ["shown"]


def test_stderr_handler_follows_current_stderr(capsys):
    logger = StructuredLogger(component="test", logger_name="hyperline.test.stderr")
    handler, = logger.logger.handlers
    assert isinstance(handler, StderrHandler)

    logger.info(event=LogEvent.CLI_COMMAND, message="to captured stderr")
    assert json.loads(capsys.readouterr().err)["message"] == "to captured stderr"

    buffer = io.StringIO()
    handler.setStream(buffer)
    logger.info(event=LogEvent.CLI_COMMAND, message="rebound")
    assert "rebound" in capsys.readouterr().err
    assert buffer.getvalue() == ""


# ----------------------------------------------------------------------
# Renderer
# ----------------------------------------------------------------------

def test_format_equation():
    renderer = TextRenderer()
    assert renderer.format_equation((0.0, 1.0, 1.0)) == "(1.0)*x + (1.0)*y + (0.0) = 0"
    assert renderer.format_equation((5.0, 1.0, 2.0, 3.0, 4.0)) == (
        "(1.0)*x1 + (2.0)*x2 + (3.0)*x3 + (4.0)*x4 + (5.0) = 0"
    )


def test_render_check_uses_style():
    registry = GeometryRegistry(logger=create_logger("test", level=logging.ERROR))
    registry.add(Line(0.0, 1.0, 1.0))
    registry.add(Hyperplane(0.0, 1.0, 1.0, 1.0, 1.0))

    renderer = TextRenderer(precision=2, width=10, check="+", cross="-", separator="=")
    text = renderer.render_check((1.0, 1.0), registry.check_point((1.0, 1.0)))

    assert "=" * 10 in text
    assert "[1] Line: - not on object" in text
    assert "Distance: 1.41" in text
    assert "[2] Hyperplane: skipped (needs 4D, got 2D)" in text


def test_render_inspection_errors():
    renderer = TextRenderer()
    summaries = [
        ObjectSummary(index=0, object_type="Line", dimension=None, coefficients=(), is_valid=False, error="calibration lost"),
        ObjectSummary(index=1, object_type="Line", dimension=2, coefficients=(0.0, 1.0, 1.0), is_valid=True),
    ]
    text = renderer.render_objects(summaries)
    assert "[1] Line: error - calibration lost" in text
    assert "[2] Line: (1.0)*x + (1.0)*y + (0.0) = 0" in text

    text = renderer.render_validation([
        ValidationResult(index=0, object_type="Line", is_valid=False, error="calibration lost"),
        ValidationResult(index=1, object_type="Line", is_valid=True),
    ])
    assert "[1] Line: error - calibration lost" in text
    assert "[2] Line: ✓ valid" in text


# ----------------------------------------------------------------------
# CLI
# ----------------------------------------------------------------------

def test_cli_check_from_config(scene_file, capsys):
    code = main(["--config", str(scene_file), "check"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert "POINT (3.0, -3.0)" in out
    assert "[1] Line: ✓ on object" in out
    assert "Distance: 0.000" in out
    assert "[2] Hyperplane: skipped (needs 4D, got 2D)" in out
    assert "POINT (1.0, 1.0, 1.0, 1.0)" in out
    assert "Distance: 2.000" in out


def test_cli_objects_from_arguments(capsys):
    code = main([
        "--log-level", "ERROR",
        "--line", "0", "1", "1",
        "--hyperplane", "0", "1", "1", "1", "1",
        "check", "--point", "1", "1",
    ])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert "[1] Line: ✗ not on object" in out
    assert "Distance: 1.414214" in out
    assert "[2] Hyperplane: skipped" in out


def test_cli_degenerate_object_reported(capsys):
    code = main(["--log-level", "ERROR", "--line", "5", "0", "0", "--line", "0", "1", "0", "check", "--point", "2", "0"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert "[1] Line: error - degenerate coefficients - cannot normalize" in out
    assert "[2] Line: ✗ not on object" in out
    assert "Distance: 2.000000" in out


def test_cli_show(scene_file, capsys):
    code = main(["--config", str(scene_file), "show"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert "[1] Line: (1.0)*x + (1.0)*y + (0.0) = 0" in out
    assert "Dimension: 4D" in out
    assert "✓ valid" in out


def test_cli_validate_exit_code(scene_file, capsys):
    assert main(["--config", str(scene_file), "validate"]) == EXIT_OK
    assert main(["--config", str(scene_file), "--log-level", "ERROR", "--line", "1", "0", "0", "validate"]) == EXIT_INVALID_OBJECTS
    out = capsys.readouterr().out
    assert "[3] Line: ✗ invalid" in out


def test_cli_stats(scene_file, capsys):
    code = main(["--config", str(scene_file), "stats"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert "Objects: 2" in out
    assert "Line: 1" in out
    assert "Hyperplane: 1" in out


def test_cli_errors(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.yaml"), "show"]) == EXIT_ERROR
    assert "Config file not found" in capsys.readouterr().err

    assert main(["--log-level", "ERROR", "--line", "0", "1", "1", "check"]) == EXIT_ERROR
    assert "no points given" in capsys.readouterr().err

    assert main(["--precision", "99", "show"]) == EXIT_ERROR
    assert main([]) == EXIT_ERROR


def test_cli_rejects_malformed_precision(tmp_path, capsys):
    path = tmp_path / "scene.yaml"
    path.write_text("precision: null\nobjects:\n  - type: line\n    coefficients: [0, 1, 1]\n")

    assert main(["--config", str(path), "show"]) == EXIT_ERROR
    assert "precision must be an integer" in capsys.readouterr().err


def run_without_pytest():
    """Run the config and renderer tests without pytest."""
    test_example_scene_loads()
    test_empty_scene()
    test_whole_float_precision_accepted()
    print("✓ Scene config")
    test_format_equation()
    test_render_check_uses_style()
    test_render_inspection_errors()
    print("✓ Text renderer")
    print("✅ ALL CONFIG TESTS PASSED")


if __name__ == "__main__":
    run_without_pytest()
