"""
Hyperline CLI - Main entry point.

Loads objects from a YAML scene and/or the command line into a
GeometryRegistry and prints the results of bulk queries.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from hyperline_geometry import Hyperplane, Line
from hyperline_logging import LogEvent, create_logger
from hyperline_manager import GeometryRegistry, ObjectConfig, SceneConfig

from .render import TextRenderer


# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_OBJECTS = 3


def load_scene(args: argparse.Namespace) -> SceneConfig:
    """
    Merge the YAML scene (if any) with objects given on the command line.

    Command line objects are appended after the configured ones.

    Raises:
        FileNotFoundError: If --config points to a missing file
        ValueError: If the config or a command line object is invalid
    """
    scene = SceneConfig.from_yaml(Path(args.config)) if args.config else SceneConfig()

    extra = [
        ObjectConfig(object_type="line", coefficients=tuple(values))
        for values in args.line or []
    ] + [
        ObjectConfig(object_type="hyperplane", coefficients=tuple(values))
        for values in args.hyperplane or []
    ]

    log_level = args.log_level or scene.log_level
    precision = args.precision if args.precision is not None else scene.precision

    return SceneConfig(
        objects=list(scene.objects) + extra,
        points=list(scene.points),
        log_level=log_level,
        precision=precision,
    )


def run_command(
    command: str,
    registry: GeometryRegistry,
    scene: SceneConfig,
    renderer: TextRenderer,
    points: Optional[List[List[float]]] = None
) -> int:
    """
    Execute one command and print its output.

    Returns:
        Process exit code
    """
    if command == 'show':
        print(renderer.render_objects(registry.describe_all()))

    elif command == 'validate':
        results = registry.validate_all()
        print(renderer.render_validation(results))
        if not all(r.is_valid for r in results):
            return EXIT_INVALID_OBJECTS

    elif command == 'check':
        points = points or [list(p) for p in scene.points]
        if not points:
            print("❌ Error: no points given (use --point or 'points' in the config)", file=sys.stderr)
            return EXIT_ERROR
        for point in points:
            print(renderer.render_check(point, registry.check_point(point)))

    elif command == 'stats':
        print(renderer.render_stats(registry.statistics()))

    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hyperline-cli",
        description="Hyperline CLI - Check points against lines and 4D hyperplanes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show every object of a scene
  hyperline-cli --config config/scene_example.yaml show

  # Check the scene's points
  hyperline-cli --config config/scene_example.yaml check

  # Objects and points from the command line (coefficients: a0 a1 a2 ...)
  hyperline-cli --line 0 1 1 --hyperplane 0 1 1 1 1 check --point 3 -3 --point 1 1 1 1

  # Validity and statistics
  hyperline-cli --config config/scene_example.yaml validate
  hyperline-cli --config config/scene_example.yaml stats
"""
    )

    # Global arguments
    parser.add_argument(
        "--config",
        help="Path to scene YAML (objects, points, log_level, precision)"
    )
    parser.add_argument(
        "--line",
        action="append",
        nargs=Line.ARITY,
        type=float,
        metavar=("A0", "A1", "A2"),
        help="Add a line a1*x + a2*y + a0 = 0 (repeatable)"
    )
    parser.add_argument(
        "--hyperplane",
        action="append",
        nargs=Hyperplane.ARITY,
        type=float,
        metavar=("A0", "A1", "A2", "A3", "A4"),
        help="Add a hyperplane a1*x1 + ... + a4*x4 + a0 = 0 (repeatable)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for the JSON log on stderr (default: from config, else INFO)"
    )
    parser.add_argument(
        "--precision",
        type=int,
        help="Digits printed for distances (default: from config, else 6)"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('show', help='Print every object')
    subparsers.add_parser('validate', help='Print validity of every object')
    subparsers.add_parser('stats', help='Print collection statistics')

    check = subparsers.add_parser('check', help='Check points against every object')
    check.add_argument(
        "--point",
        action="append",
        nargs="+",
        type=float,
        metavar="X",
        help="Point coordinates (repeatable; default: points from the config)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    try:
        scene = load_scene(args)
    except (FileNotFoundError, ValueError) as e:
        create_logger("cli").error(
            event=LogEvent.CONFIG_INVALID,
            message="Scene rejected",
            metadata={'config': args.config},
            exc_info=e
        )
        print(f"❌ Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    level = scene.logging_level
    logger = create_logger("cli", level=level)
    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message="Scene loaded",
        metadata={'objects': len(scene.objects), 'points': len(scene.points)}
    )
    logger.info(
        event=LogEvent.CLI_COMMAND,
        message=f"Running {args.command}",
        metadata={'config': args.config, 'objects': len(scene.objects)}
    )

    registry = scene.build_registry(logger=create_logger("registry", level=level))

    renderer = TextRenderer(precision=scene.precision)
    points = getattr(args, "point", None)
    return run_command(args.command, registry, scene, renderer, points)


if __name__ == '__main__':
    sys.exit(main())
