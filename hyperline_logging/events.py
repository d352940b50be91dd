"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <subject>.<action>

    subject: object, objects, point, config, cli
    action: added, skipped, checked, failed, loaded, ...

Example (jq over the JSON log stream):
    hyperline-cli check ... 2>&1 >/dev/null | jq 'select(.event == "point.check_failed")'
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - object.* / objects.*: Collection mutations and bulk queries
    - point.*: Per-object point checks
    - config.*: Scene configuration loading
    - cli.*: Command line invocations
    """

    # ========== Collection Events ==========
    OBJECT_ADDED = "object.added"
    """Object appended to the registry."""

    OBJECT_ADD_SKIPPED = "object.add_skipped"
    """None passed to add(); ignored."""

    OBJECTS_VALIDATED = "objects.validated"
    """Validity computed for every stored object."""

    OBJECT_INSPECT_FAILED = "object.inspect_failed"
    """Object raised while being described or validated."""

    # ========== Point Events ==========
    POINT_CHECKED = "point.checked"
    """Point evaluated against one object."""

    POINT_SKIPPED = "point.skipped"
    """Point dimension does not match the object; not evaluated."""

    POINT_CHECK_FAILED = "point.check_failed"
    """Object raised while evaluating a point."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Scene configuration loaded and validated."""

    CONFIG_INVALID = "config.invalid"
    """Scene configuration rejected."""

    # ========== CLI Events ==========
    CLI_COMMAND = "cli.command"
    """Command line command executed."""
