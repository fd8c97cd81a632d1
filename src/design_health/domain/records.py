"""Safe accessors over raw snapshot records.

Snapshot records arrive in several platform shapes (REST, plugin runtime,
file JSON). Every accessor treats a missing or mistyped field as "no signal"
and never raises.
"""

import math
import re
from collections.abc import Mapping

from design_health.domain.constants import ALIAS_TYPE

Record = Mapping[str, object]

_SEGMENT_SPLIT = re.compile(r"[/.]")


class RecordReader:
    """Static helpers for reading raw records. No top-level functions."""

    @staticmethod
    def text(record: Record, key: str) -> str | None:
        """Return record[key] if it is a string, else None."""
        value = record.get(key)
        return value if isinstance(value, str) else None

    @staticmethod
    def name(record: Record) -> str | None:
        """Return the record's name, or None if absent / not a string."""
        return RecordReader.text(record, "name")

    @staticmethod
    def nested(record: Record, *keys: str) -> object | None:
        """Walk nested mappings; None as soon as a level is missing."""
        current: object = record
        for key in keys:
            if not isinstance(current, Mapping):
                return None
            current = current.get(key)
            if current is None:
                return None
        return current

    @staticmethod
    def has_signal(value: object) -> bool:
        """Truthiness for membership signals (empty strings/containers are no signal)."""
        return bool(value)

    @staticmethod
    def node_id(record: Record) -> str | None:
        """Node id of a component or component set (REST `node_id`, plugin `id`)."""
        return RecordReader.text(record, "node_id") or RecordReader.text(record, "id")

    @staticmethod
    def display_name(record: Record) -> str:
        """Name for evidence output; falls back to the node id."""
        return RecordReader.name(record) or RecordReader.node_id(record) or "(unnamed)"

    @staticmethod
    def description(record: Record) -> str:
        """Stripped description, empty string when missing."""
        value = RecordReader.text(record, "description")
        return value.strip() if value else ""

    @staticmethod
    def values_by_mode(record: Record) -> list[object]:
        """Mode values in input order; empty when valuesByMode is not a mapping."""
        values = record.get("valuesByMode")
        if not isinstance(values, Mapping):
            return []
        return list(values.values())

    @staticmethod
    def is_alias(value: object) -> bool:
        """True for a {type: VARIABLE_ALIAS, id} reference."""
        return isinstance(value, Mapping) and value.get("type") == ALIAS_TYPE

    @staticmethod
    def alias_target(value: object) -> str | None:
        """Target variable id of an alias reference."""
        if not isinstance(value, Mapping) or value.get("type") != ALIAS_TYPE:
            return None
        target = value.get("id")
        return target if isinstance(target, str) else None

    @staticmethod
    def is_number(value: object) -> bool:
        """Int/float literal (bool excluded)."""
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    @staticmethod
    def finite_number(value: object) -> float | None:
        """Numeric literal as a finite float; None for non-numbers, nan/inf and overflow."""
        if not RecordReader.is_number(value):
            return None
        try:
            number = float(value)  # type: ignore[arg-type]
        except OverflowError:
            return None
        return number if math.isfinite(number) else None

    @staticmethod
    def rgb(value: object) -> tuple[float, float, float] | None:
        """(r, g, b) in 0-1 for a direct color literal, None otherwise."""
        if not isinstance(value, Mapping) or value.get("type") == ALIAS_TYPE:
            return None
        channels = [RecordReader.finite_number(value.get(key)) for key in ("r", "g", "b")]
        if any(c is None or not 0.0 <= c <= 1.0 for c in channels):
            return None
        return (channels[0], channels[1], channels[2])  # type: ignore[return-value]

    @staticmethod
    def leaf_name(name: str) -> str:
        """Last segment of a `/` or `.` delimited token name."""
        return _SEGMENT_SPLIT.split(name)[-1]
