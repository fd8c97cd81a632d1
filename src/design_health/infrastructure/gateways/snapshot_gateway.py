"""Reads raw design-system snapshots from JSON files or streams."""

import json
import sys
from pathlib import Path

from design_health.domain.entities import SnapshotLoadError

STDIN_PATH = "-"


class JsonSnapshotGateway:
    """Loads a snapshot as plain Python data. Shape validation is left to the domain."""

    def load(self, path: str) -> object:
        """Parse the JSON document at `path` ('-' reads stdin)."""
        try:
            if path == STDIN_PATH:
                text = sys.stdin.read()
            else:
                text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise SnapshotLoadError(f"Cannot read snapshot {path}: {exc}") from exc
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise SnapshotLoadError(
                f"Snapshot {path} is not valid JSON (line {exc.lineno}, column {exc.colno}): "
                f"{exc.msg}"
            ) from exc
