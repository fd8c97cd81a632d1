"""FindingGuidanceService: loads the finding registry and provides display names and tooltips."""

import logging
from pathlib import Path
from typing import cast

import yaml

from design_health.domain.protocols import GuidanceServiceProtocol
from design_health.domain.registry_types import FindingRegistryEntry


class FindingGuidanceService(GuidanceServiceProtocol):
    """Loads finding_registry.yaml and resolves per-finding display names and tooltips."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent
            self._path = _base / "resources" / "finding_registry.yaml"
        self._registry: dict[str, FindingRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            logging.warning("Finding registry not found at %s; using built-in labels.", self._path)
            self._registry = {}
            return
        try:
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            logging.warning("Finding registry %s is not valid YAML: %s", self._path, exc)
            data = None
        self._registry = (
            {
                str(finding_id): cast(FindingRegistryEntry, entry)
                for finding_id, entry in data.items()
                if isinstance(entry, dict)
            }
            if isinstance(data, dict)
            else {}
        )

    def get_registry(self) -> dict[str, FindingRegistryEntry]:
        """Return a shallow copy of the loaded registry."""
        return dict(self._registry)

    def get_entry(self, finding_id: str) -> FindingRegistryEntry | None:
        """Return a copy of the registry entry for a finding id, or None."""
        entry = self._registry.get(finding_id)
        if entry is None:
            return None
        return cast(FindingRegistryEntry, dict(entry))

    def get_display_name(self, finding_id: str) -> str | None:
        """Return the display name for a finding id, or None when unregistered."""
        entry = self._registry.get(finding_id)
        if not entry or not entry.get("display_name"):
            return None
        return str(entry["display_name"])

    def get_tooltip(self, finding_id: str) -> str | None:
        """Return the static tooltip for a finding id, or None when unregistered."""
        entry = self._registry.get(finding_id)
        if not entry or not entry.get("tooltip"):
            return None
        return " ".join(str(entry["tooltip"]).split())
