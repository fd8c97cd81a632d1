"""Domain entities: the input snapshot and the health report produced from it."""

import copy
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TypedDict

from design_health.domain.constants import (
    DEFAULT_UNAVAILABLE_REASONS,
    SECTION_ERROR_KEYS,
    SECTIONS,
)
from design_health.domain.records import Record


class InvalidSnapshotError(TypeError):
    """Raised when the snapshot's top level is not a record at all (e.g. None or a list)."""


class SnapshotLoadError(Exception):
    """Raised when a snapshot source cannot be read or is not valid JSON."""


class Severity(Enum):
    """Classification of a finding."""
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"
    # Underlying data section was unavailable; not a judgement of quality.
    INFO = "info"


class HealthStatus(Enum):
    """Three-way bucketing of the overall score."""
    GOOD = "good"
    NEEDS_WORK = "needs-work"
    POOR = "poor"


class LocationType(Enum):
    """Kind of entity a location points at."""
    VARIABLE = "variable"
    COMPONENT = "component"


class LocationDict(TypedDict, total=False):
    """Serialization shape for Location."""
    name: str
    type: str
    collection: str
    nodeId: str


@dataclass(frozen=True)
class Location:
    """Pointer to an offending variable or component, safe for UI rendering."""
    name: str
    type: LocationType
    collection: str | None = None
    node_id: str | None = None

    def to_dict(self) -> LocationDict:
        """Convert to dictionary for serialization."""
        out: LocationDict = {"name": self.name, "type": self.type.value}
        if self.type is LocationType.VARIABLE and self.collection is not None:
            out["collection"] = self.collection
        if self.type is LocationType.COMPONENT and self.node_id is not None:
            out["nodeId"] = self.node_id
        return out


@dataclass(frozen=True)
class Finding:
    """One diagnostic result of a category rule. Diagnostic only: carries no remediation."""
    id: str
    label: str
    score: int
    severity: Severity
    tooltip: str
    details: str = ""
    locations: tuple[Location, ...] = ()
    examples: tuple[str, ...] = ()

    @property
    def is_actionable(self) -> bool:
        """Failing or warning findings are candidates for the summary."""
        return self.severity in (Severity.FAIL, Severity.WARNING)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization. Empty evidence is omitted."""
        out: dict[str, object] = {
            "id": self.id,
            "label": self.label,
            "score": self.score,
            "severity": self.severity.value,
            "tooltip": self.tooltip,
        }
        if self.details:
            out["details"] = self.details
        if self.locations:
            out["locations"] = [loc.to_dict() for loc in self.locations]
        if self.examples:
            out["examples"] = list(self.examples)
        return out


@dataclass(frozen=True)
class CategoryResult:
    """A scored category: one of the six gauges of the dashboard."""
    id: str
    label: str
    short_label: str
    score: int
    weight: float
    findings: tuple[Finding, ...]

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "label": self.label,
            "shortLabel": self.short_label,
            "score": self.score,
            "weight": self.weight,
            "findings": [f.to_dict() for f in self.findings],
        }


@dataclass(frozen=True)
class ReportMeta:
    """Entity counts of the scored snapshot."""
    component_count: int
    component_set_count: int
    standalone_count: int
    variant_count: int
    variable_count: int
    collection_count: int
    style_count: int

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for serialization."""
        return {
            "componentCount": self.component_count,
            "componentSetCount": self.component_set_count,
            "standaloneCount": self.standalone_count,
            "variantCount": self.variant_count,
            "variableCount": self.variable_count,
            "collectionCount": self.collection_count,
            "styleCount": self.style_count,
        }


@dataclass(frozen=True)
class DataAvailability:
    """Which snapshot sections were successfully fetched, plus the raw payload for pass-through."""
    unavailable: frozenset[str] = frozenset()
    errors: Mapping[str, str] = field(default_factory=dict)
    raw: Mapping[str, object] | None = None

    @classmethod
    def from_raw(cls, raw: object) -> "DataAvailability":
        """Parse `dataAvailability`. Only an explicit `false` marks a section unavailable."""
        if not isinstance(raw, Mapping):
            return cls()
        unavailable = frozenset(s for s in SECTIONS if raw.get(s) is False)
        errors: dict[str, str] = {}
        for section, key in SECTION_ERROR_KEYS.items():
            message = raw.get(key)
            if isinstance(message, str) and message.strip():
                errors[section] = message.strip()
        return cls(unavailable=unavailable, errors=errors, raw=copy.deepcopy(dict(raw)))

    def is_unavailable(self, *sections: str) -> bool:
        """True if any of the given sections was withheld."""
        return any(s in self.unavailable for s in sections)

    def reason(self, *sections: str) -> str:
        """Human-readable reason for the first unavailable section among `sections`."""
        for section in sections:
            if section in self.unavailable:
                return self.errors.get(section) or DEFAULT_UNAVAILABLE_REASONS[section]
        return ""


@dataclass(frozen=True)
class DesignSystemSnapshot:
    """Read-only, normalized view of a raw design-system snapshot.

    Records are kept as raw mappings because the classifier needs to see every
    platform-specific membership signal. Sections that are missing or not
    sequences become empty tuples; non-mapping entries are dropped.
    """
    variables: tuple[Record, ...] = ()
    collections: tuple[Record, ...] = ()
    components: tuple[Record, ...] = ()
    component_sets: tuple[Record, ...] = ()
    styles: tuple[Record, ...] = ()
    data_availability: DataAvailability = field(default_factory=DataAvailability)
    file_info: Mapping[str, object] | None = None

    @classmethod
    def from_raw(cls, raw: object) -> "DesignSystemSnapshot":
        """Build a snapshot from the raw record. Fails fast only if `raw` is not a mapping."""
        if not isinstance(raw, Mapping):
            raise InvalidSnapshotError(
                f"Snapshot must be a mapping of sections, got {type(raw).__name__}")
        file_info = cls._first(raw, "fileInfo", "file_info")
        return cls(
            variables=cls._section(raw, "variables"),
            collections=cls._section(raw, "collections"),
            components=cls._section(raw, "components"),
            component_sets=cls._section(raw, "componentSets", "component_sets"),
            styles=cls._section(raw, "styles"),
            data_availability=DataAvailability.from_raw(
                cls._first(raw, "dataAvailability", "data_availability")),
            file_info=copy.deepcopy(dict(file_info)) if isinstance(file_info, Mapping) else None,
        )

    @staticmethod
    def _first(raw: Mapping[str, object], *keys: str) -> object | None:
        for key in keys:
            if raw.get(key) is not None:
                return raw[key]
        return None

    @staticmethod
    def _section(raw: Mapping[str, object], *keys: str) -> tuple[Record, ...]:
        value = DesignSystemSnapshot._first(raw, *keys)
        if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
            return ()
        return tuple(item for item in value if isinstance(item, Mapping))

    def collection_names(self) -> dict[str, str]:
        """Map collection id -> collection name (first occurrence wins)."""
        names: dict[str, str] = {}
        for collection in self.collections:
            cid = collection.get("id")
            name = collection.get("name")
            if isinstance(cid, str) and isinstance(name, str) and cid not in names:
                names[cid] = name
        return names


@dataclass(frozen=True)
class ComponentClassification:
    """Partition of the snapshot's components. Shared read-only by all scorers."""
    standalone: tuple[Record, ...] = ()
    variants: tuple[Record, ...] = ()
    component_sets: tuple[Record, ...] = ()

    @property
    def scorable_units(self) -> tuple[Record, ...]:
        """Standalone components followed by component sets; variants never count individually."""
        return self.standalone + self.component_sets


@dataclass(frozen=True)
class HealthReport:
    """Complete, JSON-serializable health report. Holds no references into the input."""
    overall: int
    status: HealthStatus
    categories: tuple[CategoryResult, ...]
    summary: tuple[str, ...]
    meta: ReportMeta
    data_availability: Mapping[str, object] | None = None
    file_info: Mapping[str, object] | None = None

    def finding(self, finding_id: str) -> Finding | None:
        """Look up a finding by id across all categories."""
        for category in self.categories:
            for f in category.findings:
                if f.id == finding_id:
                    return f
        return None

    def category(self, category_id: str) -> CategoryResult | None:
        """Look up a category result by id."""
        return next((c for c in self.categories if c.id == category_id), None)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization (e.g. JSON)."""
        out: dict[str, object] = {
            "overall": self.overall,
            "status": self.status.value,
            "categories": [c.to_dict() for c in self.categories],
            "summary": list(self.summary),
            "meta": self.meta.to_dict(),
        }
        if self.data_availability is not None:
            out["dataAvailability"] = copy.deepcopy(dict(self.data_availability))
        if self.file_info is not None:
            out["fileInfo"] = copy.deepcopy(dict(self.file_info))
        return out
