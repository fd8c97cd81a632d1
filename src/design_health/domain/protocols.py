"""Domain protocols: ports implemented by infrastructure or by the rule modules."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from design_health.domain.entities import (
        CategoryResult,
        ComponentClassification,
        DesignSystemSnapshot,
    )
    from design_health.domain.registry_types import FindingRegistryEntry


class GuidanceServiceProtocol(Protocol):
    """Protocol for the finding registry (display names and tooltips per finding id)."""

    def get_registry(self) -> "dict[str, FindingRegistryEntry]":
        """Return a copy of every registered finding entry keyed by id."""
        ...

    def get_entry(self, finding_id: str) -> "FindingRegistryEntry | None":
        """Return the registry entry for a finding id, or None."""
        ...

    def get_display_name(self, finding_id: str) -> str | None:
        """Return the display name for a finding id, or None."""
        ...

    def get_tooltip(self, finding_id: str) -> str | None:
        """Return the static tooltip text for a finding id, or None."""
        ...


class CategoryScorerProtocol(Protocol):
    """Protocol for one of the six independent category scorers."""

    category_id: str

    def score(
        self,
        classification: "ComponentClassification",
        snapshot: "DesignSystemSnapshot",
    ) -> "CategoryResult":
        """Evaluate every rule of the category against the shared, read-only inputs."""
        ...


class SnapshotGatewayProtocol(Protocol):
    """Protocol for reading a raw snapshot document from a path ('-' for stdin)."""

    def load(self, path: str) -> object:
        """Return the parsed document. Raises SnapshotLoadError when unreadable."""
        ...
