"""Component classification: standalone components, variants, and component sets."""

from collections.abc import Callable
from dataclasses import dataclass

from design_health.domain.entities import ComponentClassification, DesignSystemSnapshot
from design_health.domain.records import Record, RecordReader


@dataclass(frozen=True)
class ComponentSetLookup:
    """Node ids and "<SetName>/" prefixes of every known component set."""
    node_ids: frozenset[str]
    name_prefixes: tuple[str, ...]

    @classmethod
    def from_sets(cls, component_sets: tuple[Record, ...]) -> "ComponentSetLookup":
        """Build the lookup; sets without a node id or name contribute nothing for that signal."""
        node_ids: set[str] = set()
        prefixes: dict[str, None] = {}
        for component_set in component_sets:
            node_id = RecordReader.node_id(component_set)
            if node_id:
                node_ids.add(node_id)
            name = RecordReader.name(component_set)
            if name:
                prefixes[f"{name}/"] = None
        return cls(node_ids=frozenset(node_ids), name_prefixes=tuple(prefixes))


class ComponentClassifier:
    """
    Partitions raw component records into standalone components and variants.

    Variant membership is a disjunction of independent signals, checked in a
    fixed order and short-circuiting on the first match. A component matching
    several signals is still exactly one variant.
    """

    def classify(self, snapshot: DesignSystemSnapshot) -> ComponentClassification:
        """Return the classification; empty input yields empty sequences."""
        lookup = ComponentSetLookup.from_sets(snapshot.component_sets)
        standalone: list[Record] = []
        variants: list[Record] = []
        for component in snapshot.components:
            if self.is_variant(component, lookup):
                variants.append(component)
            else:
                standalone.append(component)
        return ComponentClassification(
            standalone=tuple(standalone),
            variants=tuple(variants),
            component_sets=snapshot.component_sets,
        )

    def is_variant(self, component: Record, lookup: ComponentSetLookup) -> bool:
        """True if any membership signal matches."""
        signals: tuple[Callable[[Record, ComponentSetLookup], bool], ...] = (
            self._has_containing_component_set,
            self._has_component_set_id,
            self._has_snake_case_set_id,
            self._has_set_name_prefix,
            self._has_set_frame_node,
        )
        return any(signal(component, lookup) for signal in signals)

    @staticmethod
    def _has_containing_component_set(component: Record, _lookup: ComponentSetLookup) -> bool:
        """REST API: containing_frame.containingComponentSet is set on variants."""
        return RecordReader.has_signal(
            RecordReader.nested(component, "containing_frame", "containingComponentSet"))

    @staticmethod
    def _has_component_set_id(component: Record, _lookup: ComponentSetLookup) -> bool:
        """Plugin runtime: componentSetId."""
        return RecordReader.has_signal(component.get("componentSetId"))

    @staticmethod
    def _has_snake_case_set_id(component: Record, _lookup: ComponentSetLookup) -> bool:
        """File JSON: component_set_id."""
        return RecordReader.has_signal(component.get("component_set_id"))

    @staticmethod
    def _has_set_name_prefix(component: Record, lookup: ComponentSetLookup) -> bool:
        """Name starts with "<SetName>/" for a known set."""
        name = RecordReader.name(component)
        if not name:
            return False
        return any(name.startswith(prefix) for prefix in lookup.name_prefixes)

    @staticmethod
    def _has_set_frame_node(component: Record, lookup: ComponentSetLookup) -> bool:
        """containing_frame.nodeId is a known set's node id."""
        frame_node = RecordReader.nested(component, "containing_frame", "nodeId")
        return isinstance(frame_node, str) and frame_node in lookup.node_ids
