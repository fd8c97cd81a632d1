"""Unit tests for ComponentClassifier."""

import unittest

from design_health.domain.classifier import ComponentClassifier, ComponentSetLookup
from design_health.domain.entities import DesignSystemSnapshot
from snapshot_factory import component, component_set, snapshot, variant_of


class TestComponentClassifier(unittest.TestCase):
    """Test variant detection and the standalone/variant partition."""

    def setUp(self) -> None:
        self.classifier = ComponentClassifier()

    def classify(self, **sections: object):
        return self.classifier.classify(DesignSystemSnapshot.from_raw(snapshot(**sections)))

    def test_empty_snapshot(self) -> None:
        """Empty input yields empty sequences."""
        result = self.classify()
        self.assertEqual(result.standalone, ())
        self.assertEqual(result.variants, ())
        self.assertEqual(result.scorable_units, ())

    def test_two_variants_and_one_standalone(self) -> None:
        """Set Button with two variants plus a standalone Icon -> 2 scorable units."""
        result = self.classify(
            componentSets=[component_set("Button", "set-1")],
            components=[
                variant_of("set-1", "Size=Small"),
                variant_of("set-1", "Size=Large"),
                component("Icon"),
            ],
        )
        self.assertEqual(len(result.variants), 2)
        self.assertEqual([c["name"] for c in result.standalone], ["Icon"])
        self.assertEqual(len(result.scorable_units), 2)

    def test_each_signal_alone_marks_a_variant(self) -> None:
        """Every membership signal is sufficient on its own."""
        sets = [component_set("Button", "set-1")]
        cases = {
            "containing component set": component(
                "A", containing_frame={"containingComponentSet": {"nodeId": "other"}}),
            "componentSetId": component("B", componentSetId="set-9"),
            "component_set_id": component("C", component_set_id="set-9"),
            "name prefix": component("Button/Primary"),
            "frame node": component("D", containing_frame={"nodeId": "set-1"}),
        }
        for label, record in cases.items():
            with self.subTest(signal=label):
                result = self.classify(componentSets=sets, components=[record])
                self.assertEqual(len(result.variants), 1)
                self.assertEqual(result.standalone, ())

    def test_multiple_signals_count_once(self) -> None:
        """A component matching three signals is still one variant."""
        record = component(
            "Button/Primary",
            componentSetId="set-1",
            containing_frame={"containingComponentSet": {"nodeId": "set-1"}, "nodeId": "set-1"},
        )
        result = self.classify(componentSets=[component_set("Button", "set-1")], components=[record])
        self.assertEqual(len(result.variants), 1)
        self.assertEqual(len(result.standalone), 0)

    def test_multiple_sets(self) -> None:
        """5 + 3 variants across two sets plus 2 standalone -> 4 scorable units."""
        components = [variant_of("set-a", f"Size={i}") for i in range(5)]
        components += [variant_of("set-b", f"Tone={i}") for i in range(3)]
        components += [component("Divider"), component("Spacer")]
        result = self.classify(
            componentSets=[component_set("Button", "set-a"), component_set("Chip", "set-b")],
            components=components,
        )
        self.assertEqual(len(result.variants), 8)
        self.assertEqual(len(result.standalone), 2)
        self.assertEqual(len(result.scorable_units), 4)
        self.assertEqual(len(result.variants) + len(result.standalone), len(components))

    def test_empty_signals_are_not_membership(self) -> None:
        """Empty strings / missing nested fields do not make a variant."""
        record = component(
            "Standalone", componentSetId="", component_set_id=None,
            containing_frame={"containingComponentSet": None, "nodeId": ""},
        )
        result = self.classify(components=[record])
        self.assertEqual(len(result.standalone), 1)

    def test_prefix_requires_slash_after_set_name(self) -> None:
        """'ButtonGroup' is not a variant of set 'Button'."""
        result = self.classify(
            componentSets=[component_set("Button", "set-1")],
            components=[component("ButtonGroup")],
        )
        self.assertEqual(len(result.standalone), 1)

    def test_component_sets_pass_through_unchanged(self) -> None:
        sets = [component_set("Button", "set-1"), component_set("Chip", "set-2")]
        result = self.classify(componentSets=sets)
        self.assertEqual(list(result.component_sets), sets)


class TestComponentSetLookup(unittest.TestCase):
    """Test lookup construction."""

    def test_sets_without_name_or_id_contribute_nothing(self) -> None:
        lookup = ComponentSetLookup.from_sets(({"name": "Button"}, {"node_id": "1:1"}, {}))
        self.assertEqual(lookup.node_ids, frozenset({"1:1"}))
        self.assertEqual(lookup.name_prefixes, ("Button/",))
