"""Unit tests for NamingSemanticsScorer."""

from design_health.domain.entities import Severity
from design_health.domain.rules.naming_semantics import NamingSemanticsScorer
from rule_test_utils import finding, run_scorer
from snapshot_factory import component, component_set, snapshot, variable, variant_of


class TestVariableNaming:
    def test_visual_names_are_flagged(self) -> None:
        raw = snapshot(variables=[
            variable("v1", "color/blue"),
            variable("v2", "color/gray-500"),
            variable("v3", "color/text/primary"),
            variable("v4", "spacing/16px", "FLOAT", [16]),
            variable("v5", "spacing/medium", "FLOAT", [16]),
            variable("v6", "flag", "STRING", ["x"]),
        ])
        result = finding(run_scorer(NamingSemanticsScorer, raw), "naming-variable-semantic")
        # 3 visual of 5 color/float variables -> 40
        assert result.score == 40
        assert result.severity is Severity.FAIL
        assert result.examples == ("color/blue", "color/gray-500", "spacing/16px")
        assert [loc.name for loc in result.locations] == list(result.examples)

    def test_no_population_is_vacuous_pass(self) -> None:
        result = finding(run_scorer(NamingSemanticsScorer, snapshot()), "naming-variable-semantic")
        assert (result.score, result.severity) == (100, Severity.PASS)

    def test_withheld_variables_are_info(self) -> None:
        raw = snapshot(dataAvailability={"variables": False})
        result = finding(run_scorer(NamingSemanticsScorer, raw), "naming-variable-semantic")
        assert (result.score, result.severity) == (0, Severity.INFO)

    def test_is_visual_name(self) -> None:
        assert NamingSemanticsScorer.is_visual_name(variable("v", "brand.red"))
        assert NamingSemanticsScorer.is_visual_name(variable("v", "size/16px", "FLOAT"))
        assert not NamingSemanticsScorer.is_visual_name(variable("v", "color/redirect"))
        assert not NamingSemanticsScorer.is_visual_name(variable("v", "copy/blue", "STRING"))


class TestComponentNaming:
    def test_scorable_units_only(self) -> None:
        raw = snapshot(
            componentSets=[component_set("Button", "set-1")],
            components=[
                variant_of("set-1", "size=small"),
                variant_of("set-1", "size=large"),
                component("Forms/TextInput"),
                component("icon-star"),
            ],
        )
        result = finding(run_scorer(NamingSemanticsScorer, raw), "naming-component-casing")
        # Button, Forms/TextInput pass; icon-star fails; variants are not judged.
        assert result.score == 67
        assert result.examples == ("icon-star",)
        assert result.locations[0].node_id == "n-icon-star"

    def test_no_components(self) -> None:
        result = finding(run_scorer(NamingSemanticsScorer, snapshot()), "naming-component-casing")
        assert result.score == 100


class TestVariantNaming:
    def test_semantic_versus_visual(self) -> None:
        raw = snapshot(
            componentSets=[component_set("Button", "set-1")],
            components=[
                variant_of("set-1", "Variant=Primary"),
                variant_of("set-1", "Variant=Danger"),
                variant_of("set-1", "Variant=Secondary"),
                variant_of("set-1", "Color=Red"),
            ],
        )
        result = finding(run_scorer(NamingSemanticsScorer, raw), "naming-variant-semantic")
        assert result.score == 75
        assert result.severity is Severity.WARNING
        assert result.examples == ("Color=Red",)

    def test_unclassifiable_variants(self) -> None:
        raw = snapshot(
            componentSets=[component_set("Button", "set-1")],
            components=[variant_of("set-1", "Size=Small")],
        )
        result = finding(run_scorer(NamingSemanticsScorer, raw), "naming-variant-semantic")
        assert (result.score, result.severity) == (75, Severity.WARNING)


class TestBooleanNaming:
    def test_prefixes(self) -> None:
        raw = snapshot(variables=[
            variable("b1", "flags/isOpen", "BOOLEAN", [True]),
            variable("b2", "flags/hasIcon", "BOOLEAN", [False]),
            variable("b3", "flags/visible", "BOOLEAN", [True]),
            variable("b4", "flags/showLabel", "BOOLEAN", [True]),
        ])
        result = finding(run_scorer(NamingSemanticsScorer, raw), "naming-boolean-prefix")
        assert result.score == 75
        assert result.examples == ("flags/visible",)


def test_category_metadata() -> None:
    result = run_scorer(NamingSemanticsScorer, snapshot())
    assert (result.id, result.short_label, result.weight) == ("naming-semantics", "Naming", 0.25)
    assert [f.id for f in result.findings] == [
        "naming-variable-semantic",
        "naming-component-casing",
        "naming-variant-semantic",
        "naming-boolean-prefix",
    ]
    assert result.score == 100
