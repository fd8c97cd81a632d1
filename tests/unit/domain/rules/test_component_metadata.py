"""Unit tests for ComponentMetadataScorer."""

import pytest

from design_health.domain.entities import Severity
from design_health.domain.rules.component_metadata import ComponentMetadataScorer
from rule_test_utils import finding, run_scorer
from snapshot_factory import component, component_set, snapshot, variant_of


@pytest.fixture
def mixed_library() -> dict:
    """One documented set, one short-described standalone, one bare standalone."""
    return snapshot(
        componentSets=[
            component_set("Actions/Button", "set-b", "Primary call to action for forms"),
        ],
        components=[
            variant_of("set-b", "Size=Small"),
            variant_of("set-b", "Size=Large"),
            component("Badge", description="Small tag", properties={"tone": {"type": "VARIANT"}}),
            component("Forms/Label"),
        ],
    )


class TestComponentMetadataScorer:
    def test_description_presence(self, mixed_library: dict) -> None:
        result = finding(run_scorer(ComponentMetadataScorer, mixed_library),
                         "component-desc-presence")
        assert result.score == 67
        assert result.examples == ("Forms/Label",)
        assert result.locations[0].node_id == "n-Forms/Label"

    def test_description_quality(self, mixed_library: dict) -> None:
        result = finding(run_scorer(ComponentMetadataScorer, mixed_library),
                         "component-desc-quality")
        assert result.score == 50
        assert result.severity is Severity.WARNING
        assert result.examples == ("Badge",)

    def test_quality_without_any_description(self) -> None:
        raw = snapshot(components=[component("Forms/Label")])
        result = finding(run_scorer(ComponentMetadataScorer, raw), "component-desc-quality")
        assert result.score == 0

    def test_property_completeness_counts_sets(self, mixed_library: dict) -> None:
        result = finding(run_scorer(ComponentMetadataScorer, mixed_library),
                         "component-property-completeness")
        assert result.score == 67
        assert result.examples == ("Forms/Label",)

    def test_empty_property_definitions_do_not_count(self) -> None:
        raw = snapshot(components=[component("Forms/Label", properties={})])
        result = finding(run_scorer(ComponentMetadataScorer, raw),
                         "component-property-completeness")
        assert result.score == 0

    def test_variant_structure(self, mixed_library: dict) -> None:
        result = finding(run_scorer(ComponentMetadataScorer, mixed_library),
                         "component-variant-structure")
        assert result.score == 33
        assert result.examples == ("Badge (standalone)", "Forms/Label (standalone)")

    def test_category_organization(self, mixed_library: dict) -> None:
        result = finding(run_scorer(ComponentMetadataScorer, mixed_library),
                         "component-category-org")
        assert result.score == 67
        assert result.examples == ("Badge",)

    def test_category_score_is_mean(self, mixed_library: dict) -> None:
        # (67 + 50 + 67 + 33 + 67) / 5 = 56.8
        assert run_scorer(ComponentMetadataScorer, mixed_library).score == 57

    def test_variants_never_count_individually(self) -> None:
        raw = snapshot(
            componentSets=[component_set("Actions/Button", "set-b", "Primary call to action")],
            components=[variant_of("set-b", f"Size={i}") for i in range(30)],
        )
        result = run_scorer(ComponentMetadataScorer, raw)
        assert finding(result, "component-desc-presence").score == 100
        assert finding(result, "component-variant-structure").score == 100
        assert finding(result, "component-variant-structure").examples == ()

    def test_no_components_pass_vacuously(self) -> None:
        result = run_scorer(ComponentMetadataScorer, snapshot())
        assert [f.score for f in result.findings] == [100] * 5

    def test_withheld_components_are_info(self) -> None:
        raw = snapshot(dataAvailability={"components": False})
        result = run_scorer(ComponentMetadataScorer, raw)
        assert {f.severity for f in result.findings} == {Severity.INFO}
        assert all(f.score == 0 for f in result.findings)
        assert "component library could not be fetched" in result.findings[0].details

    def test_evidence_caps_at_five(self) -> None:
        raw = snapshot(components=[component(f"Widget{i}") for i in range(25)])
        result = finding(run_scorer(ComponentMetadataScorer, raw), "component-category-org")
        assert result.score == 0
        assert len(result.examples) == 5
        assert len(result.locations) == 5
