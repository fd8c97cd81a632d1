"""Unit tests for ConsistencyScorer."""

import pytest

from design_health.domain.entities import Severity
from design_health.domain.rules.consistency import ConsistencyScorer
from rule_test_utils import finding, run_scorer
from snapshot_factory import alias, collection, component, snapshot, variable


@pytest.mark.parametrize(
    ("segment", "expected"),
    [
        ("Button", "PascalCase"),
        ("XL", "PascalCase"),
        ("primaryText", "camelCase"),
        ("button", "camelCase"),
        ("primary-text", "kebab-case"),
        ("font_size", "snake_case"),
        ("FONT_SIZE", "UPPERCASE"),
        ("hello world", "lowercase"),
        ("State=Hover", "mixed"),
    ],
)
def test_detect_casing(segment: str, expected: str) -> None:
    assert ConsistencyScorer.detect_casing(segment) == expected


class TestDelimiterConsistency:
    def test_dominant_delimiter(self) -> None:
        raw = snapshot(variables=[
            variable("a", "color/primary"),
            variable("b", "color/secondary"),
            variable("c", "spacing.small", "FLOAT"),
            variable("d", "radius-md", "FLOAT"),
            variable("e", "flat"),
        ])
        result = finding(run_scorer(ConsistencyScorer, raw), "consistency-delimiter")
        assert result.score == 50
        assert result.examples == ("spacing.small", "radius-md")
        assert '"/"' in result.details

    def test_single_segment_names(self) -> None:
        raw = snapshot(variables=[variable("a", "primary"), variable("b", "secondary")])
        result = finding(run_scorer(ConsistencyScorer, raw), "consistency-delimiter")
        assert result.score == 100
        assert result.examples == ()


class TestCasingConsistency:
    def test_outlier_segments(self) -> None:
        raw = snapshot(variables=[
            variable("a", "color/primaryText"),
            variable("b", "color/secondaryText"),
            variable("c", "spacing/Large", "FLOAT"),
        ])
        result = finding(run_scorer(ConsistencyScorer, raw), "consistency-casing")
        # 5 of 6 segments are camelCase.
        assert result.score == 83
        assert result.examples == ("Large",)

    def test_component_segments_come_first(self) -> None:
        segments = ConsistencyScorer.name_segments(
            (component("Forms / Input"),), (variable("a", "color.text/x"),))
        assert segments == ["Forms", "Input", "color", "text"]

    def test_withheld_sections(self) -> None:
        raw = snapshot(dataAvailability={"components": False})
        result = finding(run_scorer(ConsistencyScorer, raw), "consistency-casing")
        assert result.severity is Severity.INFO


class TestSizeValueConsistency:
    def test_detect_scale_prefers_earlier_scale_on_tie(self) -> None:
        assert ConsistencyScorer.detect_scale([4, 8, 12, 16, 6.5]) == ("4px base", 0.8)
        assert ConsistencyScorer.detect_scale([0, -4]) == (None, 0.0)

    def test_off_scale_values(self) -> None:
        raw = snapshot(variables=[
            variable("a", "space/a", "FLOAT", [4, 8]),
            variable("b", "space/b", "FLOAT", [12, 16]),
            variable("c", "space/c", "FLOAT", [6.5]),
        ])
        result = finding(run_scorer(ConsistencyScorer, raw), "consistency-size-values")
        assert result.score == 80
        assert result.examples == ("6.5",)
        assert "4px base" in result.details

    @pytest.mark.parametrize("bad", [10**400, float("inf"), float("nan")])
    def test_non_finite_values_are_skipped(self, bad: object) -> None:
        raw = snapshot(variables=[
            variable("a", "space/a", "FLOAT", [4, bad]),
            variable("b", "space/b", "FLOAT", [8]),
        ])
        result = finding(run_scorer(ConsistencyScorer, raw), "consistency-size-values")
        assert result.score == 100
        assert result.examples == ()

    def test_all_aliases(self) -> None:
        raw = snapshot(variables=[
            variable("a", "space/a", "FLOAT", [alias("b")]),
            variable("b", "space/b", "FLOAT", [alias("a")]),
        ])
        result = finding(run_scorer(ConsistencyScorer, raw), "consistency-size-values")
        assert result.score == 50

    def test_no_numeric_variables(self) -> None:
        result = finding(run_scorer(ConsistencyScorer, snapshot()), "consistency-size-values")
        assert result.score == 100


class TestModeNamingConsistency:
    def test_order_and_case_insensitive_signature(self) -> None:
        raw = snapshot(collections=[
            collection("c1", "Colors", ("Light", "Dark")),
            collection("c2", "Surfaces", ("dark", "light")),
            collection("c3", "Spacing", ("Default",)),
        ])
        result = finding(run_scorer(ConsistencyScorer, raw), "consistency-mode-naming")
        assert result.score == 67
        assert result.examples == ("Spacing (default)",)

    def test_single_collection(self) -> None:
        raw = snapshot(collections=[collection("c1", "Colors", ("Light", "Dark"))])
        result = finding(run_scorer(ConsistencyScorer, raw), "consistency-mode-naming")
        assert result.score == 100

    def test_only_one_collection_with_modes(self) -> None:
        raw = snapshot(collections=[
            collection("c1", "Colors", ("Light", "Dark")),
            {"id": "c2", "name": "Bare"},
        ])
        result = finding(run_scorer(ConsistencyScorer, raw), "consistency-mode-naming")
        assert result.score == 100

    def test_consistent_modes(self) -> None:
        raw = snapshot(collections=[
            collection("c1", "Colors", ("Light", "Dark")),
            collection("c2", "Surfaces", ("Light", "Dark")),
        ])
        result = finding(run_scorer(ConsistencyScorer, raw), "consistency-mode-naming")
        assert result.score == 100
        assert result.details == "All collections use consistent mode names."
