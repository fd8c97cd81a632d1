"""Consistency: pattern uniformity across names, numeric scales, and modes."""

import re
from collections import Counter
from collections.abc import Mapping

from design_health.domain.constants import (
    CONSISTENCY,
    SECTION_COLLECTIONS,
    SECTION_COMPONENTS,
    SECTION_VARIABLES,
    SIZE_SCALES,
    TYPE_FLOAT,
)
from design_health.domain.entities import Finding
from design_health.domain.records import Record, RecordReader
from design_health.domain.rules import CategoryScorer, RuleContext, ScoreMath

DELIMITERS: tuple[str, ...] = ("/", ".", "-", "_")

# Checked in order; the first matching pattern names the casing.
CASING_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("PascalCase", re.compile(r"^[A-Z][a-zA-Z0-9]*$")),
    ("camelCase", re.compile(r"^[a-z][a-zA-Z0-9]*$")),
    ("kebab-case", re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")),
    ("snake_case", re.compile(r"^[a-z][a-z0-9]*(_[a-z0-9]+)*$")),
)

_VARIABLE_SEGMENT_RE = re.compile(r"[/.]")


class ConsistencyScorer(CategoryScorer):
    """Checks delimiter, casing, numeric scale, and mode naming uniformity."""

    category = CONSISTENCY

    def evaluate(self, context: RuleContext) -> list[Finding]:
        return [
            self._delimiter_consistency(context),
            self._casing_consistency(context),
            self._size_value_consistency(context),
            self._mode_naming_consistency(context),
        ]

    @staticmethod
    def detect_casing(segment: str) -> str:
        """Name the casing convention of a single name segment."""
        for casing, pattern in CASING_PATTERNS:
            if pattern.match(segment):
                return casing
        if segment == segment.upper() and len(segment) > 1:
            return "UPPERCASE"
        if segment == segment.lower():
            return "lowercase"
        return "mixed"

    @staticmethod
    def _dominant(counts: Counter[str], order: tuple[str, ...] | list[str]) -> tuple[str, int]:
        """Most frequent key; ties go to the key earliest in `order`."""
        best, best_count = order[0], 0
        for key in order:
            if counts[key] > best_count:
                best, best_count = key, counts[key]
        return best, best_count

    def _delimiter_consistency(self, context: RuleContext) -> Finding:
        finding_id, label = "consistency-delimiter", "Naming delimiter consistency"
        named = [v for v in context.snapshot.variables if RecordReader.name(v)]
        if self.withheld(context, len(named), SECTION_VARIABLES):
            return self.unavailable(finding_id, label, context, SECTION_VARIABLES)
        if not named:
            return self.judged(finding_id, label, 100, "No variables to evaluate.")

        delimited = [
            v for v in named if any(d in (RecordReader.name(v) or "") for d in DELIMITERS)
        ]
        if not delimited:
            return self.judged(
                finding_id, label, 100,
                "No delimiters used in variable names (single-segment names).")

        counts: Counter[str] = Counter(
            d for v in delimited for d in DELIMITERS if d in (RecordReader.name(v) or "")
        )
        dominant, dominant_count = self._dominant(counts, DELIMITERS)
        score = ScoreMath.ratio_score(dominant_count, len(delimited))
        outliers = [v for v in delimited if dominant not in (RecordReader.name(v) or "")]
        return self.judged(
            finding_id, label, score,
            f'{score}% of variables use "{dominant}" as delimiter. '
            "Consistent delimiter usage improves navigability.",
            locations=context.evidence.variable_locations(outliers),
            examples=context.evidence.names(outliers),
        )

    @staticmethod
    def name_segments(components: tuple[Record, ...], variables: tuple[Record, ...]) -> list[str]:
        """Component '/'-segments then variable '/' or '.' segments, longer than one char."""
        segments: list[str] = []
        for component in components:
            segments.extend(s.strip() for s in (RecordReader.name(component) or "").split("/"))
        for variable in variables:
            segments.extend(_VARIABLE_SEGMENT_RE.split(RecordReader.name(variable) or ""))
        return [s for s in segments if len(s) > 1]

    def _casing_consistency(self, context: RuleContext) -> Finding:
        finding_id, label = "consistency-casing", "Casing consistency"
        snapshot = context.snapshot
        segments = self.name_segments(snapshot.components, snapshot.variables)
        if self.withheld(context, len(segments), SECTION_COMPONENTS, SECTION_VARIABLES):
            return self.unavailable(
                finding_id, label, context, SECTION_COMPONENTS, SECTION_VARIABLES)
        if not segments:
            return self.judged(finding_id, label, 100, "No name segments to evaluate.")

        casings = [self.detect_casing(s) for s in segments]
        counts = Counter(casings)
        dominant, dominant_count = self._dominant(counts, list(dict.fromkeys(casings)))
        score = ScoreMath.ratio_score(dominant_count, len(segments))
        outliers = [s for s, casing in zip(segments, casings) if casing != dominant]
        return self.judged(
            finding_id, label, score,
            f"{score}% of name segments use {dominant}. Consistent casing improves readability.",
            examples=outliers,
        )

    @staticmethod
    def detect_scale(values: list[float]) -> tuple[str | None, float]:
        """Best-matching step scale for positive values as (name, match ratio)."""
        positives = [v for v in values if v > 0]
        best_name: str | None = None
        best_ratio = 0.0
        if not positives:
            return best_name, best_ratio
        for name, divisor in SIZE_SCALES:
            ratio = sum(1 for v in positives if v % divisor == 0) / len(positives)
            if ratio > best_ratio:
                best_name, best_ratio = name, ratio
        return best_name, best_ratio

    def _size_value_consistency(self, context: RuleContext) -> Finding:
        finding_id, label = "consistency-size-values", "Size value consistency"
        floats = [v for v in context.snapshot.variables if v.get("resolvedType") == TYPE_FLOAT]
        if self.withheld(context, len(floats), SECTION_VARIABLES):
            return self.unavailable(finding_id, label, context, SECTION_VARIABLES)
        if not floats:
            return self.judged(finding_id, label, 100, "No numeric variables to evaluate.")

        numbers = [
            number
            for variable in floats
            for value in RecordReader.values_by_mode(variable)
            if (number := RecordReader.finite_number(value)) is not None
        ]
        if not numbers:
            return self.judged(
                finding_id, label, 50, "No direct numeric values found (all aliases).")

        scale, ratio = self.detect_scale(numbers)
        score = ScoreMath.clamp(ratio * 100)
        off_scale = (
            [v for v in dict.fromkeys(numbers) if v > 0 and v % dict(SIZE_SCALES)[scale] != 0]
            if scale is not None
            else [v for v in dict.fromkeys(numbers) if v > 0]
        )
        details = (
            f"{score}% of numeric values follow a {scale} scale."
            if scale is not None
            else "No consistent scale pattern detected in numeric values."
        )
        return self.judged(
            finding_id, label, score, details,
            examples=[f"{v:g}" for v in off_scale],
        )

    @staticmethod
    def _mode_signature(collection: Record) -> str | None:
        modes = collection.get("modes")
        if not isinstance(modes, (list, tuple)) or not modes:
            return None
        names = sorted(
            (RecordReader.name(m) or "").lower() for m in modes if isinstance(m, Mapping)
        )
        return ",".join(names)

    def _mode_naming_consistency(self, context: RuleContext) -> Finding:
        finding_id, label = "consistency-mode-naming", "Mode naming consistency"
        collections = context.snapshot.collections
        if self.withheld(context, len(collections), SECTION_VARIABLES, SECTION_COLLECTIONS):
            return self.unavailable(
                finding_id, label, context, SECTION_VARIABLES, SECTION_COLLECTIONS)
        if len(collections) <= 1:
            return self.judged(
                finding_id, label, 100,
                "No collections to evaluate." if not collections
                else "Only one collection; mode naming consistency is not applicable.",
            )

        signatures = [
            (collection, signature)
            for collection in collections
            if (signature := self._mode_signature(collection)) is not None
        ]
        if len(signatures) <= 1:
            return self.judged(
                finding_id, label, 100,
                "Only one collection has modes; consistency is not applicable.")

        counts = Counter(signature for _c, signature in signatures)
        dominant, dominant_count = self._dominant(
            counts, list(dict.fromkeys(s for _c, s in signatures)))
        score = ScoreMath.ratio_score(dominant_count, len(signatures))
        outliers = [c for c, signature in signatures if signature != dominant]
        details = (
            f"{score}% of collections share the same mode names. "
            "Align mode names across collections."
            if outliers
            else "All collections use consistent mode names."
        )
        return self.judged(
            finding_id, label, score, details,
            examples=[
                f"{RecordReader.display_name(c)} ({s.replace(',', ', ')})"
                for c, s in signatures if s != dominant
            ],
        )
