"""Naming & Semantics: names should describe intent rather than appearance."""

import re

from design_health.domain.constants import (
    NAMING_SEMANTICS,
    SECTION_COMPONENTS,
    SECTION_VARIABLES,
    SEMANTIC_VARIANT_VALUES,
    TYPE_BOOLEAN,
    TYPE_COLOR,
    TYPE_FLOAT,
    VISUAL_COLOR_WORDS,
    VISUAL_VARIANT_VALUES,
)
from design_health.domain.entities import Finding
from design_health.domain.records import Record, RecordReader
from design_health.domain.rules import CategoryScorer, RuleContext, ScoreMath

PASCAL_CASE_RE = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
BOOLEAN_PREFIX_RE = re.compile(
    r"^(is|has|can|should|will|did|was|with|show|hide|enable|disable)", re.IGNORECASE)
# Leaf segments that are raw measurements: "16px", "1.5rem", "12pt".
PIXEL_LITERAL_RE = re.compile(r"^\d+(\.\d+)?(px|pt|rem|em|dp)$", re.IGNORECASE)


class NamingSemanticsScorer(CategoryScorer):
    """Checks variable, component, variant, and boolean naming."""

    category = NAMING_SEMANTICS

    def evaluate(self, context: RuleContext) -> list[Finding]:
        return [
            self._variable_naming(context),
            self._component_naming(context),
            self._variant_naming(context),
            self._boolean_naming(context),
        ]

    @staticmethod
    def is_visual_name(variable: Record) -> bool:
        """COLOR leaf is a raw color word; FLOAT leaf is a pixel literal."""
        name = RecordReader.name(variable)
        if not name:
            return False
        leaf = RecordReader.leaf_name(name).lower()
        resolved = variable.get("resolvedType")
        if resolved == TYPE_COLOR:
            return any(leaf == word or leaf.startswith(f"{word}-") for word in VISUAL_COLOR_WORDS)
        if resolved == TYPE_FLOAT:
            return bool(PIXEL_LITERAL_RE.match(leaf))
        return False

    def _variable_naming(self, context: RuleContext) -> Finding:
        finding_id, label = "naming-variable-semantic", "Variable naming"
        population = [
            v for v in context.snapshot.variables
            if v.get("resolvedType") in (TYPE_COLOR, TYPE_FLOAT) and RecordReader.name(v)
        ]
        if self.withheld(context, len(population), SECTION_VARIABLES):
            return self.unavailable(finding_id, label, context, SECTION_VARIABLES)
        if not population:
            return self.judged(finding_id, label, 100, "No color or numeric variables to evaluate.")

        visual = [v for v in population if self.is_visual_name(v)]
        score = ScoreMath.ratio_score(len(population) - len(visual), len(population))
        details = (
            f"{len(visual)} of {len(population)} color and numeric variables use visual "
            "names instead of purpose-based names."
            if visual
            else f"All {len(population)} color and numeric variables use purpose-based names."
        )
        return self.judged(
            finding_id, label, score, details,
            locations=context.evidence.variable_locations(visual),
            examples=context.evidence.names(visual),
        )

    def _component_naming(self, context: RuleContext) -> Finding:
        finding_id, label = "naming-component-casing", "Component naming"
        units = [u for u in context.classification.scorable_units if RecordReader.name(u)]
        if self.withheld(context, len(units), SECTION_COMPONENTS):
            return self.unavailable(finding_id, label, context, SECTION_COMPONENTS)
        if not units:
            return self.judged(finding_id, label, 100, "No components to evaluate.")

        offending = [u for u in units if not self._is_pascal_path(RecordReader.name(u) or "")]
        compliant = len(units) - len(offending)
        return self.judged(
            finding_id, label, ScoreMath.ratio_score(compliant, len(units)),
            f"{compliant} of {len(units)} components and component sets use "
            "PascalCase segments separated by '/'.",
            locations=context.evidence.component_locations(offending),
            examples=context.evidence.names(offending),
        )

    @staticmethod
    def _is_pascal_path(name: str) -> bool:
        return all(PASCAL_CASE_RE.match(segment.strip()) for segment in name.split("/"))

    @staticmethod
    def _mentions_value(name: str, values: tuple[str, ...]) -> bool:
        """Variant value appears as the whole name, after '=', or after ', '."""
        return any(
            name == v or f"={v}" in name or f", {v}" in name
            for v in values
        )

    def _variant_naming(self, context: RuleContext) -> Finding:
        finding_id, label = "naming-variant-semantic", "Variant naming"
        variants = [v for v in context.classification.variants if RecordReader.name(v)]
        if self.withheld(context, len(variants), SECTION_COMPONENTS):
            return self.unavailable(finding_id, label, context, SECTION_COMPONENTS)
        if not variants:
            return self.judged(finding_id, label, 100, "No variant components to evaluate.")

        semantic_count = 0
        visual: list[Record] = []
        for variant in variants:
            lowered = (RecordReader.name(variant) or "").lower()
            if self._mentions_value(lowered, SEMANTIC_VARIANT_VALUES):
                semantic_count += 1
            if self._mentions_value(lowered, VISUAL_VARIANT_VALUES):
                visual.append(variant)

        evaluated = semantic_count + len(visual)
        if evaluated == 0:
            return self.judged(
                finding_id, label, 75,
                "Variant values could not be classified as semantic or visual.")
        details = (
            f"{len(visual)} variant values use visual names. "
            "Prefer purpose-based values like 'primary' or 'danger'."
            if visual
            else "Variant values use semantic naming conventions."
        )
        return self.judged(
            finding_id, label, ScoreMath.ratio_score(semantic_count, evaluated), details,
            locations=context.evidence.component_locations(visual),
            examples=context.evidence.names(visual),
        )

    def _boolean_naming(self, context: RuleContext) -> Finding:
        finding_id, label = "naming-boolean-prefix", "Boolean naming"
        booleans = [
            v for v in context.snapshot.variables
            if v.get("resolvedType") == TYPE_BOOLEAN and RecordReader.name(v)
        ]
        if self.withheld(context, len(booleans), SECTION_VARIABLES):
            return self.unavailable(finding_id, label, context, SECTION_VARIABLES)
        if not booleans:
            return self.judged(finding_id, label, 100, "No boolean variables to evaluate.")

        missing = [
            v for v in booleans
            if not BOOLEAN_PREFIX_RE.match(RecordReader.leaf_name(RecordReader.name(v) or ""))
        ]
        details = (
            f"{len(missing)} of {len(booleans)} boolean variables lack is*/has*/can* prefixes."
            if missing
            else f"All {len(booleans)} boolean variables use proper prefixes."
        )
        return self.judged(
            finding_id, label, ScoreMath.ratio_score(len(booleans) - len(missing), len(booleans)),
            details,
            locations=context.evidence.variable_locations(missing),
            examples=context.evidence.names(missing),
        )
