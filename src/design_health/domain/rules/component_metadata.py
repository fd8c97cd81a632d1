"""Component Metadata: documentation and structure of scorable units.

Every rule here evaluates scorable units (standalone components plus
component sets) rather than raw components, so a set with twenty variants
counts once.
"""

from collections.abc import Mapping

from design_health.domain.constants import (
    COMPONENT_METADATA,
    MIN_QUALITY_DESC_LENGTH,
    SECTION_COMPONENTS,
)
from design_health.domain.entities import Finding
from design_health.domain.records import Record, RecordReader
from design_health.domain.rules import CategoryScorer, RuleContext, ScoreMath


class ComponentMetadataScorer(CategoryScorer):
    """Checks descriptions, properties, variant structure, and path grouping."""

    category = COMPONENT_METADATA

    def evaluate(self, context: RuleContext) -> list[Finding]:
        return [
            self._description_presence(context),
            self._description_quality(context),
            self._property_completeness(context),
            self._variant_structure(context),
            self._category_organization(context),
        ]

    def _description_presence(self, context: RuleContext) -> Finding:
        finding_id, label = "component-desc-presence", "Description presence"
        units = context.classification.scorable_units
        if self.withheld(context, len(units), SECTION_COMPONENTS):
            return self.unavailable(finding_id, label, context, SECTION_COMPONENTS)
        if not units:
            return self.judged(finding_id, label, 100, "No components to evaluate.")

        missing = [u for u in units if not RecordReader.description(u)]
        documented = len(units) - len(missing)
        score = ScoreMath.ratio_score(documented, len(units))
        return self.judged(
            finding_id, label, score,
            f"{documented} of {len(units)} components have descriptions ({score}%).",
            locations=context.evidence.component_locations(missing),
            examples=context.evidence.names(missing),
        )

    def _description_quality(self, context: RuleContext) -> Finding:
        finding_id, label = "component-desc-quality", "Description quality"
        units = context.classification.scorable_units
        if self.withheld(context, len(units), SECTION_COMPONENTS):
            return self.unavailable(finding_id, label, context, SECTION_COMPONENTS)
        if not units:
            return self.judged(finding_id, label, 100, "No components to evaluate.")

        described = [u for u in units if RecordReader.description(u)]
        if not described:
            return self.judged(
                finding_id, label, 0, "No components have descriptions to evaluate quality.")
        short = [u for u in described if len(RecordReader.description(u)) < MIN_QUALITY_DESC_LENGTH]
        details = (
            f"{len(short)} of {len(described)} descriptions are too short "
            f"(<{MIN_QUALITY_DESC_LENGTH} chars). Provide usage guidance, not just names."
            if short
            else f"All {len(described)} descriptions provide meaningful documentation."
        )
        return self.judged(
            finding_id, label, ScoreMath.ratio_score(len(described) - len(short), len(described)),
            details,
            locations=context.evidence.component_locations(short),
            examples=context.evidence.names(short),
        )

    @staticmethod
    def _has_properties(component: Record) -> bool:
        definitions = component.get("componentPropertyDefinitions")
        return isinstance(definitions, Mapping) and len(definitions) > 0

    def _property_completeness(self, context: RuleContext) -> Finding:
        finding_id, label = "component-property-completeness", "Property completeness"
        classification = context.classification
        units = classification.scorable_units
        if self.withheld(context, len(units), SECTION_COMPONENTS):
            return self.unavailable(finding_id, label, context, SECTION_COMPONENTS)
        if not units:
            return self.judged(finding_id, label, 100, "No components to evaluate.")

        # Sets define properties through their variants.
        without = [c for c in classification.standalone if not self._has_properties(c)]
        with_properties = len(units) - len(without)
        score = ScoreMath.ratio_score(with_properties, len(units))
        return self.judged(
            finding_id, label, score,
            f"{with_properties} of {len(units)} components have defined properties "
            f"or variants ({score}%).",
            locations=context.evidence.component_locations(without),
            examples=context.evidence.names(without),
        )

    def _variant_structure(self, context: RuleContext) -> Finding:
        finding_id, label = "component-variant-structure", "Variant structure"
        classification = context.classification
        units = classification.scorable_units
        if self.withheld(context, len(units), SECTION_COMPONENTS):
            return self.unavailable(finding_id, label, context, SECTION_COMPONENTS)
        if not units:
            return self.judged(finding_id, label, 100, "No components to evaluate.")

        set_count = len(classification.component_sets)
        standalone = classification.standalone
        score = ScoreMath.ratio_score(set_count, len(units))
        if set_count == 0:
            return self.judged(
                finding_id, label, score,
                "No components use variant structures. "
                "Consider organizing components into sets with variants.",
            )
        return self.judged(
            finding_id, label, score,
            f"{set_count} of {len(units)} components use variant sets ({score}%). "
            f"{ScoreMath.plural(len(standalone), 'standalone component')}.",
            locations=context.evidence.component_locations(standalone),
            examples=[f"{RecordReader.display_name(c)} (standalone)" for c in standalone],
        )

    def _category_organization(self, context: RuleContext) -> Finding:
        finding_id, label = "component-category-org", "Category organization"
        units = context.classification.scorable_units
        if self.withheld(context, len(units), SECTION_COMPONENTS):
            return self.unavailable(finding_id, label, context, SECTION_COMPONENTS)
        if not units:
            return self.judged(finding_id, label, 100, "No components to evaluate.")

        ungrouped = [u for u in units if "/" not in (RecordReader.name(u) or "")]
        grouped = len(units) - len(ungrouped)
        score = ScoreMath.ratio_score(grouped, len(units))
        details = (
            f"{grouped} of {len(units)} components use path-based grouping ({score}%)."
            if grouped
            else "No components use path separators for grouping. "
            "Use '/' in names for organization (e.g. 'Forms/Input')."
        )
        return self.judged(
            finding_id, label, score, details,
            locations=context.evidence.component_locations(ungrouped),
            examples=context.evidence.names(ungrouped),
        )
