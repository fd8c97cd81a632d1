"""Coverage: breadth and size of the design system."""

import re

from design_health.domain.constants import (
    ALL_VARIABLE_TYPES,
    CORE_COMPONENT_PATTERNS,
    COVERAGE,
    SECTION_COLLECTIONS,
    SECTION_COMPONENTS,
    SECTION_VARIABLES,
)
from design_health.domain.entities import Finding
from design_health.domain.records import RecordReader
from design_health.domain.rules import CategoryScorer, RuleContext, ScoreMath

CORE_COMPONENT_RES: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (name, re.compile(pattern, re.IGNORECASE)) for name, pattern in CORE_COMPONENT_PATTERNS
)

COLLECTION_SECTIONS: tuple[str, ...] = (SECTION_VARIABLES, SECTION_COLLECTIONS)


class CoverageScorer(CategoryScorer):
    """Checks token types, core components, and token/collection/component counts."""

    category = COVERAGE

    def evaluate(self, context: RuleContext) -> list[Finding]:
        return [
            self._token_types(context),
            self._core_components(context),
            self._variable_count(context),
            self._collection_completeness(context),
            self._component_count(context),
        ]

    def _token_types(self, context: RuleContext) -> Finding:
        finding_id, label = "coverage-token-types", "Token type coverage"
        variables = context.snapshot.variables
        if self.withheld(context, len(variables), SECTION_VARIABLES):
            return self.unavailable(finding_id, label, context, SECTION_VARIABLES)
        if not variables:
            return self.judged(finding_id, label, 0, "No variables found in the design system.")

        present = {v.get("resolvedType") for v in variables}
        found = [t for t in ALL_VARIABLE_TYPES if t in present]
        missing = [t for t in ALL_VARIABLE_TYPES if t not in present]
        details = (
            f"{len(found)} of {len(ALL_VARIABLE_TYPES)} variable types present. "
            f"Missing: {', '.join(missing)}."
            if missing
            else "All variable types (COLOR, FLOAT, STRING, BOOLEAN) are present."
        )
        return self.judged(
            finding_id, label, 25 * len(found), details,
            examples=[f"missing {t}" for t in missing],
        )

    def _core_components(self, context: RuleContext) -> Finding:
        finding_id, label = "coverage-core-components", "Core component presence"
        snapshot = context.snapshot
        # Variants rarely carry the category word; set names do.
        names = [
            n for n in (RecordReader.name(r) for r in snapshot.components + snapshot.component_sets)
            if n
        ]
        if self.withheld(context, len(names), SECTION_COMPONENTS):
            return self.unavailable(finding_id, label, context, SECTION_COMPONENTS)
        if not names:
            return self.judged(finding_id, label, 0, "No components found in the design system.")

        found: list[str] = []
        missing: list[str] = []
        examples: list[str] = []
        for category, pattern in CORE_COMPONENT_RES:
            matching = [n for n in names if pattern.search(n)]
            if matching:
                found.append(category)
                examples.append(f"{category}: {', '.join(matching[:2])}")
            else:
                missing.append(category)
        details = (
            f"{len(found)} of {len(CORE_COMPONENT_RES)} core component categories found. "
            f"Missing: {', '.join(missing)}."
            if missing
            else "All core component categories are represented."
        )
        return self.judged(
            finding_id, label, ScoreMath.ratio_score(len(found), len(CORE_COMPONENT_RES)),
            details, examples=examples,
        )

    def _variable_count(self, context: RuleContext) -> Finding:
        finding_id, label = "coverage-variable-count", "Variable count health"
        count = len(context.snapshot.variables)
        if self.withheld(context, count, SECTION_VARIABLES):
            return self.unavailable(finding_id, label, context, SECTION_VARIABLES)
        if count == 0:
            score, details = 0, (
                "No variables found. A design system needs tokens for colors, "
                "spacing, and typography.")
        elif count <= 10:
            score, details = 50, (
                f"{count} variables found. Consider expanding the token set for better coverage.")
        elif count <= 50:
            score, details = 75, (
                f"{count} variables found. Good foundation; consider adding more semantic layers.")
        else:
            score, details = 100, f"{count} variables found. Healthy token coverage."
        return self.judged(finding_id, label, score, details)

    def _collection_completeness(self, context: RuleContext) -> Finding:
        finding_id, label = "coverage-collection-completeness", "Collection completeness"
        count = len(context.snapshot.collections)
        if self.withheld(context, count, *COLLECTION_SECTIONS):
            return self.unavailable(finding_id, label, context, *COLLECTION_SECTIONS)
        if count == 0:
            score, details = 0, (
                "No variable collections found. Organize tokens into logical collections.")
        elif count == 1:
            score, details = 50, (
                "1 collection found. Consider splitting tokens into multiple collections "
                "by concern (color, spacing, typography).")
        elif count == 2:
            score, details = 75, f"{count} collections found. Good separation of concerns."
        else:
            score, details = 100, f"{count} collections found. Well-organized token architecture."
        return self.judged(finding_id, label, score, details)

    def _component_count(self, context: RuleContext) -> Finding:
        finding_id, label = "coverage-component-count", "Component count health"
        count = len(context.classification.scorable_units)
        if self.withheld(context, count, SECTION_COMPONENTS):
            return self.unavailable(finding_id, label, context, SECTION_COMPONENTS)
        if count == 0:
            score, details = 0, "No components found. Publish a component library."
        elif count <= 5:
            score, details = 50, (
                f"{ScoreMath.plural(count, 'component')} found. "
                "Consider building out the component library.")
        elif count <= 20:
            score, details = 75, f"{count} components found. Solid component foundation."
        else:
            score, details = 100, f"{count} components found. Comprehensive component library."
        return self.judged(finding_id, label, score, details)
