"""Token Architecture: depth and organization of the token system."""

from collections.abc import Iterator

from design_health.domain.constants import (
    SECTION_COLLECTIONS,
    SECTION_VARIABLES,
    TOKEN_ARCHITECTURE,
    TYPE_COLOR,
    TYPE_FLOAT,
    TYPE_STRING,
)
from design_health.domain.entities import Finding
from design_health.domain.records import Record, RecordReader
from design_health.domain.rules import CategoryScorer, RuleContext, ScoreMath

EXPECTED_TYPES: tuple[str, ...] = (TYPE_COLOR, TYPE_FLOAT, TYPE_STRING)

# Collections arrive with the variables payload; either being withheld hides them.
COLLECTION_SECTIONS: tuple[str, ...] = (SECTION_VARIABLES, SECTION_COLLECTIONS)

_EXHAUSTED = object()


class AliasGraph:
    """Alias chains between variables. Cycles and dangling references are skipped."""

    def __init__(self, variables: tuple[Record, ...]) -> None:
        self._by_id: dict[str, Record] = {}
        for variable in variables:
            vid = RecordReader.text(variable, "id")
            if vid and vid not in self._by_id:
                self._by_id[vid] = variable

    def depth(self, variable: Record) -> int:
        """Number of tiers: 1 = literal only, 2 = one alias hop, and so on."""
        start = RecordReader.text(variable, "id")
        visited: set[str] = {start} if start else set()
        deepest = 1
        # One iterator of mode values per tier currently being walked.
        stack: list[Iterator[object]] = [iter(RecordReader.values_by_mode(variable))]
        while stack:
            value = next(stack[-1], _EXHAUSTED)
            if value is _EXHAUSTED:
                stack.pop()
                continue
            target_id = RecordReader.alias_target(value)
            if target_id is None or target_id in visited:
                continue
            target = self._by_id.get(target_id)
            if target is None:
                continue
            visited.add(target_id)
            stack.append(iter(RecordReader.values_by_mode(target)))
            deepest = max(deepest, len(stack))
        return deepest

    def max_depth(self, variables: tuple[Record, ...]) -> int:
        """Longest alias chain across all variables."""
        return max((self.depth(v) for v in variables), default=1)


class TokenArchitectureScorer(CategoryScorer):
    """Checks collections, modes, aliasing, tier depth, type spread, and descriptions."""

    category = TOKEN_ARCHITECTURE

    def evaluate(self, context: RuleContext) -> list[Finding]:
        return [
            self._collection_organization(context),
            self._mode_coverage(context),
            self._alias_usage(context),
            self._tier_depth(context),
            self._type_distribution(context),
            self._description_coverage(context),
        ]

    def _collection_organization(self, context: RuleContext) -> Finding:
        finding_id, label = "token-collection-org", "Collection organization"
        count = len(context.snapshot.collections)
        if self.withheld(context, count, *COLLECTION_SECTIONS):
            return self.unavailable(finding_id, label, context, *COLLECTION_SECTIONS)
        score = 100 if count >= 3 else {2: 80, 1: 50}.get(count, 0)
        details = (
            "No variable collections found. Organize variables into collections."
            if count == 0
            else f"{ScoreMath.plural(count, 'collection')} found."
        )
        return self.judged(finding_id, label, score, details)

    def _mode_coverage(self, context: RuleContext) -> Finding:
        finding_id, label = "token-mode-coverage", "Mode coverage"
        collections = context.snapshot.collections
        if self.withheld(context, len(collections), *COLLECTION_SECTIONS):
            return self.unavailable(finding_id, label, context, *COLLECTION_SECTIONS)
        if not collections:
            return self.judged(
                finding_id, label, 0, "No collections found to evaluate mode coverage.")

        max_modes = max(self._mode_count(c) for c in collections)
        single_mode = [c for c in collections if self._mode_count(c) < 2]
        if max_modes >= 2:
            score, details = 100, f"Collections support up to {max_modes} modes (e.g. light/dark)."
        elif max_modes == 1:
            score, details = 50, "Collections have only 1 mode. Consider adding light/dark modes."
        else:
            score, details = 0, "No modes detected in collections."
        return self.judged(
            finding_id, label, score, details,
            examples=context.evidence.names(single_mode) if score < 100 else (),
        )

    @staticmethod
    def _mode_count(collection: Record) -> int:
        modes = collection.get("modes")
        return len(modes) if isinstance(modes, (list, tuple)) else 0

    def _alias_usage(self, context: RuleContext) -> Finding:
        finding_id, label = "token-alias-usage", "Alias usage"
        variables = context.snapshot.variables
        if self.withheld(context, len(variables), SECTION_VARIABLES):
            return self.unavailable(finding_id, label, context, SECTION_VARIABLES)
        if not variables:
            return self.judged(finding_id, label, 0, "No variables to evaluate alias usage.")

        alias_count = 0
        total_values = 0
        literal_only: list[Record] = []
        for variable in variables:
            values = RecordReader.values_by_mode(variable)
            if not values:
                continue
            aliased = sum(1 for value in values if RecordReader.is_alias(value))
            total_values += len(values)
            alias_count += aliased
            if aliased == 0:
                literal_only.append(variable)

        if total_values == 0:
            return self.judged(finding_id, label, 0, "No variable values found to evaluate.")
        score = ScoreMath.ratio_score(alias_count, total_values)
        return self.judged(
            finding_id, label, score,
            f"{alias_count} of {total_values} values are aliases "
            f"({score}%). "
            "Higher alias usage indicates better token layering.",
            locations=context.evidence.variable_locations(literal_only),
            examples=context.evidence.names(literal_only),
        )

    def _tier_depth(self, context: RuleContext) -> Finding:
        finding_id, label = "token-tier-depth", "Token tier depth"
        variables = context.snapshot.variables
        if self.withheld(context, len(variables), SECTION_VARIABLES):
            return self.unavailable(finding_id, label, context, SECTION_VARIABLES)
        if not variables:
            return self.judged(finding_id, label, 0, "No variables to evaluate tier depth.")

        max_depth = AliasGraph(variables).max_depth(variables)
        score = 100 if max_depth >= 3 else {2: 67}.get(max_depth, 33)
        return self.judged(
            finding_id, label, score,
            f"Maximum alias chain depth: {ScoreMath.plural(max_depth, 'tier')}. "
            "3+ tiers indicates a well-layered token architecture.",
        )

    def _type_distribution(self, context: RuleContext) -> Finding:
        finding_id, label = "token-type-distribution", "Type distribution"
        variables = context.snapshot.variables
        if self.withheld(context, len(variables), SECTION_VARIABLES):
            return self.unavailable(finding_id, label, context, SECTION_VARIABLES)
        if not variables:
            return self.judged(finding_id, label, 0, "No variables to evaluate type distribution.")

        present = list(dict.fromkeys(
            t for t in (v.get("resolvedType") for v in variables) if isinstance(t, str)
        ))
        matched = [t for t in EXPECTED_TYPES if t in present]
        missing = [t for t in EXPECTED_TYPES if t not in present]
        return self.judged(
            finding_id, label, ScoreMath.ratio_score(len(matched), len(EXPECTED_TYPES)),
            f"{len(matched)} of {len(EXPECTED_TYPES)} expected types "
            f"({', '.join(EXPECTED_TYPES)}) present. Found: {', '.join(present) or 'none'}.",
            examples=[f"missing {t}" for t in missing],
        )

    def _description_coverage(self, context: RuleContext) -> Finding:
        finding_id, label = "token-description-coverage", "Description coverage"
        variables = context.snapshot.variables
        if self.withheld(context, len(variables), SECTION_VARIABLES):
            return self.unavailable(finding_id, label, context, SECTION_VARIABLES)
        if not variables:
            return self.judged(
                finding_id, label, 0, "No variables to evaluate description coverage.")

        undocumented = [v for v in variables if not RecordReader.description(v)]
        documented = len(variables) - len(undocumented)
        return self.judged(
            finding_id, label, ScoreMath.ratio_score(documented, len(variables)),
            f"{documented} of {len(variables)} variables have descriptions "
            f"({ScoreMath.ratio_score(documented, len(variables))}%).",
            locations=context.evidence.variable_locations(undocumented),
            examples=context.evidence.names(undocumented),
        )
