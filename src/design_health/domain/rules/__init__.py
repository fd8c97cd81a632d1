"""Domain base for category scorers: rule context, score math, and finding construction."""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from design_health.domain.config import ScoringConfig
from design_health.domain.constants import CategorySpec
from design_health.domain.entities import (
    CategoryResult,
    ComponentClassification,
    DataAvailability,
    DesignSystemSnapshot,
    Finding,
    Location,
    Severity,
)
from design_health.domain.evidence import EvidenceBuilder

if TYPE_CHECKING:
    from design_health.domain.protocols import GuidanceServiceProtocol

__all__ = [
    "CategoryScorer",
    "RuleContext",
    "ScoreMath",
]


class ScoreMath:
    """Rounding and ratio helpers shared by every rule. No top-level functions."""

    @staticmethod
    def round_half_up(value: float) -> int:
        """Round .5 away from zero for non-negative scores (0.5 -> 1, 2.5 -> 3)."""
        return int(math.floor(value + 0.5))

    @staticmethod
    def clamp(value: float) -> int:
        """Round and clamp to [0, 100]."""
        return max(0, min(100, ScoreMath.round_half_up(value)))

    @staticmethod
    def ratio_score(part: int, whole: int) -> int:
        """part/whole as a 0-100 score; 0 when whole is 0."""
        if whole <= 0:
            return 0
        return ScoreMath.clamp(part / whole * 100)

    @staticmethod
    def mean(scores: Iterable[int]) -> int | None:
        """Rounded arithmetic mean, or None for no scores."""
        values = list(scores)
        if not values:
            return None
        return ScoreMath.clamp(math.fsum(values) / len(values))

    @staticmethod
    def plural(count: int, noun: str) -> str:
        """'1 collection' / '2 collections'."""
        return f"{count} {noun}{'' if count == 1 else 's'}"


@dataclass(frozen=True)
class RuleContext:
    """Read-only inputs shared by every rule of a category."""
    snapshot: DesignSystemSnapshot
    classification: ComponentClassification
    evidence: EvidenceBuilder

    @property
    def availability(self) -> DataAvailability:
        """Shortcut to the snapshot's data availability."""
        return self.snapshot.data_availability

    @classmethod
    def build(
        cls, classification: ComponentClassification, snapshot: DesignSystemSnapshot
    ) -> "RuleContext":
        """Build the context; collection names are resolved once per category run."""
        return cls(
            snapshot=snapshot,
            classification=classification,
            evidence=EvidenceBuilder(snapshot.collection_names()),
        )


class CategoryScorer:
    """
    Base class for the six category scorers.

    Subclasses set `category` and implement `evaluate()`, returning one Finding
    per discrete rule. The category score is the rounded mean of every
    non-info finding; `info` findings reflect unavailable data and are never
    judged. A category with nothing judged resolves to the configured
    empty-category score.
    """

    category: ClassVar[CategorySpec]

    def __init__(
        self,
        config: ScoringConfig,
        guidance: "GuidanceServiceProtocol | None" = None,
    ) -> None:
        self._config = config
        self._guidance = guidance

    @property
    def category_id(self) -> str:
        """Stable id of the category (e.g. 'naming-semantics')."""
        return self.category.id

    def score(
        self,
        classification: ComponentClassification,
        snapshot: DesignSystemSnapshot,
    ) -> CategoryResult:
        """Run every rule of the category and combine the findings."""
        context = RuleContext.build(classification, snapshot)
        findings = tuple(self.evaluate(context))
        judged = ScoreMath.mean(f.score for f in findings if f.severity is not Severity.INFO)
        return CategoryResult(
            id=self.category.id,
            label=self.category.label,
            short_label=self.category.short_label,
            score=self._config.empty_category_score if judged is None else judged,
            weight=self.category.weight,
            findings=findings,
        )

    def evaluate(self, context: RuleContext) -> list[Finding]:
        """Return one finding per rule. Implemented by each category."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Finding construction
    # ------------------------------------------------------------------

    def judged(
        self,
        finding_id: str,
        label: str,
        score: float,
        details: str,
        locations: tuple[Location, ...] = (),
        examples: Iterable[str] = (),
    ) -> Finding:
        """A finding whose severity is derived from its score."""
        value = ScoreMath.clamp(score)
        return self._finding(
            finding_id, label, value, self._config.severity_for(value), details,
            locations, EvidenceBuilder.examples(examples),
        )

    def unavailable(
        self, finding_id: str, label: str, context: RuleContext, *sections: str
    ) -> Finding:
        """An info finding: the data needed by the rule was withheld, not judged poor."""
        reason = context.availability.reason(*sections)
        details = (
            f"Data unavailable: {reason}. "
            "Score reflects missing data, not actual design system quality."
        )
        return self._finding(finding_id, label, 0, Severity.INFO, details, (), ())

    @staticmethod
    def withheld(context: RuleContext, population_size: int, *sections: str) -> bool:
        """True when the population is empty because its section was unavailable."""
        return population_size == 0 and context.availability.is_unavailable(*sections)

    def _finding(
        self,
        finding_id: str,
        label: str,
        score: int,
        severity: Severity,
        details: str,
        locations: tuple[Location, ...],
        examples: tuple[str, ...],
    ) -> Finding:
        display = self._display_name(finding_id) or label
        return Finding(
            id=finding_id,
            label=display,
            score=score,
            severity=severity,
            tooltip=self._tooltip(finding_id, display, details),
            details=details,
            locations=locations,
            examples=examples,
        )

    def _display_name(self, finding_id: str) -> str | None:
        if self._guidance is None:
            return None
        return self._guidance.get_display_name(finding_id)

    def _tooltip(self, finding_id: str, label: str, details: str) -> str:
        """Registry tooltip, else the details sentence, else the label; always plain text."""
        candidates: list[str] = []
        if self._guidance is not None:
            registered = self._guidance.get_tooltip(finding_id)
            if registered:
                candidates.append(registered)
        candidates.extend([details, label, finding_id])
        for candidate in candidates:
            text = EvidenceBuilder.plain_text(candidate)
            if text:
                return text
        return finding_id
