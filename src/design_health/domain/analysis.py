"""Domain analysis: weighted aggregation and summary of category results.

Pure domain logic, no I/O. All classes operate on in-memory data structures.
"""

from __future__ import annotations

import math

from design_health.domain.config import ScoringConfig
from design_health.domain.constants import CATEGORY_ORDER, WeightTable
from design_health.domain.entities import CategoryResult, Finding, HealthStatus, Severity
from design_health.domain.rules import ScoreMath

_SEVERITY_RANK = {Severity.FAIL: 0, Severity.WARNING: 1}


class HealthAggregator:
    """
    Combines category results into the overall score and status.

    overall = round_half_up(sum(score * weight)), clamped to [0, 100]. The
    category list must match the fixed category table; weights come from the
    results themselves so a mismatch is caught rather than silently reweighted.
    """

    def __init__(self, config: ScoringConfig) -> None:
        self._config = config

    def aggregate(self, categories: list[CategoryResult]) -> tuple[int, HealthStatus]:
        """Return (overall score, status)."""
        self.validate(categories)
        weighted = math.fsum(c.score * c.weight for c in categories)
        overall = ScoreMath.clamp(weighted)
        return overall, self._config.status_for(overall)

    @staticmethod
    def validate(categories: list[CategoryResult]) -> None:
        """Raise ValueError when categories do not match the fixed table."""
        WeightTable.validate()
        expected = [(spec.id, spec.weight) for spec in CATEGORY_ORDER]
        actual = [(c.id, c.weight) for c in categories]
        if sorted(actual) != sorted(expected):
            raise ValueError(
                f"Category results {[c.id for c in categories]} do not match the "
                f"category table {[spec.id for spec in CATEGORY_ORDER]}")


class SummaryGenerator:
    """
    Picks the most actionable findings for the report summary.

    Only fail and warning findings qualify; fail sorts before warning, then by
    ascending score. Ties keep category then finding order.
    """

    def __init__(self, config: ScoringConfig) -> None:
        self._config = config

    def summarize(self, categories: list[CategoryResult]) -> list[str]:
        """Return up to summary_limit one-line entries."""
        candidates: list[tuple[int, int, int, CategoryResult, Finding]] = []
        for category in categories:
            for finding in category.findings:
                rank = _SEVERITY_RANK.get(finding.severity)
                if rank is None:
                    continue
                candidates.append((rank, finding.score, len(candidates), category, finding))
        candidates.sort(key=lambda item: item[:3])
        return [
            self.format_entry(category, finding)
            for _rank, _score, _order, category, finding in candidates[: self._config.summary_limit]
        ]

    @staticmethod
    def format_entry(category: CategoryResult, finding: Finding) -> str:
        """'[Tokens] Alias usage: 12 of 40 values are aliases ...'."""
        return f"[{category.short_label}] {finding.label}: {finding.details or 'Needs improvement.'}"
