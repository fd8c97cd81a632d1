"""Use Case: Score Design System - Produce a HealthReport from a raw snapshot."""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from design_health.domain.analysis import HealthAggregator, SummaryGenerator
from design_health.domain.classifier import ComponentClassifier
from design_health.domain.entities import (
    ComponentClassification,
    DesignSystemSnapshot,
    HealthReport,
    ReportMeta,
)

if TYPE_CHECKING:
    from design_health.domain.protocols import CategoryScorerProtocol

logger = logging.getLogger(__name__)


class ScoreDesignSystemUseCase:
    """
    Orchestrate classification, category scoring, aggregation, and summary.

    Takes a raw snapshot (or an already normalized one) and produces a
    HealthReport. Deterministic: the same input always yields an identical
    report, and the input is never mutated.
    """

    def __init__(
        self,
        classifier: ComponentClassifier,
        scorers: Sequence["CategoryScorerProtocol"],
        aggregator: HealthAggregator,
        summary_generator: SummaryGenerator,
    ) -> None:
        self.classifier = classifier
        self.scorers = list(scorers)
        self.aggregator = aggregator
        self.summary_generator = summary_generator

    def execute(self, snapshot: object) -> HealthReport:
        """
        Build the full health report.

        Flow: normalize -> classify -> score each category -> aggregate -> summarize.
        Raises InvalidSnapshotError if the snapshot is not a mapping.
        """
        if not isinstance(snapshot, DesignSystemSnapshot):
            snapshot = DesignSystemSnapshot.from_raw(snapshot)

        classification = self.classifier.classify(snapshot)
        logger.debug(
            "Classified %d components: %d standalone, %d variants, %d sets",
            len(snapshot.components), len(classification.standalone),
            len(classification.variants), len(classification.component_sets))

        categories = [scorer.score(classification, snapshot) for scorer in self.scorers]
        overall, status = self.aggregator.aggregate(categories)
        summary = self.summary_generator.summarize(categories)
        logger.debug("Overall score %d (%s)", overall, status.value)

        return HealthReport(
            overall=overall,
            status=status,
            categories=tuple(categories),
            summary=tuple(summary),
            meta=self._meta(snapshot, classification),
            data_availability=snapshot.data_availability.raw,
            file_info=snapshot.file_info,
        )

    @staticmethod
    def _meta(
        snapshot: DesignSystemSnapshot, classification: ComponentClassification
    ) -> ReportMeta:
        return ReportMeta(
            component_count=len(snapshot.components),
            component_set_count=len(classification.component_sets),
            standalone_count=len(classification.standalone),
            variant_count=len(classification.variants),
            variable_count=len(snapshot.variables),
            collection_count=len(snapshot.collections),
            style_count=len(snapshot.styles),
        )
