"""Default set of category scorers, in report order."""

from typing import TYPE_CHECKING

from design_health.domain.config import ScoringConfig
from design_health.domain.rules import CategoryScorer
from design_health.domain.rules.accessibility import AccessibilityScorer
from design_health.domain.rules.component_metadata import ComponentMetadataScorer
from design_health.domain.rules.consistency import ConsistencyScorer
from design_health.domain.rules.coverage import CoverageScorer
from design_health.domain.rules.naming_semantics import NamingSemanticsScorer
from design_health.domain.rules.token_architecture import TokenArchitectureScorer

if TYPE_CHECKING:
    from design_health.domain.protocols import GuidanceServiceProtocol

SCORER_TYPES: tuple[type[CategoryScorer], ...] = (
    NamingSemanticsScorer,
    TokenArchitectureScorer,
    ComponentMetadataScorer,
    AccessibilityScorer,
    ConsistencyScorer,
    CoverageScorer,
)


class ScorerCatalog:
    """Builds the six category scorers sharing one config and guidance source."""

    @staticmethod
    def default_scorers(
        config: ScoringConfig,
        guidance: "GuidanceServiceProtocol | None" = None,
    ) -> list[CategoryScorer]:
        return [scorer_type(config, guidance) for scorer_type in SCORER_TYPES]
