from typing import TYPE_CHECKING, Any, cast

from design_health.domain.analysis import HealthAggregator, SummaryGenerator
from design_health.domain.classifier import ComponentClassifier
from design_health.domain.config import ScoringConfig
from design_health.domain.rules.catalog import ScorerCatalog
from design_health.infrastructure.config_file_loader import ConfigFileLoader
from design_health.infrastructure.gateways.snapshot_gateway import JsonSnapshotGateway
from design_health.infrastructure.reporters import TerminalHealthReporter
from design_health.infrastructure.services.guidance_service import FindingGuidanceService
from design_health.use_cases.score_design_system import ScoreDesignSystemUseCase

if TYPE_CHECKING:
    from design_health.domain.protocols import GuidanceServiceProtocol, SnapshotGatewayProtocol
    from design_health.interface.reporters import HealthReporter


class DesignHealthContainer:
    """Dependency Injection Container for the design-health scorer."""

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_dict)

    def _register_defaults(self, config_dict: dict[str, object] | None) -> None:
        """Register default implementations for protocols."""
        if config_dict is None:
            config_dict = ConfigFileLoader.load_config_from_fs()
        config = ScoringConfig(config_dict)
        self.register_singleton("ScoringConfig", config)

        guidance_service = FindingGuidanceService()
        self.register_singleton("GuidanceService", guidance_service)
        self.register_singleton("SnapshotGateway", JsonSnapshotGateway())

        self.register_singleton(
            "ScoreDesignSystemUseCase",
            ScoreDesignSystemUseCase(
                classifier=ComponentClassifier(),
                scorers=ScorerCatalog.default_scorers(config, guidance_service),
                aggregator=HealthAggregator(config),
                summary_generator=SummaryGenerator(config),
            ),
        )

        # Interface
        self.register_singleton("HealthReporter", TerminalHealthReporter())

    # JUSTIFICATION: DI Container must handle any type of service
    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    # JUSTIFICATION: DI Container must return any type of service
    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config(self) -> ScoringConfig:
        """Return the scoring configuration (created at composition root)."""
        return cast(ScoringConfig, self.get("ScoringConfig"))

    def get_guidance_service(self) -> "GuidanceServiceProtocol":
        """Return the guidance service (finding registry)."""
        return cast(FindingGuidanceService, self.get("GuidanceService"))

    def get_snapshot_gateway(self) -> "SnapshotGatewayProtocol":
        """Return the snapshot file gateway."""
        return cast(JsonSnapshotGateway, self.get("SnapshotGateway"))

    def get_score_use_case(self) -> ScoreDesignSystemUseCase:
        """Return the fully wired scoring use case."""
        return cast(ScoreDesignSystemUseCase, self.get("ScoreDesignSystemUseCase"))

    def get_reporter(self) -> "HealthReporter":
        """Return the health reporter."""
        return cast("HealthReporter", self.get("HealthReporter"))
