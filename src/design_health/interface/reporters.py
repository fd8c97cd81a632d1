"""Protocol for health reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from design_health.domain.entities import HealthReport


class HealthReporter(Protocol):
    """Protocol for rendering health reports."""

    def render_health_report(self, report: "HealthReport", format: str = "terminal") -> None:
        """Render the health report. format: terminal, json, markdown."""
        ...

    def render_status(self, message: str, level: str = "info") -> None:
        """Render a one-line status or error message."""
        ...
