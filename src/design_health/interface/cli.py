"""CLI entry points for design-health - Thin Controller using Typer."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

import typer

from design_health.domain.entities import InvalidSnapshotError, SnapshotLoadError
from design_health.domain.protocols import GuidanceServiceProtocol, SnapshotGatewayProtocol
from design_health.interface.reporters import HealthReporter

if TYPE_CHECKING:
    from design_health.use_cases.score_design_system import ScoreDesignSystemUseCase

# Exit code for unreadable or malformed input; 1 is reserved for --fail-under.
EXIT_INPUT_ERROR = 2


class OutputFormat(str, Enum):
    TERMINAL = "terminal"
    JSON = "json"
    MARKDOWN = "markdown"


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    score_use_case: "ScoreDesignSystemUseCase"
    snapshot_gateway: SnapshotGatewayProtocol
    reporter: HealthReporter
    guidance_service: GuidanceServiceProtocol


class CLIAppFactory:
    """Creates the Typer app. No top-level functions."""

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies. No Service Locator."""
        app = typer.Typer(
            name="design-health",
            help="Score a design-system snapshot: naming, tokens, components, "
            "accessibility, consistency and coverage.",
            no_args_is_help=True,
        )

        @app.command()
        def score(
            snapshot: str = typer.Argument(..., help="Snapshot JSON file ('-' for stdin)"),  # noqa: B008
            output_format: OutputFormat = typer.Option(
                OutputFormat.TERMINAL, "--format", "-f", help="Output format"),
            fail_under: Optional[int] = typer.Option(
                None, "--fail-under", min=0, max=100,
                help="Exit with status 1 when the overall score is below this value"),
        ) -> None:
            """Score a snapshot and render the health report."""
            try:
                raw = deps.snapshot_gateway.load(snapshot)
                report = deps.score_use_case.execute(raw)
            except (SnapshotLoadError, InvalidSnapshotError) as exc:
                deps.reporter.render_status(str(exc), level="error")
                raise typer.Exit(code=EXIT_INPUT_ERROR) from exc

            deps.reporter.render_health_report(report, format=output_format.value)
            if fail_under is not None and report.overall < fail_under:
                deps.reporter.render_status(
                    f"Overall score {report.overall} is below --fail-under {fail_under}.",
                    level="warning",
                )
                raise typer.Exit(code=1)

        @app.command()
        def explain(
            finding_id: Optional[str] = typer.Argument(
                None, help="Finding id (e.g. token-alias-usage); omit to list all"),
        ) -> None:
            """Explain what a finding measures. No id = list all finding ids."""
            registry = deps.guidance_service.get_registry()
            if finding_id is None:
                for fid in sorted(registry):
                    entry = registry[fid]
                    typer.echo(f"{fid:<34} {entry.get('display_name', '')}")
                return
            entry = deps.guidance_service.get_entry(finding_id)
            if entry is None:
                deps.reporter.render_status(f"Unknown finding id: {finding_id}", level="error")
                raise typer.Exit(code=EXIT_INPUT_ERROR)
            typer.echo(f"{entry.get('display_name', finding_id)} ({finding_id})")
            if entry.get("category"):
                typer.echo(f"Category: {entry['category']}")
            typer.echo("")
            typer.echo(deps.guidance_service.get_tooltip(finding_id) or "")

        return app
