"""Terminal reporter implementation - lives in infrastructure (imports rich)."""

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from design_health.domain.entities import CategoryResult, HealthReport

SEVERITY_STYLES = {
    "pass": "green",
    "warning": "yellow",
    "fail": "red",
    "info": "dim",
}

STATUS_STYLES = {
    "good": "green",
    "needs-work": "yellow",
    "poor": "red",
}

STATUS_LEVEL_STYLES = {
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
}


class TerminalHealthReporter:
    """Renders health reports as rich tables, JSON, or markdown."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def render_status(self, message: str, level: str = "info") -> None:
        """Render a one-line status message."""
        style = STATUS_LEVEL_STYLES.get(level, "white")
        self._console.print(f"[{style}]{escape(message)}[/{style}]")

    def render_health_report(self, report: "HealthReport", format: str = "terminal") -> None:
        """Render the full report: score banner, category table, findings, summary."""
        if format == "json":
            print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
            return
        if format == "markdown":
            print(self.to_markdown(report))
            return

        # ── 1. Score Banner ──
        status = report.status.value
        color = STATUS_STYLES.get(status, "white")
        meta = report.meta
        self._console.print(
            Panel(
                f"[bold {color}]{report.overall}/100[/bold {color}]  [{color}]{status}[/{color}]",
                title="Design System Health",
                subtitle=(
                    f"{meta.component_count} components ({meta.component_set_count} sets, "
                    f"{meta.variant_count} variants)  {meta.variable_count} variables  "
                    f"{meta.collection_count} collections"
                ),
            )
        )

        # ── 2. Categories ──
        table = Table(title="Categories", show_header=True)
        table.add_column("Category", style="cyan")
        table.add_column("Score", justify="right")
        table.add_column("Weight", justify="right")
        table.add_column("Pass", justify="right", style="green")
        table.add_column("Warn", justify="right", style="yellow")
        table.add_column("Fail", justify="right", style="red")
        for category in report.categories:
            counts = self._severity_counts(category)
            table.add_row(
                escape(category.label),
                str(category.score),
                f"{category.weight:.0%}",
                str(counts["pass"]),
                str(counts["warning"]),
                str(counts["fail"]),
            )
        self._console.print(table)

        # ── 3. Findings needing attention ──
        findings = Table(title="Findings", show_header=True)
        findings.add_column("Sev")
        findings.add_column("Category", style="cyan")
        findings.add_column("Finding")
        findings.add_column("Score", justify="right")
        findings.add_column("Examples")
        rows = 0
        for category in report.categories:
            for finding in category.findings:
                if not finding.is_actionable and finding.severity.value != "info":
                    continue
                style = SEVERITY_STYLES[finding.severity.value]
                findings.add_row(
                    f"[{style}]{finding.severity.value.upper()}[/{style}]",
                    escape(category.short_label),
                    escape(finding.label),
                    str(finding.score),
                    escape(", ".join(finding.examples)) or "-",
                )
                rows += 1
        if rows:
            self._console.print(findings)

        # ── 4. Summary ──
        if report.summary:
            self._console.print("[bold]Top issues[/bold]")
            for line in report.summary:
                self._console.print(f"  • {escape(line)}")

    @staticmethod
    def _severity_counts(category: "CategoryResult") -> dict[str, int]:
        counts = {"pass": 0, "warning": 0, "fail": 0, "info": 0}
        for finding in category.findings:
            counts[finding.severity.value] += 1
        return counts

    @staticmethod
    def to_markdown(report: "HealthReport") -> str:
        """Health report as markdown tables."""
        lines = [
            f"## Design System Health: {report.overall}/100 ({report.status.value})",
            "",
            "### Categories",
            "| Category | Score | Weight |",
            "|----------|-------|--------|",
        ]
        for category in report.categories:
            lines.append(f"| {category.label} | {category.score} | {category.weight:.0%} |")
        lines += [
            "",
            "### Findings",
            "| Category | Finding | Severity | Score | Details |",
            "|----------|---------|----------|-------|---------|",
        ]
        for category in report.categories:
            for finding in category.findings:
                details = finding.details.replace("|", ",").replace("\n", " ")
                lines.append(
                    f"| {category.short_label} | {finding.label} | {finding.severity.value} "
                    f"| {finding.score} | {details} |"
                )
        if report.summary:
            lines += ["", "### Summary"]
            lines += [f"- {line}" for line in report.summary]
        return "\n".join(lines)
