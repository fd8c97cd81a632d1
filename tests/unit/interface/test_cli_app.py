"""Tests for the Typer app built by CLIAppFactory."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from design_health.domain.entities import SnapshotLoadError
from design_health.infrastructure.di.container import DesignHealthContainer
from design_health.interface import cli as cli_module
from design_health.interface.cli import EXIT_INPUT_ERROR, CLIAppFactory, CLIDependencies
from snapshot_factory import healthy_snapshot

runner = CliRunner()


def _deps(reporter: object | None = None, gateway: object | None = None) -> CLIDependencies:
    container = DesignHealthContainer(config_dict={})
    return CLIDependencies(
        score_use_case=container.get_score_use_case(),
        snapshot_gateway=gateway or container.get_snapshot_gateway(),
        reporter=reporter or container.get_reporter(),
        guidance_service=container.get_guidance_service(),
    )


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(healthy_snapshot()), encoding="utf-8")
    return path


class TestScoreCommand:
    def test_json_output(self, snapshot_file: Path) -> None:
        app = CLIAppFactory.create_app(_deps())
        result = runner.invoke(app, ["score", str(snapshot_file), "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["overall"] == 95
        assert len(data["categories"]) == 6

    def test_renders_through_reporter(self, snapshot_file: Path) -> None:
        reporter = MagicMock()
        app = CLIAppFactory.create_app(_deps(reporter))
        result = runner.invoke(app, ["score", str(snapshot_file), "-f", "markdown"])
        assert result.exit_code == 0
        report = reporter.render_health_report.call_args.args[0]
        assert report.overall == 95
        assert reporter.render_health_report.call_args.kwargs == {"format": "markdown"}

    def test_fail_under(self, snapshot_file: Path) -> None:
        reporter = MagicMock()
        app = CLIAppFactory.create_app(_deps(reporter))
        assert runner.invoke(app, ["score", str(snapshot_file), "--fail-under", "95"]).exit_code == 0
        result = runner.invoke(app, ["score", str(snapshot_file), "--fail-under", "96"])
        assert result.exit_code == 1
        reporter.render_status.assert_called_once()
        assert reporter.render_status.call_args.kwargs == {"level": "warning"}

    def test_missing_file(self, tmp_path: Path) -> None:
        reporter = MagicMock()
        app = CLIAppFactory.create_app(_deps(reporter))
        result = runner.invoke(app, ["score", str(tmp_path / "nope.json")])
        assert result.exit_code == EXIT_INPUT_ERROR
        reporter.render_health_report.assert_not_called()
        assert reporter.render_status.call_args.kwargs == {"level": "error"}

    def test_non_mapping_snapshot(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")
        reporter = MagicMock()
        result = runner.invoke(CLIAppFactory.create_app(_deps(reporter)), ["score", str(path)])
        assert result.exit_code == EXIT_INPUT_ERROR
        assert "mapping" in reporter.render_status.call_args.args[0]

    def test_stdin(self) -> None:
        app = CLIAppFactory.create_app(_deps())
        result = runner.invoke(
            app, ["score", "-", "--format", "json"], input=json.dumps(healthy_snapshot()))
        assert result.exit_code == 0
        assert json.loads(result.stdout)["status"] == "good"

    def test_any_gateway_is_accepted(self) -> None:
        gateway = MagicMock()
        gateway.load.return_value = healthy_snapshot()
        reporter = MagicMock()
        result = runner.invoke(
            CLIAppFactory.create_app(_deps(reporter, gateway)), ["score", "snap.json"])
        assert result.exit_code == 0
        gateway.load.assert_called_once_with("snap.json")
        assert reporter.render_health_report.call_args.args[0].overall == 95

    def test_gateway_load_error(self) -> None:
        gateway = MagicMock()
        gateway.load.side_effect = SnapshotLoadError("Cannot read snapshot snap.json")
        reporter = MagicMock()
        result = runner.invoke(
            CLIAppFactory.create_app(_deps(reporter, gateway)), ["score", "snap.json"])
        assert result.exit_code == EXIT_INPUT_ERROR
        assert reporter.render_status.call_args.args[0] == "Cannot read snapshot snap.json"


def test_cli_module_does_not_import_infrastructure() -> None:
    source = Path(cli_module.__file__).read_text(encoding="utf-8")
    assert "design_health.infrastructure" not in source


class TestExplainCommand:
    def test_lists_findings(self) -> None:
        result = runner.invoke(CLIAppFactory.create_app(_deps()), ["explain"])
        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 27
        assert lines[0].startswith("a11y-color-contrast")

    def test_single_finding(self) -> None:
        result = runner.invoke(CLIAppFactory.create_app(_deps()), ["explain", "token-tier-depth"])
        assert result.exit_code == 0
        assert "Token tier depth (token-tier-depth)" in result.stdout
        assert "Category: token-architecture" in result.stdout

    def test_unknown_finding(self) -> None:
        reporter = MagicMock()
        result = runner.invoke(CLIAppFactory.create_app(_deps(reporter)), ["explain", "nope"])
        assert result.exit_code == EXIT_INPUT_ERROR
        reporter.render_status.assert_called_once_with("Unknown finding id: nope", level="error")
