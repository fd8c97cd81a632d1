"""Tests for DesignHealthContainer."""

import unittest
from pathlib import Path
from unittest.mock import patch

from design_health.domain.config import ScoringConfig
from design_health.infrastructure.di.container import DesignHealthContainer
from design_health.infrastructure.gateways.snapshot_gateway import JsonSnapshotGateway
from design_health.infrastructure.reporters import TerminalHealthReporter
from design_health.use_cases.score_design_system import ScoreDesignSystemUseCase


class TestDesignHealthContainer(unittest.TestCase):
    def test_wires_defaults(self) -> None:
        container = DesignHealthContainer(config_dict={"summary_limit": 2})
        self.assertIsInstance(container.get_config(), ScoringConfig)
        self.assertEqual(container.get_config().summary_limit, 2)
        self.assertIsInstance(container.get_snapshot_gateway(), JsonSnapshotGateway)
        self.assertIsInstance(container.get_reporter(), TerminalHealthReporter)
        use_case = container.get_score_use_case()
        self.assertIsInstance(use_case, ScoreDesignSystemUseCase)
        self.assertEqual(len(use_case.scorers), 6)

    def test_singletons(self) -> None:
        container = DesignHealthContainer(config_dict={})
        self.assertIs(container.get_score_use_case(), container.get_score_use_case())
        self.assertIs(container.get("GuidanceService"), container.get_guidance_service())

    def test_unknown_key(self) -> None:
        with self.assertRaises(ValueError):
            DesignHealthContainer(config_dict={}).get("Nope")

    def test_register_override(self) -> None:
        container = DesignHealthContainer(config_dict={})
        container.register_singleton("HealthReporter", "stub")
        self.assertEqual(container.get_reporter(), "stub")

    def test_loads_config_from_filesystem_when_not_given(self) -> None:
        with patch(
            "design_health.infrastructure.di.container.ConfigFileLoader.load_config_from_fs",
            return_value={"summary_limit": 1},
        ) as loader:
            container = DesignHealthContainer()
        loader.assert_called_once_with()
        self.assertEqual(container.get_config().summary_limit, 1)


def test_config_from_pyproject(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.design-health]\nsummary_limit = 4\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert DesignHealthContainer().get_config().summary_limit == 4
