"""Scoring configuration. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from design_health.domain.entities import HealthStatus, Severity

# Any score at or above this value must be reported as a pass.
PASS_CEILING = 90


class ScoringConfig:
    """
    Immutable thresholds and tunables for the scoring engine.

    Created by Infrastructure from the [tool.design-health] table
    (ConfigFileLoader.load_config_from_fs()). Domain does not read the
    filesystem. Invalid values are reported with a warning and replaced by
    defaults so a bad config never aborts a run.
    """

    DEFAULTS: dict[str, int] = {
        "pass_threshold": 90,
        "warning_threshold": 50,
        "good_threshold": 90,
        "needs_work_threshold": 50,
        "empty_category_score": 100,
        "summary_limit": 5,
    }

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        """Set config once at construction. No mutable state after init."""
        self._config = dict(config_dict or {})
        values = {key: self._int_option(key, default) for key, default in self.DEFAULTS.items()}

        if values["pass_threshold"] > PASS_CEILING:
            logging.warning(
                "Configuration Warning: 'pass_threshold' %s exceeds %s; using %s.",
                values["pass_threshold"], PASS_CEILING, PASS_CEILING)
            values["pass_threshold"] = PASS_CEILING
        if values["warning_threshold"] > values["pass_threshold"]:
            logging.warning(
                "Configuration Warning: 'warning_threshold' must not exceed 'pass_threshold'; "
                "using defaults for both.")
            values["pass_threshold"] = self.DEFAULTS["pass_threshold"]
            values["warning_threshold"] = self.DEFAULTS["warning_threshold"]
        if values["needs_work_threshold"] > values["good_threshold"]:
            logging.warning(
                "Configuration Warning: 'needs_work_threshold' must not exceed 'good_threshold'; "
                "using defaults for both.")
            values["good_threshold"] = self.DEFAULTS["good_threshold"]
            values["needs_work_threshold"] = self.DEFAULTS["needs_work_threshold"]

        self._values = values

    def _int_option(self, key: str, default: int) -> int:
        """Read an integer option in [0, 100]; fall back to the default otherwise."""
        raw = self._config.get(key, default)
        if isinstance(raw, bool) or not isinstance(raw, int) or not 0 <= raw <= 100:
            logging.warning(
                "Configuration Warning: '%s' must be an integer in [0, 100], got %r; using %s.",
                key, raw, default)
            return default
        return raw

    @property
    def pass_threshold(self) -> int:
        """Lowest score reported as a pass."""
        return self._values["pass_threshold"]

    @property
    def warning_threshold(self) -> int:
        """Lowest score reported as a warning; anything below fails."""
        return self._values["warning_threshold"]

    @property
    def good_threshold(self) -> int:
        """Lowest overall score with status 'good'."""
        return self._values["good_threshold"]

    @property
    def needs_work_threshold(self) -> int:
        """Lowest overall score with status 'needs-work'; anything below is 'poor'."""
        return self._values["needs_work_threshold"]

    @property
    def empty_category_score(self) -> int:
        """Score of a category with no scorable findings (all data unavailable)."""
        return self._values["empty_category_score"]

    @property
    def summary_limit(self) -> int:
        """Maximum number of summary lines."""
        return self._values["summary_limit"]

    def severity_for(self, score: int) -> Severity:
        """Map a judged score to pass / warning / fail."""
        if score >= self.pass_threshold:
            return Severity.PASS
        if score >= self.warning_threshold:
            return Severity.WARNING
        return Severity.FAIL

    def status_for(self, overall: int) -> HealthStatus:
        """Map the overall score to good / needs-work / poor."""
        if overall >= self.good_threshold:
            return HealthStatus.GOOD
        if overall >= self.needs_work_threshold:
            return HealthStatus.NEEDS_WORK
        return HealthStatus.POOR
