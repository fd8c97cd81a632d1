"""Load [tool.design-health] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

TOOL_KEY = "design-health"


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml. No top-level functions.
    """

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Walk up from `start` (default cwd) and return the [tool.design-health] table."""
        current_path = (start or Path.cwd()).resolve()
        while True:
            config_file = current_path / "pyproject.toml"
            if config_file.exists():
                return ConfigFileLoader.load_config_file(config_file)
            if current_path.parent == current_path:
                return {}
            current_path = current_path.parent

    @staticmethod
    def load_config_file(config_file: Path) -> dict[str, object]:
        """Read [tool.design-health] from one file; unreadable or invalid files yield {}."""
        try:
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
        except (OSError, toml_lib.TOMLDecodeError) as exc:
            logging.warning("Configuration Warning: could not read %s: %s", config_file, exc)
            return {}
        tool_section = data.get("tool", {}) or {}
        if not isinstance(tool_section, dict):
            logging.warning(
                "Configuration Warning: [tool] in %s is not a table; ignoring it.", config_file)
            return {}
        config_dict = tool_section.get(TOOL_KEY, {}) or tool_section.get("design_health", {})
        if not isinstance(config_dict, dict):
            logging.warning(
                "Configuration Warning: [tool.%s] in %s is not a table; ignoring it.",
                TOOL_KEY, config_file)
            return {}
        return config_dict
