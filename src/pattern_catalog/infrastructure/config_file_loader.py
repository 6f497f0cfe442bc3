"""Load [tool.pattern-catalog] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

from pattern_catalog.domain.constants import CONFIG_SECTION, LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml. No top-level functions.
    """

    @staticmethod
    def find_pyproject(start: Path | None = None) -> Path | None:
        """Walk up from start (default: CWD) and return the first pyproject.toml found."""
        current_path = (start or Path.cwd()).resolve()
        for candidate_dir in (current_path, *current_path.parents):
            config_file = candidate_dir / "pyproject.toml"
            if config_file.is_file():
                return config_file
        return None

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Return the [tool.pattern-catalog] table, or {} if absent or unreadable."""
        config_file = ConfigFileLoader.find_pyproject(start)
        if config_file is None:
            return {}
        try:
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
        except (OSError, toml_lib.TOMLDecodeError) as exc:
            logger.warning("Could not read %s: %s", config_file, exc)
            return {}
        tool_section = data.get("tool", {}) or {}
        section = tool_section.get(CONFIG_SECTION, {}) or {}
        if not isinstance(section, dict):
            logger.warning("[tool.%s] in %s is not a table; ignored.", CONFIG_SECTION, config_file)
            return {}
        logger.debug("Loaded [tool.%s] from %s", CONFIG_SECTION, config_file)
        return dict(section)
