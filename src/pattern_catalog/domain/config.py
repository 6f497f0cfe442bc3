"""Catalog settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from pattern_catalog.domain.constants import DEFAULT_SETTINGS, LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


class ConfigurationLoader:
    """
    Immutable configuration for the catalog runner.

    Created by Infrastructure from the [tool.pattern-catalog] table. Domain does
    not read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    """

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._config: dict[str, object] = dict(config_dict or {})
        if self._config:
            self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about unknown keys and values of the wrong type. Never raises."""
        for key, value in config.items():
            if key not in DEFAULT_SETTINGS:
                logger.warning(
                    "Configuration Warning: unknown key '%s' in [tool.pattern-catalog] ignored.", key)
                continue
            expected = type(DEFAULT_SETTINGS[key])
            if not isinstance(value, expected):
                logger.warning(
                    "Configuration Warning: '%s' should be %s, got %s. Using default.",
                    key, expected.__name__, type(value).__name__)

    def _get(self, key: str) -> object:
        default = DEFAULT_SETTINGS[key]
        value = self._config.get(key, default)
        if not isinstance(value, type(default)):
            return default
        return value

    @property
    def config(self) -> dict[str, object]:
        """Return the raw loaded configuration."""
        return dict(self._config)

    @property
    def show_output(self) -> bool:
        """Include captured output lines in reports."""
        return bool(self._get("show_output"))

    @property
    def banner(self) -> bool:
        """Print the startup banner before a run."""
        return bool(self._get("banner"))

    @property
    def log_level(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        name = str(self._get("log_level")).upper()
        level = logging.getLevelName(name)
        if isinstance(level, int):
            return level
        logger.warning("Configuration Warning: unknown log_level '%s'.", name)
        return logging.WARNING

    @property
    def exclude(self) -> frozenset[str]:
        """Example names skipped by 'run'."""
        raw = self._get("exclude")
        if isinstance(raw, list):
            return frozenset(str(x) for x in raw if isinstance(x, str))
        return frozenset()
