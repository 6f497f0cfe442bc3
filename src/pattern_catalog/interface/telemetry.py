"""
Pattern Catalog: Telemetry
Console status messages and log forwarding.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from pattern_catalog.domain.constants import CATALOG_BANNER, LOGGER_NAME


class ProjectTelemetry:
    """
    Implements TelemetryPort.

    step() and handshake() print to a rich Console and are logged at INFO.
    warning(), error() and debug() go through the 'pattern_catalog' logger only,
    which configure_logging() attaches to stderr.
    """

    def __init__(
        self,
        project_name: str,
        color: str,
        welcome_msg: str,
    ) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome_msg = welcome_msg
        self.console = Console(highlight=False)
        self.logger = logging.getLogger(LOGGER_NAME)

    @staticmethod
    def configure_logging(level: int) -> None:
        """Attach a stderr RichHandler to the package logger (once) and set its level."""
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(level)
        if not any(isinstance(h, RichHandler) for h in logger.handlers):
            handler = RichHandler(
                console=Console(stderr=True),
                show_time=False,
                show_path=False,
                markup=False,
            )
            logger.addHandler(handler)
            logger.propagate = False

    def _tag(self) -> Text:
        return Text(f"[{self.project_name}] ", style=f"bold {self.color}")

    def handshake(self) -> None:
        """Print the banner and welcome line."""
        self.logger.info("%s: %s", self.project_name, self.welcome_msg)
        self.console.print(Text.from_ansi(CATALOG_BANNER))
        self.console.print(self._tag() + Text(self.welcome_msg))

    def step(self, message: str) -> None:
        self.logger.info(message)
        self.console.print(self._tag() + Text(message), soft_wrap=True)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)
