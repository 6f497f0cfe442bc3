"""
Catalog constants: banner art, defaults, exit codes.
"""

from enum import IntEnum

_CYAN: str = "\033[36m"
_RESET: str = "\033[0m"
_CATALOG_ART = r"""
  ___      _   _                    ___      _        _
 | _ \__ _| |_| |_ ___ _ _ _ _     / __|__ _| |_ __ _| |___  __ _
 |  _/ _` |  _|  _/ -_) '_| ' \   | (__/ _` |  _/ _` | / _ \/ _` |
 |_| \__,_|\__|\__\___|_| |_||_|   \___\__,_|\__\__,_|_\___/\__, |
                                                            |___/
"""
CATALOG_BANNER = _CYAN + _CATALOG_ART + _RESET

CONFIG_SECTION = "pattern-catalog"

LOGGER_NAME = "pattern_catalog"

# Keys accepted in [tool.pattern-catalog]; the default's type is the expected type.
DEFAULT_SETTINGS: dict[str, object] = {
    "show_output": False,
    "log_level": "WARNING",
    "banner": True,
    "exclude": [],
}

STATUS_PASS = "PASS"
STATUS_FAIL = "FAIL"


class ExitCode(IntEnum):
    """Process exit codes returned by the CLI."""
    OK = 0
    FAILURES = 1
    USAGE = 2
    STARTUP = 3
