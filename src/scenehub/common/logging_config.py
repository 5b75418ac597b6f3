"""
Colored console logging for SceneHub.

Log levels are colored so that denied writes (WARNING) and failures (ERROR)
stand out in a terminal. Server and HTTP-stack loggers get their names
highlighted.
"""

import logging
import os
import sys
from typing import Optional


RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
CYAN = "\033[36m"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors the level name and highlights server loggers.

    - DEBUG: cyan
    - INFO: green
    - WARNING: yellow
    - ERROR: red
    - CRITICAL: bold red
    - Logger names from the HTTP stack (scenehub.server, uvicorn, fastapi): blue
    """

    LEVEL_COLORS = {
        logging.DEBUG: CYAN,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD + RED,
    }

    SERVER_KEYWORDS = ("scenehub.server", "uvicorn", "fastapi", "starlette")

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        use_colors: bool = True,
    ):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and self._supports_color()

    @staticmethod
    def _supports_color() -> bool:
        if os.environ.get("NO_COLOR"):
            return False
        if os.environ.get("FORCE_COLOR"):
            return True
        if not hasattr(sys.stdout, "isatty") or not sys.stdout.isatty():
            return False
        if sys.platform == "win32":
            return bool(os.environ.get("ANSICON") or os.environ.get("WT_SESSION"))
        return True

    def _is_server_log(self, record: logging.LogRecord) -> bool:
        name = record.name.lower()
        return any(keyword in name for keyword in self.SERVER_KEYWORDS)

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        levelname, name = record.levelname, record.name
        record.levelname = f"{self.LEVEL_COLORS.get(record.levelno, '')}{levelname}{RESET}"
        if self._is_server_log(record):
            record.name = f"{BLUE}{name}{RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname, record.name = levelname, name


def setup_colored_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    use_colors: bool = True,
) -> None:
    """
    Install a colored stdout handler on the root logger.

    Existing root handlers are removed so repeated calls do not duplicate output.

    Example:
        >>> from scenehub.common.logging_config import setup_colored_logging
        >>> setup_colored_logging(level=logging.DEBUG)
    """
    formatter = ColoredFormatter(
        fmt=format_string or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT,
        use_colors=use_colors,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def parse_log_level(value: str) -> int:
    """Map a level name such as "debug" to its logging constant."""
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value}")
    return level
