"""Modified version of LogFormatter from Tornado (Copyright 2009 Facebook)
Original:
    https://github.com/tornadoweb/tornado/blob/1db5b45918da8303d2c6958ee03dbbd5dc2709e9/tornado/log.py#L81-L208
Licensed under:
    Apache-2.0 License (https://github.com/tornadoweb/tornado/blob/1db5b45918da8303d2c6958ee03dbbd5dc2709e9/LICENSE)
"""

# Internal
import os
import sys
from typing import Dict, Literal, Optional
from logging import INFO, DEBUG, ERROR, WARNING, CRITICAL, Formatter, LogRecord

_ANSI_RESET = "\033[0m"


def _stderr_supports_color() -> bool:
    if "NO_COLOR" in os.environ or os.name == "nt":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


class ConsoleFormatter(Formatter):
    """Colored, timestamped records with continuation lines indented"""

    DEFAULT_FORMAT = (
        "%(color)s[%(name)s]-[%(levelname)s]-[%(asctime)s]%(end_color)s\n%(message)s"
    )
    DEFAULT_COLORS = {
        DEBUG: 4,  # Blue
        INFO: 2,  # Green
        WARNING: 3,  # Yellow
        ERROR: 1,  # Red
        CRITICAL: 5,  # Magenta
    }
    DEFAULT_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

    def __init__(
        self,
        fmt: str = DEFAULT_FORMAT,
        datefmt: str = DEFAULT_DATE_FORMAT,
        style: Literal["%", "{", "$"] = "%",
        colors: Optional[Dict[int, int]] = DEFAULT_COLORS,
    ) -> None:
        super().__init__(fmt, datefmt, style)
        self._colors: Dict[int, str] = (
            {level: f"\033[2;3{code}m" for level, code in colors.items()}
            if colors and _stderr_supports_color()
            else {}
        )

    def format(self, record: LogRecord) -> str:
        color = self._colors.get(record.levelno, "")
        record.color = color
        record.end_color = _ANSI_RESET if color else ""

        formatted = super().format(record)
        return formatted.replace("\n", "\n    ")


__all__ = ("ConsoleFormatter",)
