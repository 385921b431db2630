"""
Leveled, colored console messages for the command line driver.
The codec never writes here; only the driver does.
"""

from enum import Enum
from typing import Optional

from rich.console import Console
from rich.text import Text


class LogLevel(Enum):
    NORMAL = "normal"
    INFO = "info"
    ERROR = "error"
    EXCEPTION = "exception"


# (prefix, rich style) per level
LEVEL_STYLES = {
    LogLevel.NORMAL: ("[OK]", "green"),
    LogLevel.INFO: ("[INFO]", "yellow"),
    LogLevel.ERROR: ("[ERROR]", "red"),
    LogLevel.EXCEPTION: ("[ERROR]", "dark_red"),
}


class ConsoleLogger:
    """
    Prints "[OK]", "[INFO]" and "[ERROR]" prefixed lines in color.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console if console is not None else Console(highlight=False)

    def log(self, level: LogLevel, msg: str) -> None:
        prefix, style = LEVEL_STYLES[level]
        # Text is never parsed as markup, so "[OK]" prints literally.
        self.console.print(Text(f"{prefix} {msg}", style=style))

    def info(self, msg: str) -> None:
        self.log(LogLevel.INFO, msg)

    def success(self, msg: str) -> None:
        self.log(LogLevel.NORMAL, msg)

    def error(self, msg: str) -> None:
        self.log(LogLevel.ERROR, msg)

    def plain(self, msg: str) -> None:
        """Prints msg uncolored, e.g. a header table."""
        self.console.print(Text(msg))


# Global logger instance
console_logger = ConsoleLogger()


def log(level: LogLevel, msg: str) -> None:
    """
    Convenience function for logging with the global console logger.
    """
    console_logger.log(level, msg)
