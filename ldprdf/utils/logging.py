"""
Console and file logging for ldp-rdf.

Log lines look like::

    12:01:07 | WARNING  | [] container      | Skipping child /books/b2 ...

The middle column names the emitting component. On the console it carries
an icon and a color per component; the file variant is plain text.
Console output goes to stderr so that triples printed on stdout stay clean.
"""

import logging
import re
import sys
from pathlib import Path

ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")

RESET = "\033[0m"
BOLD = "\033[1m"

LEVEL_COLORS = {
    "DEBUG": "\033[37m",  # White
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[1;31m",  # Bold Red
}

# Logger name prefix -> (icon, color)
COMPONENT_THEMES = {
    "ldprdf.rdf.references": ("<-", "\033[1;35m"),  # Bold Magenta
    "ldprdf.rdf.container": ("[]", "\033[1;36m"),  # Bold Cyan
    "ldprdf.rdf.skolem": ("_:", "\033[1;33m"),  # Bold Yellow
    "ldprdf.rdf": ("->", "\033[1;32m"),  # Bold Green
    "ldprdf.store": ("db", "\033[1;34m"),  # Bold Blue
    "ldprdf.identifiers": ("id", "\033[1;38;5;220m"),  # Bold Gold
    "ldprdf.main": (">>", "\033[1;32m"),  # Bold Green
    "__main__": (">>", "\033[1;32m"),  # Bold Green
    "root": ("..", "\033[1;90m"),  # Dark Gray
}
FALLBACK_THEME = ("*", BOLD)


def strip_ansi_codes(text: str) -> str:
    """Remove ANSI escape codes such as [31m or [1;33m from text."""
    return ANSI_ESCAPE.sub("", text)


def theme_for(logger_name: str) -> tuple[str, str]:
    """Icon and color of the most specific component owning logger_name."""
    matches = [
        prefix
        for prefix in COMPONENT_THEMES
        if logger_name == prefix or logger_name.startswith(prefix + ".")
    ]
    if not matches:
        return FALLBACK_THEME
    return COMPONENT_THEMES[max(matches, key=len)]


class _LineFormatter(logging.Formatter):
    """Builds "time | level | component | message" lines, plus any traceback."""

    def format_level(self, record: logging.LogRecord) -> str:
        return f"{record.levelname:8}"

    def format_component(self, record: logging.LogRecord) -> str:
        return f"{record.name.split('.')[-1]:14}"

    def format_message(self, record: logging.LogRecord) -> str:
        return record.getMessage()

    def format(self, record):
        timestamp = self.formatTime(record, self.datefmt)
        line = (
            f"{timestamp} | {self.format_level(record)} | "
            f"{self.format_component(record)} | {self.format_message(record)}"
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class ColoredFormatter(_LineFormatter):
    """Console formatter: colors by level and by ldprdf component."""

    def format_level(self, record):
        color = LEVEL_COLORS.get(record.levelname, RESET)
        return f"{color}{record.levelname:8}{RESET}"

    def format_component(self, record):
        icon, color = theme_for(record.name)
        return f"{color}{icon} {super().format_component(record)}{RESET}"

    def format_message(self, record):
        message = record.getMessage()
        if record.levelno >= logging.WARNING:
            color = LEVEL_COLORS.get(record.levelname, RESET)
            message = f"{color}{message}{RESET}"
        return message


class PlainFormatter(_LineFormatter):
    """Plain text formatter for file logging (no ANSI codes)."""

    def format_message(self, record):
        return strip_ansi_codes(record.getMessage())


# Global file handler reference (to allow adding it later)
_file_handler: logging.FileHandler | None = None


def setup_colored_logging(level=logging.INFO, log_file: str | Path | None = None):
    """
    Route all logging to stderr through the ColoredFormatter.

    Args:
        level: Root logging level (default: INFO)
        log_file: Optional path to log file for persistent logging
    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter(datefmt="%H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.handlers = [console_handler]
    root_logger.setLevel(level)

    if log_file:
        add_file_handler(log_file, level)

    # rdflib logs plugin loading at INFO
    logging.getLogger("rdflib").setLevel(logging.WARNING)


def add_file_handler(log_file: str | Path, level=logging.DEBUG) -> logging.FileHandler:
    """
    Attach a plain-text file handler to the root logger, replacing any
    handler added earlier.

    Returns:
        The created FileHandler
    """
    global _file_handler

    remove_file_handler()

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    _file_handler = logging.FileHandler(str(log_path), mode="w", encoding="utf-8")
    _file_handler.setLevel(level)
    _file_handler.setFormatter(PlainFormatter(datefmt="%Y-%m-%d %H:%M:%S"))

    logging.getLogger().addHandler(_file_handler)
    logging.info("File logging enabled: %s", log_path)

    return _file_handler


def remove_file_handler() -> None:
    global _file_handler

    if _file_handler:
        logging.getLogger().removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None
