#!/usr/bin/env python3
"""Terminal colours and logging setup."""

import logging
import os
import sys
from typing import Optional, TextIO


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    GREY = "\033[90m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    MAGENTA = "\033[35m"

    @staticmethod
    def background(color: str) -> str:
        """Convert foreground color to background color."""
        return color.replace("[3", "[4", 1)

    @staticmethod
    def enabled(stream: Optional[TextIO] = None) -> bool:
        """Colour only real terminals, and never when NO_COLOR is set."""
        stream = stream or sys.stderr
        return "NO_COLOR" not in os.environ and hasattr(stream, "isatty") and stream.isatty()


class CustomFormatter(logging.Formatter):
    """Four-letter coloured level tags with a short timestamp."""

    TAGS = {
        logging.DEBUG: ("DEBG", Colors.CYAN),
        logging.INFO: ("INFO", Colors.GREEN),
        logging.WARNING: ("WARN", Colors.YELLOW),
        logging.ERROR: ("ERRR", Colors.RED),
        logging.CRITICAL: ("CRIT", Colors.background(Colors.RED)),
    }

    def __init__(self, color: bool = True):
        super().__init__(datefmt="%H:%M")
        self.FORMATS = {}
        for level, (tag, color_code) in self.TAGS.items():
            if color:
                self.FORMATS[level] = (
                    f"{Colors.GREY}%(asctime)s{Colors.RESET} "
                    f"{Colors.BOLD}{color_code}{tag}{Colors.RESET} %(message)s"
                )
            else:
                self.FORMATS[level] = f"%(asctime)s {tag} %(message)s"

    def format(self, record: logging.LogRecord) -> str:
        log_fmt = self.FORMATS.get(record.levelno, self.FORMATS[logging.INFO])
        formatter = logging.Formatter(log_fmt, datefmt=self.datefmt)
        return formatter.format(record)


def setup_logging(verbose: bool = False, silent: bool = False, stream: Optional[TextIO] = None):
    """Configure logging with custom formatting."""
    if silent:
        logging.disable(logging.CRITICAL)
        return
    logging.disable(logging.NOTSET)

    stream = stream or sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(CustomFormatter(color=Colors.enabled(stream)))

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, handlers=[handler], force=True)
