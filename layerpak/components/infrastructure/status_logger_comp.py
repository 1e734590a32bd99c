"""Status logger component.

Consistent, human readable build output for layer contributions.
Contributors receive a logger explicitly; there is no process-wide default
instance. Everything rendered to the console is also forwarded to the stdlib
``logging`` logger ``layerpak.status`` so host pipelines can capture it.

Contributors emit ``rich.text.Text`` messages: styled when rendered by
StatusLogger, plain text for any other sink (``str(message)``).
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from rich.console import Console
from rich.text import Text

logger = logging.getLogger("layerpak.status")

# Color scheme constants
COLOR_NAME = "blue"
COLOR_REUSE = "green"
COLOR_CONTRIBUTE = "yellow"
COLOR_DEBUG = "bright_black"

_LEVELS = {"DEBUG": logging.DEBUG, "INFO": logging.INFO, "WARNING": logging.WARNING, "ERROR": logging.ERROR}

StatusMessage = str | Text


class StatusSink(Protocol):
    """What contributors need from a logger."""

    def header(self, message: StatusMessage) -> None: ...

    def body(self, message: StatusMessage) -> None: ...

    def debug(self, message: StatusMessage) -> None: ...


class StatusLogger:
    """
    Rich rendered status output.

    ``Text`` messages keep their styles. Plain ``str`` messages may contain rich
    markup; callers escape untrusted text with ``rich.markup.escape`` before
    embedding it.
    """

    def __init__(self, console: Console | None = None, level: str = "INFO") -> None:
        self.console = console or Console(highlight=False)
        self.level = _LEVELS.get(level.upper(), logging.INFO)

    @classmethod
    def from_config(cls, cfg: dict[str, Any]) -> StatusLogger:
        """Build a logger honoring ``log_level`` and ``color`` config keys."""
        console = Console(highlight=False, no_color=not cfg.get("color", True))
        return cls(console=console, level=str(cfg.get("log_level", "INFO")))

    @property
    def is_debug_enabled(self) -> bool:
        return self.level <= logging.DEBUG

    def header(self, message: StatusMessage) -> None:
        """Print a top level status line."""
        if self.level > logging.INFO:
            return
        self.console.print(_styled(message, "bold"))
        logger.info(_plain(message))

    def body(self, message: StatusMessage) -> None:
        """Print an indented detail line."""
        if self.level > logging.INFO:
            return
        self.console.print(Text.assemble("  ", _styled(message)))
        logger.info(_plain(message))

    def debug(self, message: StatusMessage) -> None:
        if not self.is_debug_enabled:
            return
        self.console.print(Text.assemble("  ", _styled(message, COLOR_DEBUG)))
        logger.debug(_plain(message))


class NullStatusLogger:
    """Discards all status output."""

    def header(self, message: StatusMessage) -> None:
        pass

    def body(self, message: StatusMessage) -> None:
        pass

    def debug(self, message: StatusMessage) -> None:
        pass


def _styled(message: StatusMessage, style: str = "") -> Text:
    if isinstance(message, Text):
        text = message.copy()
        if style:
            text.stylize(style)
        return text
    return Text.from_markup(message, style=style)


def _plain(message: StatusMessage) -> str:
    """Strip styles and rich markup for the stdlib log record."""
    if isinstance(message, Text):
        return message.plain
    return Text.from_markup(message).plain
