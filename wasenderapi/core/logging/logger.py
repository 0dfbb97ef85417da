"""
Rich-based logger with webhook context support for the WasenderAPI client.

Provides context-aware logging: messages logged while a webhook is being
handled are prefixed with the session and event type of that webhook.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from wasenderapi.core.config.settings import settings


class CompactFormatter(logging.Formatter):
    """Custom formatter that shortens long module names for better readability."""

    def format(self, record):
        if record.name.startswith("wasenderapi."):
            # wasenderapi.messaging.client.http_client -> client.http_client
            parts = record.name.split(".")
            if len(parts) > 2:
                record.name = ".".join(parts[-2:])

        return super().format(record)


_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim white",
    }
)
_console = Console(theme=_theme)


class ContextLogger:
    """
    Logger wrapper that adds webhook context to messages.

    Context is added as a message prefix instead of through the format string,
    so third-party handlers keep working with plain formats.
    """

    def __init__(
        self,
        logger: logging.Logger,
        session_id: str | None = None,
        event_type: str | None = None,
    ):
        self.logger = logger
        self.session_id = session_id or "---"
        self.event_type = event_type or "---"

    def _format_message(self, message: str) -> str:
        """Add context prefix to message."""
        from .context import get_current_event_context, get_current_session_context

        current_session = get_current_session_context() or self.session_id
        current_event = get_current_event_context() or self.event_type

        prefix = ""
        if current_session and current_session != "---":
            prefix += f"[S:{current_session}]"
        if current_event and current_event != "---":
            prefix += f"[E:{current_event}]"
        return f"{prefix} {message}" if prefix else message

    def debug(self, message: str, *args, **kwargs) -> None:
        self.logger.debug(self._format_message(message), *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self.logger.info(self._format_message(message), *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self.logger.warning(self._format_message(message), *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self.logger.error(self._format_message(message), *args, **kwargs)

    def critical(self, message: str, *args, **kwargs) -> None:
        self.logger.critical(self._format_message(message), *args, **kwargs)

    def exception(self, message: str, *args, **kwargs) -> None:
        self.logger.exception(self._format_message(message), *args, **kwargs)

    def bind(self, **kwargs) -> ContextLogger:
        """
        Create a new ContextLogger with additional or updated context.

        Args:
            **kwargs: ``session_id`` and/or ``event_type``

        Returns:
            New ContextLogger instance with updated context

        Example:
            logger.bind(session_id="42").info("QR code refreshed")
        """
        return ContextLogger(
            self.logger,
            session_id=kwargs.get("session_id", self.session_id),
            event_type=kwargs.get("event_type", self.event_type),
        )


def setup_logging(
    *,
    level: str = "INFO",
    mode: str = "PROD",
    log_dir: str | None = None,
    console_fmt: str | None = None,
    file_fmt: str | None = None,
) -> None:
    """
    Initialize the root logger with Rich formatting.

    Parameters
    ----------
    level : str
        Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
    mode : str
        "DEV" creates daily log files + console; anything else → console only
    log_dir : str, optional
        Directory for log files (DEV mode only)
    console_fmt : str, optional
        Console format string
    file_fmt : str, optional
        File format string
    """
    lvl = level.upper()
    lvl = lvl if lvl in ("DEBUG", "INFO", "WARNING", "ERROR") else "INFO"

    # RichHandler already shows level and time
    console_format = console_fmt or "[%(name)s] %(message)s"
    file_format = file_fmt or "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    rich_handler = RichHandler(
        console=_console,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        show_time=True,
        show_level=True,
        markup=False,
    )
    rich_handler.setFormatter(CompactFormatter(console_format))

    handlers: list[logging.Handler] = [rich_handler]

    if mode.upper() == "DEV" and log_dir:
        os.makedirs(log_dir, exist_ok=True)
        logfile = os.path.join(log_dir, f"wasenderapi_{datetime.now():%Y%m%d}.log")
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(CompactFormatter(file_format))
        handlers.append(file_handler)
        _console.print(f"[green]DEV mode:[/] console + file → {logfile}")

    logging.basicConfig(level=lvl, handlers=handlers, force=True)

    logging.getLogger("wasenderapi.logging").info(f"Logging initialized ({lvl})")


def setup_app_logging() -> None:
    """Initialize logging from the environment settings."""
    setup_logging(
        level=settings.log_level,
        mode="DEV" if settings.is_development else "PROD",
        log_dir=settings.log_dir if settings.is_development else None,
    )


def get_logger(name: str) -> ContextLogger:
    """
    Get a logger that automatically uses the webhook context variables.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextLogger instance
    """
    from .context import get_current_event_context, get_current_session_context

    return ContextLogger(
        logging.getLogger(name),
        session_id=get_current_session_context(),
        event_type=get_current_event_context(),
    )
