"""Custom structlog processors and the console renderer."""

import os
import threading

from django.conf import settings

from colorama import Fore, Style, just_fix_windows_console
from structlog.typing import EventDict, WrappedLogger

from core.logging.context import get_request_id

just_fix_windows_console()

LEVEL_COLORS = {
    "DEBUG": Fore.CYAN,
    "INFO": Fore.GREEN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.RED + Style.BRIGHT,
}

# Keys shown in the console prefix or only useful in the JSON file
_CONSOLE_HIDDEN_KEYS = frozenset(
    {
        "level",
        "timestamp",
        "request_id",
        "logger",
        "event",
        "process_id",
        "thread_id",
        "service_name",
        "environment",
    }
)


def add_request_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add the current request id, when there is one."""
    request_id = get_request_id()
    if request_id:
        event_dict.setdefault("request_id", request_id)
    return event_dict


def add_service_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add ``service_name`` and ``environment`` from the Django settings."""
    event_dict["service_name"] = getattr(settings, "SERVICE_NAME", "shop-service")
    event_dict["environment"] = getattr(settings, "ENVIRONMENT", "development")
    return event_dict


def add_process_info(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add ``process_id`` and ``thread_id``; gunicorn runs several workers."""
    event_dict["process_id"] = os.getpid()
    event_dict["thread_id"] = threading.get_ident()
    return event_dict


def console_renderer(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> str:
    """Render an event as one colored console line.

    Format: ``[LEVEL] timestamp | request_id | logger | event key=value ...``

    Args:
        _logger: The wrapped logger instance (unused).
        _method_name: The logger method name (unused).
        event_dict: The event dictionary to render.

    Returns:
        The formatted line.
    """
    level = str(event_dict.get("level", "info")).upper()
    color = LEVEL_COLORS.get(level, Fore.WHITE)

    line = (
        f"{color}[{level:<8}]{Style.RESET_ALL} "
        f"{event_dict.get('timestamp', '')} | "
        f"{Fore.MAGENTA}{event_dict.get('request_id', '-')}{Style.RESET_ALL} | "
        f"{Fore.BLUE}{event_dict.get('logger', 'root')}{Style.RESET_ALL} | "
        f"{event_dict.get('event', '')}"
    )

    extras = " ".join(
        f"{key}={value}"
        for key, value in event_dict.items()
        if key not in _CONSOLE_HIDDEN_KEYS
    )
    if extras:
        line += f" {Fore.YELLOW}{extras}{Style.RESET_ALL}"
    return line
