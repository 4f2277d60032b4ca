"""Typed async client for the education-services admin API."""

from educonsole.client import ApiClient
from educonsole.config import ConsoleSettings
from educonsole.console import AdminConsole
from educonsole.errors import ApiError, ConsoleError, ExportError
from educonsole.logging_config import configure_logging
from educonsole.models.envelope import ApiResponse, is_error, is_success
from educonsole.notifications import CallbackNotifier, LogNotifier, NullNotifier
from educonsole.tokens import FileTokenStore, MemoryTokenStore

__version__ = "0.1.0"

__all__ = [
    "AdminConsole",
    "ApiClient",
    "ApiError",
    "ApiResponse",
    "CallbackNotifier",
    "ConsoleError",
    "ConsoleSettings",
    "ExportError",
    "FileTokenStore",
    "LogNotifier",
    "MemoryTokenStore",
    "NullNotifier",
    "configure_logging",
    "is_error",
    "is_success",
]
