"""Error hierarchy for the console API layer.

``ApiClient.request`` never raises: every failure comes back as a failed
envelope. These exceptions exist for the few call sites that prefer raising,
namely ``ApiResponse.unwrap()`` and raw CSV exports via ``ApiClient.download``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from educonsole.models.envelope import ApiResponse


class ConsoleError(Exception):
    """Base error for all console-specific errors."""

    status_code: int = 500
    message: str = "Console error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class ApiError(ConsoleError):
    """A failed envelope surfaced as an exception.

    Carries the envelope itself plus its error classification so callers can
    branch on ``error_type`` / ``code`` without digging through ``details``.
    """

    message = "An error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int = 500,
        error_type: str | None = None,
        code: str | None = None,
        envelope: ApiResponse[Any] | None = None,
        **kwargs: object,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.error_type = error_type
        self.code = code
        self.envelope = envelope

    @classmethod
    def from_envelope(cls, envelope: ApiResponse[Any]) -> ApiError:
        error = envelope.error
        return cls(
            envelope.message or None,
            status_code=envelope.status_code,
            error_type=error.type.value if error is not None else None,
            code=error.code if error is not None else None,
            envelope=envelope,
        )


class ExportError(ConsoleError):
    """CSV export failed (transport error or non-2xx status)."""

    status_code = 502
    message = "Export failed"
