"""Response envelope returned by every API call.

Wire shape (field names are fixed by the server):

    { success, statusCode, message, module, data?, error?: {type, code, details},
      timestamp, requestId? }

``data`` is populated only when ``success`` is true and ``error`` only when it
is false. The server is trusted to uphold this; envelopes synthesized locally
by the client are built through ``ApiResponse.failure`` which always does.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_serializer

from educonsole.errors import ApiError
from educonsole.models.common import ListFilters, WireModel

T = TypeVar("T")

DEFAULT_ERROR_MESSAGE = "An error occurred"
NETWORK_ERROR_CODE = "NETWORK_ERROR"


class ModuleName(str, Enum):
    """Server subsystem a response is attributed to."""

    # Core system
    APP = "APP"
    SYSTEM = "SYSTEM"
    CORE = "CORE"
    API = "API"
    BASE = "BASE"
    UNKNOWN = "UNKNOWN"
    PUBLIC = "PUBLIC"

    # Authentication & authorization
    AUTH = "AUTH"
    RBAC = "RBAC"
    USER = "USER"
    ROLE = "ROLE"
    PERMISSION = "PERMISSION"
    RESOURCE = "RESOURCE"

    # People
    EMPLOYEE = "EMPLOYEE"
    STUDENT = "STUDENT"

    # Organizations & centers
    ORGANIZATION = "ORGANIZATION"
    CENTER = "CENTER"

    # Courses
    COURSE = "COURSE"
    COHORT = "COHORT"
    CLASS = "CLASS"

    # Enrollment & learning
    ENROLLMENT = "ENROLLMENT"
    ENQUIRY = "ENQUIRY"

    # Feedback & payments
    FEEDBACK = "FEEDBACK"
    PAYMENT = "PAYMENT"

    # Monitoring
    AUDIT_LOG = "AUDIT_LOG"
    NOTIFICATION = "NOTIFICATION"
    WORKER = "WORKER"

    # Legacy
    TODO = "TODO"


class ErrorType(str, Enum):
    """Error classification carried in ``error.type``."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    ACCESS_ERROR = "ACCESS_ERROR"
    BUSINESS_ERROR = "BUSINESS_ERROR"
    SYSTEM_ERROR = "SYSTEM_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    TECHNICAL_ERROR = "TECHNICAL_ERROR"


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class ErrorInfo(WireModel):
    """Error details, present only on failed envelopes."""

    type: ErrorType
    code: str
    details: Any = None

    @field_serializer("details")
    def _serialize_details(self, details: Any) -> Any:
        # Locally synthesized failures carry the raw exception.
        if isinstance(details, BaseException):
            return repr(details)
        return details


class ApiResponse(WireModel, Generic[T]):
    """JSON envelope for all API responses."""

    success: bool
    status_code: int
    message: str = ""
    module: ModuleName = ModuleName.UNKNOWN
    data: T | None = None
    error: ErrorInfo | None = None
    timestamp: str = Field(default_factory=_utc_timestamp)
    request_id: str | None = None

    @classmethod
    def failure(
        cls,
        message: str,
        *,
        status_code: int = 500,
        module: ModuleName = ModuleName.APP,
        error_type: ErrorType = ErrorType.TECHNICAL_ERROR,
        code: str = NETWORK_ERROR_CODE,
        details: Any = None,
        request_id: str | None = None,
    ) -> ApiResponse[T]:
        """Build a failed envelope (``data`` absent, ``error`` populated)."""
        return cls(
            success=False,
            status_code=status_code,
            message=message,
            module=module,
            error=ErrorInfo(type=error_type, code=code, details=details),
            request_id=request_id,
        )

    def unwrap(self) -> T | None:
        """Return ``data`` or raise ``ApiError`` for a failed envelope."""
        if not self.success:
            raise ApiError.from_envelope(self)
        return self.data


class PaginatedData(WireModel, Generic[T]):
    """One page of rows: ``{data, total, page, limit, totalPages}``."""

    data: list[T] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10
    total_pages: int = 0


class PaginationQuery(ListFilters):
    """Generic pagination query (``page`` and ``limit`` default server-side)."""

    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search_term: str | None = None
    sort_order: str | None = None


# ---------------------------------------------------------------------------
# Type guards
# ---------------------------------------------------------------------------


def is_success(response: ApiResponse[Any]) -> bool:
    return response.success is True


def is_error(response: ApiResponse[Any]) -> bool:
    return not is_success(response)


def get_data(response: ApiResponse[T]) -> T | None:
    return response.data if is_success(response) else None


def get_error(response: ApiResponse[Any]) -> ErrorInfo | None:
    return response.error if is_error(response) else None


# ---------------------------------------------------------------------------
# Pagination normalization
# ---------------------------------------------------------------------------


def extract_page(
    response: ApiResponse[Any], items_key: str | None = None
) -> PaginatedData[Any] | None:
    """Normalize a list response into ``PaginatedData``.

    List endpoints are not consistent about nesting. Both of these are
    accepted as the envelope's ``data``:

    - ``{data: [...], total, page, limit, totalPages}``
    - ``{<items_key>: [...], pagination: {total, page, limit, totalPages}}``

    A bare list is treated as a single page. Returns None for failed
    envelopes or payloads in neither shape.
    """
    if not is_success(response):
        return None

    payload = response.data
    if isinstance(payload, PaginatedData):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(by_alias=True)

    if isinstance(payload, list):
        return PaginatedData(
            data=payload,
            total=len(payload),
            page=1,
            limit=len(payload),
            total_pages=1 if payload else 0,
        )
    if not isinstance(payload, dict):
        return None

    meta: dict[str, Any] = payload
    if items_key is not None and isinstance(payload.get(items_key), list):
        items = payload[items_key]
        meta = payload.get("pagination") or payload
    elif isinstance(payload.get("data"), list):
        items = payload["data"]
    else:
        candidates = [k for k, v in payload.items() if isinstance(v, list)]
        if len(candidates) != 1:
            return None
        items = payload[candidates[0]]
        meta = payload.get("pagination") or payload

    total = int(meta.get("total", len(items)))
    limit = int(meta.get("limit") or len(items) or 1)
    total_pages = meta.get("totalPages")
    if total_pages is None:
        total_pages = math.ceil(total / limit) if limit else 0

    return PaginatedData(
        data=items,
        total=total,
        page=int(meta.get("page", 1)),
        limit=limit,
        total_pages=int(total_pages),
    )
