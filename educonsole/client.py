"""Typed async HTTP client for the education-services REST API.

Every call goes through ``ApiClient.request``, which applies default headers,
the bearer token and a hard timeout, and always returns an ``ApiResponse``.
Transport errors, timeouts and unparseable bodies are folded into a
synthesized failure envelope (``TECHNICAL_ERROR`` / ``NETWORK_ERROR``), so
callers branch on ``success`` and never on exceptions.

Each failed envelope is reported to the configured ``Notifier`` exactly once.

SECURITY: Bearer tokens are never logged.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
import uuid
from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import to_jsonable_python

from educonsole.config.settings import ConsoleSettings
from educonsole.errors import ExportError
from educonsole.models.envelope import DEFAULT_ERROR_MESSAGE, ApiResponse
from educonsole.notifications import LogNotifier, Notifier
from educonsole.tokens import FileTokenStore, MemoryTokenStore, TokenStore

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error occurred"
TIMEOUT_MESSAGE = "Request timed out"
REQUEST_ID_HEADER = "X-Request-ID"

_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


def _stringify(value: Any) -> str:
    """Render a query parameter value the way the server expects it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def build_query(params: Mapping[str, Any] | None) -> str:
    """Encode *params* in insertion order. Values are not filtered."""
    if not params:
        return ""
    return urlencode([(key, _stringify(value)) for key, value in params.items()])


def _to_json_body(data: Any) -> str:
    if isinstance(data, BaseModel):
        payload = data.model_dump(by_alias=True, exclude_none=True, mode="json")
    else:
        payload = to_jsonable_python(data)
    return json.dumps(payload)


class ApiClient:
    """Single choke point for outbound API calls.

    Parameters
    ----------
    base_url:
        API origin (e.g. "http://localhost:4000"). Paths starting with
        ``http`` bypass it.
    default_headers:
        Headers sent on every call. Per-call headers override them.
    timeout:
        Hard per-request cutoff in seconds. A single attempt is made.
    notifier:
        Receives one message per failed envelope. Defaults to ``LogNotifier``.
    token_store:
        Where the bearer token is persisted. Defaults to in-memory.
    transport:
        Optional ``httpx`` transport, used by tests to serve calls in-process.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:4000",
        default_headers: Mapping[str, str] | None = None,
        timeout: float = 10.0,
        notifier: Notifier | None = None,
        token_store: TokenStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self._base_url = base_url.rstrip("/")
        self._headers = httpx.Headers(default_headers or {})
        self._timeout = timeout
        self._notifier: Notifier = notifier or LogNotifier()
        self._token_store: TokenStore = token_store or MemoryTokenStore()
        self._transport = transport

        self.refresh_auth_token()

    @classmethod
    def from_settings(
        cls,
        settings: ConsoleSettings,
        notifier: Notifier | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> ApiClient:
        token_store: TokenStore
        if settings.token_file:
            token_store = FileTokenStore(settings.token_file)
        else:
            token_store = MemoryTokenStore()
        return cls(
            base_url=settings.api_base_url,
            default_headers=settings.default_headers,
            timeout=settings.request_timeout_seconds,
            notifier=notifier,
            token_store=token_store,
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def headers(self) -> dict[str, str]:
        """Copy of the current default headers."""
        return dict(self._headers)

    def set_base_url(self, base_url: str) -> None:
        self._base_url = base_url.rstrip("/")

    def set_header(self, key: str, value: str) -> None:
        self._headers[key] = value

    def remove_header(self, key: str) -> None:
        self._headers.pop(key, None)

    # ------------------------------------------------------------------
    # Auth token
    # ------------------------------------------------------------------

    def set_auth_token(self, token: str) -> None:
        self._headers["Authorization"] = f"Bearer {token}"
        self._token_store.save(token)
        logger.info("Auth token set")

    def remove_auth_token(self) -> None:
        self._headers.pop("Authorization", None)
        self._token_store.clear()
        logger.info("Auth token removed")

    clear_auth_token = remove_auth_token

    def refresh_auth_token(self) -> str | None:
        """Re-read the stored token and sync the Authorization header."""
        token = self._token_store.load()
        if token:
            self._headers["Authorization"] = f"Bearer {token}"
        else:
            self._headers.pop("Authorization", None)
        return token

    def is_authenticated(self) -> bool:
        return "Authorization" in self._headers

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def _resolve(self, path: str) -> str:
        if path.startswith("http"):
            return path
        if not path.startswith("/"):
            path = "/" + path
        return f"{self._base_url}{path}"

    def _merge_headers(
        self, headers: Mapping[str, str] | None, has_body: bool
    ) -> httpx.Headers:
        if "Authorization" not in self._headers:
            self.refresh_auth_token()

        merged = httpx.Headers()
        if has_body:
            merged["Content-Type"] = "application/json"
        merged.update(self._headers)
        if headers:
            merged.update(headers)
        if REQUEST_ID_HEADER not in merged:
            merged[REQUEST_ID_HEADER] = str(uuid.uuid4())
        return merged

    async def _send(
        self,
        method: str,
        url: str,
        headers: httpx.Headers,
        content: str | None = None,
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            transport=self._transport, timeout=self._timeout
        ) as client:
            return await client.request(method, url, headers=headers, content=content)

    @staticmethod
    def _parse_envelope(body: Any, data_type: Any, url: str) -> ApiResponse[Any]:
        """Validate *body* as ``ApiResponse[data_type]``, keeping raw ``data`` if it does not fit.

        Only a body that is not an envelope at all raises.
        """
        if data_type is None:
            return ApiResponse[Any].model_validate(body)
        try:
            return ApiResponse[data_type].model_validate(body)
        except ValidationError as exc:
            envelope = ApiResponse[Any].model_validate(body)
            logger.warning(
                "Response data from %s does not match %s (%d errors); keeping raw data",
                url,
                getattr(data_type, "__name__", repr(data_type)),
                exc.error_count(),
            )
            return envelope

    async def request(
        self,
        method: str,
        path: str,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
        data_type: Any = None,
    ) -> ApiResponse[Any]:
        """Issue one call and return its envelope. Never raises.

        *data_type* parametrizes the envelope (``ApiResponse[data_type]``).
        When it is omitted, or the server's ``data`` does not fit it, ``data``
        is left as parsed JSON and the server's ``success`` and ``message``
        are kept.
        """
        method = method.upper()
        url = self._resolve(path)
        has_body = method in _BODY_METHODS and data is not None
        merged = self._merge_headers(headers, has_body)
        request_id = merged[REQUEST_ID_HEADER]
        envelope_type = ApiResponse[data_type] if data_type is not None else ApiResponse[Any]

        started = time.monotonic()
        http_status: int | None = None
        try:
            content = _to_json_body(data) if has_body else None
            response = await asyncio.wait_for(
                self._send(method, url, merged, content), timeout=self._timeout
            )
            http_status = response.status_code
            envelope = self._parse_envelope(response.json(), data_type, url)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            envelope = envelope_type.failure(
                TIMEOUT_MESSAGE, details=exc, request_id=request_id
            )
        except Exception as exc:
            envelope = envelope_type.failure(
                str(exc) or NETWORK_ERROR_MESSAGE, details=exc, request_id=request_id
            )

        duration_ms = round((time.monotonic() - started) * 1000, 1)
        extra = {
            "request_id": envelope.request_id or request_id,
            "method": method,
            "url": url,
            "status_code": envelope.status_code,
            "duration_ms": duration_ms,
            "api_module": envelope.module.value,
        }

        if envelope.success:
            logger.info(
                "%s %s -> %d (%.1f ms)",
                method,
                url,
                envelope.status_code,
                duration_ms,
                extra=extra,
            )
            return envelope

        extra["error_code"] = envelope.error.code if envelope.error else None
        logger.warning(
            "%s %s failed: status=%d http_status=%s message=%s",
            method,
            url,
            envelope.status_code,
            http_status,
            envelope.message,
            extra=extra,
        )
        self._notifier.error(envelope.message or DEFAULT_ERROR_MESSAGE)
        return envelope

    async def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        data_type: Any = None,
    ) -> ApiResponse[Any]:
        query = build_query(params)
        if query:
            path = f"{path}{'&' if '?' in path else '?'}{query}"
        return await self.request("GET", path, headers=headers, data_type=data_type)

    async def post(
        self,
        path: str,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
        data_type: Any = None,
    ) -> ApiResponse[Any]:
        return await self.request("POST", path, data, headers, data_type)

    async def put(
        self,
        path: str,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
        data_type: Any = None,
    ) -> ApiResponse[Any]:
        return await self.request("PUT", path, data, headers, data_type)

    async def patch(
        self,
        path: str,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
        data_type: Any = None,
    ) -> ApiResponse[Any]:
        return await self.request("PATCH", path, data, headers, data_type)

    async def delete(
        self,
        path: str,
        headers: Mapping[str, str] | None = None,
        data_type: Any = None,
    ) -> ApiResponse[Any]:
        return await self.request("DELETE", path, headers=headers, data_type=data_type)

    async def download(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        accept: str = "text/csv",
    ) -> bytes:
        """Fetch a raw (non-envelope) export body.

        Raises
        ------
        ExportError
            On a non-2xx status, a timeout or any failure to send the request.
        """
        query = build_query(params)
        if query:
            path = f"{path}{'&' if '?' in path else '?'}{query}"
        url = self._resolve(path)
        merged = self._merge_headers({"Accept": accept}, has_body=False)

        try:
            response = await asyncio.wait_for(
                self._send("GET", url, merged), timeout=self._timeout
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.warning(
                "Export timed out: %s", url, extra={"request_id": merged[REQUEST_ID_HEADER]}
            )
            raise ExportError(TIMEOUT_MESSAGE, url=url) from exc
        except Exception as exc:
            logger.warning(
                "Export failed: %s (%s)",
                url,
                exc,
                extra={"request_id": merged[REQUEST_ID_HEADER]},
            )
            raise ExportError(str(exc) or NETWORK_ERROR_MESSAGE, url=url) from exc

        if not response.is_success:
            logger.warning(
                "Export failed: %s -> %d",
                url,
                response.status_code,
                extra={
                    "request_id": merged[REQUEST_ID_HEADER],
                    "status_code": response.status_code,
                },
            )
            raise ExportError(
                f"Export failed with status {response.status_code}",
                url=url,
                status=response.status_code,
            )
        return response.content
