"""Unit tests for ApiClient."""

from __future__ import annotations

import asyncio
import json
import logging

import httpx
import pytest

from educonsole.client import ApiClient, build_query
from educonsole.config.settings import ConsoleSettings
from educonsole.errors import ExportError
from educonsole.models.envelope import DEFAULT_ERROR_MESSAGE, ErrorType, ModuleName
from educonsole.models.organization import Organization
from educonsole.tokens import FileTokenStore, MemoryTokenStore
from tests.fake_api import BASE_URL, RecordingNotifier, fail, make_client, ok


class Capture:
    """MockTransport handler that records requests and replies with a fixed body."""

    def __init__(self, body: object = None, status_code: int = 200) -> None:
        self.body = ok() if body is None else body
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, bytes):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def _raise_connect(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


# ---------------------------------------------------------------------------
# Construction and configuration
# ---------------------------------------------------------------------------


class TestConfiguration:
    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValueError):
            ApiClient(timeout=0)

    def test_base_url_trailing_slash_is_stripped(self) -> None:
        client = ApiClient(base_url="http://api.local/")
        assert client.base_url == "http://api.local"

    def test_from_settings_uses_memory_store_by_default(self) -> None:
        client = ApiClient.from_settings(ConsoleSettings())
        assert client.base_url == "http://localhost:4000"
        assert client.timeout == 10.0
        assert not client.is_authenticated()

    def test_from_settings_loads_persisted_token(self, tmp_path) -> None:  # noqa: ANN001
        token_file = tmp_path / "token"
        FileTokenStore(token_file).save("persisted")

        client = ApiClient.from_settings(ConsoleSettings(token_file=str(token_file)))

        assert client.is_authenticated()
        assert client.headers["authorization"] == "Bearer persisted"

    def test_set_and_remove_header(self) -> None:
        client = ApiClient(default_headers={"X-Tenant": "a"})
        client.set_header("X-Trace", "1")
        client.remove_header("x-tenant")

        assert client.headers == {"x-trace": "1"}

    def test_remove_missing_header_is_noop(self) -> None:
        client = ApiClient()
        client.remove_header("X-Nope")
        assert client.headers == {}


# ---------------------------------------------------------------------------
# request()
# ---------------------------------------------------------------------------


class TestRequest:
    @pytest.mark.asyncio
    async def test_relative_path_resolved_against_base_url(self) -> None:
        capture = Capture()
        client = make_client(capture)

        await client.get("/api/v1/students")

        assert str(capture.last.url) == f"{BASE_URL}/api/v1/students"

    @pytest.mark.asyncio
    async def test_absolute_path_bypasses_base_url(self) -> None:
        capture = Capture()
        client = make_client(capture)

        await client.get("https://other.example/api/v1/ping")

        assert capture.last.url.host == "other.example"

    @pytest.mark.asyncio
    async def test_call_headers_override_defaults(self) -> None:
        capture = Capture()
        client = make_client(
            capture, default_headers={"X-Tenant": "default", "X-Keep": "yes"}
        )

        await client.get("/x", headers={"X-Tenant": "override"})

        assert capture.last.headers["x-tenant"] == "override"
        assert capture.last.headers["x-keep"] == "yes"

    @pytest.mark.asyncio
    async def test_json_body_sent_for_post(self) -> None:
        capture = Capture()
        client = make_client(capture)

        await client.post("/items", {"name": "A", "count": 2})

        assert capture.last.headers["content-type"] == "application/json"
        assert json.loads(capture.last.content) == {"name": "A", "count": 2}

    @pytest.mark.asyncio
    async def test_pydantic_body_dumped_by_alias(self) -> None:
        capture = Capture()
        client = make_client(capture)
        body = Organization(id=1, name="Acme", contact_email="ops@acme.edu")

        await client.put("/orgs/1", body)

        assert json.loads(capture.last.content) == {
            "id": 1,
            "name": "Acme",
            "contactEmail": "ops@acme.edu",
        }

    @pytest.mark.asyncio
    async def test_no_body_without_data(self) -> None:
        capture = Capture()
        client = make_client(capture)

        await client.post("/items/1/restore")

        assert capture.last.content == b""
        assert "content-type" not in capture.last.headers

    @pytest.mark.asyncio
    async def test_explicit_content_type_wins(self) -> None:
        capture = Capture()
        client = make_client(capture)

        await client.post("/items", {"a": 1}, headers={"Content-Type": "application/vnd.api+json"})

        assert capture.last.headers["content-type"] == "application/vnd.api+json"

    @pytest.mark.asyncio
    async def test_request_id_generated_and_caller_id_kept(self) -> None:
        capture = Capture()
        client = make_client(capture)

        await client.get("/a")
        await client.get("/b", headers={"x-request-id": "mine"})

        generated = capture.requests[0].headers["x-request-id"]
        assert len(generated) == 36
        assert capture.requests[1].headers["x-request-id"] == "mine"

    @pytest.mark.asyncio
    async def test_success_envelope_returned_and_not_notified(self) -> None:
        notifier = RecordingNotifier()
        client = make_client(Capture(ok({"id": 3}, module="STUDENT")), notifier=notifier)

        env = await client.get("/students/3")

        assert env.success is True
        assert env.data == {"id": 3}
        assert env.module is ModuleName.STUDENT
        assert notifier.messages == []

    @pytest.mark.asyncio
    async def test_data_type_parses_payload(self) -> None:
        client = make_client(Capture(ok({"id": 1, "name": "Acme"})))

        env = await client.get("/orgs/1", data_type=Organization)

        assert isinstance(env.data, Organization)
        assert env.data.name == "Acme"

    @pytest.mark.asyncio
    async def test_payload_not_matching_data_type_is_kept_raw(self, caplog) -> None:  # noqa: ANN001
        notifier = RecordingNotifier()
        client = make_client(
            Capture(ok({"name": "Acme", "type": "GUILD"}, message="Fetched", module="ORGANIZATION")),
            notifier=notifier,
        )

        with caplog.at_level(logging.WARNING, logger="educonsole.client"):
            env = await client.get("/orgs/1", data_type=Organization)

        assert env.success is True
        assert env.message == "Fetched"
        assert env.module is ModuleName.ORGANIZATION
        assert env.data == {"name": "Acme", "type": "GUILD"}
        assert notifier.messages == []
        assert any("does not match Organization" in r.getMessage() for r in caplog.records)

    @pytest.mark.asyncio
    async def test_failure_with_unparseable_data_keeps_server_message(self) -> None:
        notifier = RecordingNotifier()
        client = make_client(
            Capture(
                {**fail("Organization not found", status_code=404), "data": {"bogus": True}},
                status_code=404,
            ),
            notifier=notifier,
        )

        env = await client.get("/orgs/9", data_type=list[Organization])

        assert env.success is False
        assert env.status_code == 404
        assert notifier.messages == ["Organization not found"]

    @pytest.mark.asyncio
    async def test_body_that_is_not_an_envelope_is_synthesized(self) -> None:
        client = make_client(Capture({"hello": "world"}))

        env = await client.get("/orgs/1", data_type=Organization)

        assert env.success is False
        assert env.error.type is ErrorType.TECHNICAL_ERROR

    @pytest.mark.asyncio
    async def test_server_failure_returned_and_notified_once(self) -> None:
        notifier = RecordingNotifier()
        client = make_client(
            Capture(fail("Email already exists", status_code=409), status_code=409),
            notifier=notifier,
        )

        env = await client.post("/students", {"email": "a@b.c"})

        assert env.success is False
        assert env.status_code == 409
        assert env.error.type is ErrorType.VALIDATION_ERROR
        assert notifier.messages == ["Email already exists"]

    @pytest.mark.asyncio
    async def test_failure_with_empty_message_uses_fallback(self) -> None:
        notifier = RecordingNotifier()
        client = make_client(Capture(fail("")), notifier=notifier)

        await client.get("/x")

        assert notifier.messages == [DEFAULT_ERROR_MESSAGE]

    @pytest.mark.asyncio
    async def test_transport_error_becomes_network_error_envelope(self) -> None:
        notifier = RecordingNotifier()
        client = make_client(_raise_connect, notifier=notifier)

        env = await client.get("/x")

        assert env.success is False
        assert env.status_code == 500
        assert env.module is ModuleName.APP
        assert env.error.type is ErrorType.TECHNICAL_ERROR
        assert env.error.code == "NETWORK_ERROR"
        assert isinstance(env.error.details, httpx.ConnectError)
        assert env.data is None
        assert notifier.messages == ["connection refused"]

    @pytest.mark.asyncio
    async def test_non_json_body_becomes_network_error_envelope(self) -> None:
        notifier = RecordingNotifier()
        client = make_client(Capture(b"<html>Bad gateway</html>", status_code=502), notifier=notifier)

        env = await client.get("/x")

        assert env.success is False
        assert env.error.code == "NETWORK_ERROR"
        assert len(notifier.messages) == 1

    @pytest.mark.asyncio
    async def test_timeout_becomes_failure_envelope(self) -> None:
        notifier = RecordingNotifier()

        async def slow(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(5)
            return httpx.Response(200, json=ok())

        client = make_client(slow, timeout=0.05, notifier=notifier)

        env = await client.get("/slow")

        assert env.success is False
        assert env.status_code == 500
        assert env.error.type is ErrorType.TECHNICAL_ERROR
        assert env.error.code == "NETWORK_ERROR"
        assert env.message == "Request timed out"
        assert notifier.messages == ["Request timed out"]

    @pytest.mark.asyncio
    async def test_failure_envelope_carries_request_id(self) -> None:
        client = make_client(_raise_connect)

        env = await client.get("/x", headers={"X-Request-ID": "req-42"})

        assert env.request_id == "req-42"

    @pytest.mark.asyncio
    async def test_outcome_is_logged_with_request_fields(self, caplog) -> None:  # noqa: ANN001
        client = make_client(Capture(ok()))

        with caplog.at_level(logging.INFO, logger="educonsole.client"):
            await client.get("/ping", headers={"X-Request-ID": "log-1"})

        record = next(r for r in caplog.records if r.name == "educonsole.client" and hasattr(r, "method"))
        assert record.request_id == "log-1"
        assert record.method == "GET"
        assert record.url == f"{BASE_URL}/ping"
        assert record.status_code == 200


# ---------------------------------------------------------------------------
# get() query strings
# ---------------------------------------------------------------------------


class TestQueryString:
    def test_insertion_order_preserved(self) -> None:
        assert build_query({"a": 1, "b": "x"}) == "a=1&b=x"

    def test_booleans_and_enums_stringified(self) -> None:
        assert build_query({"isPublic": True, "mode": ModuleName.AUTH}) == "isPublic=true&mode=AUTH"

    def test_empty_params(self) -> None:
        assert build_query({}) == ""
        assert build_query(None) == ""

    @pytest.mark.asyncio
    async def test_get_appends_query(self) -> None:
        capture = Capture()
        client = make_client(capture)

        await client.get("/api/v1/courses", {"a": 1, "b": "x"})

        assert capture.last.url.query == b"a=1&b=x"

    @pytest.mark.asyncio
    async def test_get_extends_existing_query(self) -> None:
        capture = Capture()
        client = make_client(capture)

        await client.get("/api/v1/courses?page=1", {"limit": 5})

        assert capture.last.url.query == b"page=1&limit=5"


# ---------------------------------------------------------------------------
# Auth token
# ---------------------------------------------------------------------------


class TestAuthToken:
    @pytest.mark.asyncio
    async def test_token_sent_after_set_and_omitted_after_remove(self) -> None:
        capture = Capture()
        client = make_client(capture)

        client.set_auth_token("tok-1")
        await client.get("/a")
        client.remove_auth_token()
        await client.get("/b")

        assert capture.requests[0].headers["authorization"] == "Bearer tok-1"
        assert "authorization" not in capture.requests[1].headers

    def test_set_token_persists_to_store(self) -> None:
        store = MemoryTokenStore()
        client = ApiClient(token_store=store)

        client.set_auth_token("tok-2")
        assert store.load() == "tok-2"

        client.clear_auth_token()
        assert store.load() is None
        assert not client.is_authenticated()

    def test_token_loaded_from_store_on_construction(self) -> None:
        client = ApiClient(token_store=MemoryTokenStore("stored"))
        assert client.is_authenticated()

    @pytest.mark.asyncio
    async def test_token_saved_elsewhere_is_picked_up_before_request(self) -> None:
        store = MemoryTokenStore()
        capture = Capture()
        client = make_client(capture, token_store=store)

        store.save("late")
        await client.get("/a")

        assert capture.last.headers["authorization"] == "Bearer late"

    def test_refresh_auth_token_drops_header_when_store_cleared(self) -> None:
        store = MemoryTokenStore("t")
        client = ApiClient(token_store=store)

        store.clear()
        assert client.refresh_auth_token() is None
        assert not client.is_authenticated()


# ---------------------------------------------------------------------------
# download()
# ---------------------------------------------------------------------------


class TestDownload:
    @pytest.mark.asyncio
    async def test_returns_raw_bytes_with_accept_header(self) -> None:
        capture = Capture(b"id,name\n1,A\n")
        client = make_client(capture)

        content = await client.download("/api/v1/payments/export", {"status": "FAILED"})

        assert content == b"id,name\n1,A\n"
        assert capture.last.headers["accept"] == "text/csv"
        assert capture.last.url.query == b"status=FAILED"

    @pytest.mark.asyncio
    async def test_non_2xx_raises_export_error(self) -> None:
        notifier = RecordingNotifier()
        client = make_client(Capture(b"nope", status_code=500), notifier=notifier)

        with pytest.raises(ExportError) as excinfo:
            await client.download("/api/v1/payments/export")

        assert excinfo.value.details["status"] == 500
        assert notifier.messages == []

    @pytest.mark.asyncio
    async def test_transport_error_raises_export_error(self) -> None:
        client = make_client(_raise_connect)

        with pytest.raises(ExportError, match="connection refused"):
            await client.download("/api/v1/payments/export")

    @pytest.mark.asyncio
    async def test_unexpected_send_error_raises_export_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise RuntimeError("stream closed")

        client = make_client(handler)

        with pytest.raises(ExportError, match="stream closed") as excinfo:
            await client.download("/api/v1/payments/export")

        assert isinstance(excinfo.value.__cause__, RuntimeError)
