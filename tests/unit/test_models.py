"""Unit tests for the response envelope and entity models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from educonsole.errors import ApiError
from educonsole.models.access import LoginResponse
from educonsole.models.envelope import (
    DEFAULT_ERROR_MESSAGE,
    NETWORK_ERROR_CODE,
    ApiResponse,
    ErrorType,
    ModuleName,
    PaginatedData,
    extract_page,
    get_data,
    get_error,
    is_error,
    is_success,
)
from educonsole.models.learning import ClassMode, Cohort, CohortStatus
from educonsole.models.organization import CreateOrganizationRequest, OrganizationType
from tests.fake_api import fail, ok


# ---------------------------------------------------------------------------
# ApiResponse
# ---------------------------------------------------------------------------


class TestApiResponse:
    def test_parses_wire_names(self) -> None:
        env = ApiResponse.model_validate(
            {**ok({"id": 1}, module="STUDENT", status_code=201), "requestId": "r-1"}
        )
        assert env.success is True
        assert env.status_code == 201
        assert env.module is ModuleName.STUDENT
        assert env.data == {"id": 1}
        assert env.error is None
        assert env.request_id == "r-1"

    def test_serializes_with_verbatim_wire_names(self) -> None:
        env = ApiResponse.failure("boom", request_id="r-2")
        wire = env.to_wire()

        assert set(wire) >= {"success", "statusCode", "message", "module", "error", "timestamp", "requestId"}
        assert "data" not in wire
        assert wire["error"] == {
            "type": "TECHNICAL_ERROR",
            "code": "NETWORK_ERROR",
        }

    def test_typed_data_is_parsed_into_model(self) -> None:
        env = ApiResponse[Cohort].model_validate(
            ok({"id": 4, "name": "Spring", "status": "ENROLLING", "courseId": 9})
        )
        assert isinstance(env.data, Cohort)
        assert env.data.status is CohortStatus.ENROLLING
        assert env.data.course_id == 9

    def test_failure_populates_error_and_not_data(self) -> None:
        exc = ConnectionError("refused")
        env = ApiResponse.failure("refused", details=exc)

        assert env.success is False
        assert env.status_code == 500
        assert env.module is ModuleName.APP
        assert env.data is None
        assert env.error is not None
        assert env.error.type is ErrorType.TECHNICAL_ERROR
        assert env.error.code == NETWORK_ERROR_CODE
        assert env.error.details is exc
        assert env.timestamp

    def test_failure_details_exception_serializes_as_repr(self) -> None:
        env = ApiResponse.failure("x", details=ValueError("bad"))
        assert env.model_dump(mode="json")["error"]["details"] == "ValueError('bad')"

    def test_unwrap_returns_data_on_success(self) -> None:
        env = ApiResponse.model_validate(ok([1, 2]))
        assert env.unwrap() == [1, 2]

    def test_unwrap_raises_api_error_on_failure(self) -> None:
        env = ApiResponse.model_validate(
            fail("Email taken", status_code=409, error_type="BUSINESS_ERROR", code="DUPLICATE")
        )
        with pytest.raises(ApiError) as excinfo:
            env.unwrap()

        err = excinfo.value
        assert err.message == "Email taken"
        assert err.status_code == 409
        assert err.error_type == "BUSINESS_ERROR"
        assert err.code == "DUPLICATE"
        assert err.envelope is env

    def test_unwrap_uses_default_message_when_empty(self) -> None:
        env = ApiResponse.model_validate(fail(""))
        with pytest.raises(ApiError, match=DEFAULT_ERROR_MESSAGE):
            env.unwrap()

    def test_unknown_module_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ApiResponse.model_validate({**ok(), "module": "NOT_A_MODULE"})


class TestTypeGuards:
    def test_success_envelope(self) -> None:
        env = ApiResponse.model_validate(ok({"a": 1}))
        assert is_success(env)
        assert not is_error(env)
        assert get_data(env) == {"a": 1}
        assert get_error(env) is None

    def test_failure_envelope(self) -> None:
        env = ApiResponse.model_validate(fail("nope"))
        assert is_error(env)
        assert not is_success(env)
        assert get_data(env) is None
        assert get_error(env) is not None
        assert get_error(env).type is ErrorType.VALIDATION_ERROR


# ---------------------------------------------------------------------------
# Pagination normalization
# ---------------------------------------------------------------------------


class TestExtractPage:
    def test_flat_paginated_shape(self) -> None:
        env = ApiResponse.model_validate(
            ok({"data": [{"id": 1}, {"id": 2}], "total": 12, "page": 2, "limit": 2, "totalPages": 6})
        )
        page = extract_page(env)

        assert isinstance(page, PaginatedData)
        assert page.data == [{"id": 1}, {"id": 2}]
        assert (page.total, page.page, page.limit, page.total_pages) == (12, 2, 2, 6)

    def test_nested_entity_shape(self) -> None:
        env = ApiResponse.model_validate(
            ok(
                {
                    "students": [{"id": 5}],
                    "pagination": {"page": 3, "limit": 1, "total": 9, "totalPages": 9},
                }
            )
        )
        page = extract_page(env, items_key="students")

        assert page is not None
        assert page.data == [{"id": 5}]
        assert page.page == 3
        assert page.total_pages == 9

    def test_nested_shape_found_without_items_key(self) -> None:
        env = ApiResponse.model_validate(
            ok({"cohorts": [{"id": 1}], "pagination": {"page": 1, "limit": 10, "total": 1}})
        )
        page = extract_page(env)

        assert page is not None
        assert page.data == [{"id": 1}]
        assert page.total_pages == 1

    def test_total_pages_computed_when_missing(self) -> None:
        env = ApiResponse.model_validate(
            ok({"data": [{}] * 10, "total": 25, "page": 1, "limit": 10})
        )
        assert extract_page(env).total_pages == 3

    def test_bare_list_is_single_page(self) -> None:
        env = ApiResponse.model_validate(ok([{"id": 1}, {"id": 2}, {"id": 3}]))
        page = extract_page(env)
        assert page.total == 3
        assert page.total_pages == 1

    def test_failed_envelope_returns_none(self) -> None:
        assert extract_page(ApiResponse.failure("down")) is None

    def test_unrecognized_payload_returns_none(self) -> None:
        env = ApiResponse.model_validate(ok({"a": [1], "b": [2]}))
        assert extract_page(env) is None


# ---------------------------------------------------------------------------
# Entity models
# ---------------------------------------------------------------------------


class TestEntityModels:
    def test_request_model_dumps_camel_case_without_none(self) -> None:
        body = CreateOrganizationRequest(
            name="Acme",
            code="ACM",
            type=OrganizationType.UNIVERSITY,
            contact_email="ops@acme.edu",
            admin_employee_id=4,
        )
        wire = body.to_wire()

        assert wire == {
            "name": "Acme",
            "code": "ACM",
            "type": "UNIVERSITY",
            "contactEmail": "ops@acme.edu",
            "adminEmployeeId": 4,
        }

    def test_request_model_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            CreateOrganizationRequest.model_validate(
                {
                    "name": "Acme",
                    "code": "ACM",
                    "type": "UNIVERSITY",
                    "contactEmail": "ops@acme.edu",
                    "bogus": 1,
                }
            )

    def test_entity_keeps_unknown_server_fields(self) -> None:
        cohort = Cohort.model_validate({"id": 1, "name": "A", "newColumn": "x"})
        assert cohort.model_extra == {"newColumn": "x"}

    def test_enum_values_with_spaces(self) -> None:
        assert ClassMode("IN PERSON") is ClassMode.IN_PERSON

    def test_login_response_reads_snake_case_token_key(self) -> None:
        login = LoginResponse.model_validate(
            {"access_token": {"token": "abc"}, "employee": {"id": 1}, "userType": "employee"}
        )
        assert login.access_token is not None
        assert login.access_token.bearer == "abc"
