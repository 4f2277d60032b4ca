"""Auth, RBAC role, and audit log records."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from educonsole.models.common import ListFilters, RequestModel, WireModel
from educonsole.models.learning import PersonRef


class UserType(str, Enum):
    EMPLOYEE = "employee"
    STUDENT = "student"


class ActionType(str, Enum):
    CREATE = "CREATE"
    READ = "READ"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    LIST = "LIST"
    EXPORT = "EXPORT"
    IMPORT = "IMPORT"
    VIEW = "VIEW"
    EDIT = "EDIT"
    APPROVE = "APPROVE"
    REJECT = "REJECT"
    PUBLISH = "PUBLISH"
    ARCHIVE = "ARCHIVE"
    RESTORE = "RESTORE"


class AuditAction(str, Enum):
    CREATE = "CREATE"
    READ = "READ"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"
    EXPORT = "EXPORT"
    IMPORT = "IMPORT"


class AuditStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    PENDING = "PENDING"


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------


class LoginRequest(RequestModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    user_type: UserType = UserType.EMPLOYEE


class AccessToken(WireModel):
    """Token pair issued on login.

    Older server builds send ``token`` instead of ``accessToken``.
    """

    access_token: str | None = None
    refresh_token: str | None = None
    token: str | None = None

    @property
    def bearer(self) -> str | None:
        return self.access_token or self.token


class LoginEmployee(WireModel):
    id: int
    email: str | None = None
    name: str | None = None
    role: str | None = None
    center_id: int | None = None
    status: str | None = None


class LoginResponse(WireModel):
    # The server uses snake_case for this one key.
    access_token: AccessToken | None = Field(default=None, alias="access_token")
    employee: LoginEmployee | None = None
    user_type: UserType | None = None


class User(WireModel):
    """Signed-in user as kept by the console session."""

    id: int
    email: str | None = None
    name: str | None = None
    user_type: UserType | None = None
    role: str | None = None
    center_id: int | None = None
    access_token: str | None = None
    refresh_token: str | None = None
    status: str | None = None


class RefreshedToken(WireModel):
    token: str | None = None


# ---------------------------------------------------------------------------
# RBAC
# ---------------------------------------------------------------------------


class Permission(WireModel):
    id: int
    action: str
    resource: str | None = None
    module: str | None = None
    description: str | None = None


class Role(WireModel):
    id: int
    name: str
    description: str | None = None
    permissions: list[Permission] = Field(default_factory=list)
    is_active: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None
    deleted_at: str | None = None


class CreateRoleRequest(RequestModel):
    name: str = Field(..., min_length=1)
    description: str | None = None
    permissions: list[int] | None = None  # permission ids
    is_active: bool | None = None


class UpdateRoleRequest(RequestModel):
    name: str | None = None
    description: str | None = None
    permissions: list[int] | None = None
    is_active: bool | None = None


class RoleFilters(ListFilters):
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search: str | None = None
    is_active: bool | None = None
    sort_by: str | None = None
    sort_order: str | None = None


class ModuleActions(WireModel):
    actions: list[ActionType] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Audit log
# ---------------------------------------------------------------------------


class AuditCenter(WireModel):
    id: int
    name: str | None = None
    city: str | None = None
    state: str | None = None


class AuditLog(WireModel):
    id: int
    center_id: int | None = None
    performed_by_employee_id: int | None = None
    module: str | None = None
    action: str | None = None
    record_id: int | None = None
    details: dict[str, Any] | None = None
    description: str | None = None
    event_timestamp: str | None = None
    created_at: str | None = None
    center: AuditCenter | None = None
    performed_by_employee: PersonRef | None = None


class AuditLogFilters(ListFilters):
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search: str | None = None
    action: AuditAction | None = None
    module: str | None = None
    status: AuditStatus | None = None
    user_id: int | None = None
    entity_id: int | None = None
    entity_type: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None


class AuditExport(WireModel):
    download_url: str
