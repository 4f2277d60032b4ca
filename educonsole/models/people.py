"""Employee and student records."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from educonsole.models.common import AuditedModel, EntityRef, ListFilters, RequestModel


class EmployeeRole(str, Enum):
    INSTRUCTOR = "INSTRUCTOR"
    OPERATOR = "OPERATOR"
    ADMIN = "ADMIN"
    SUPERADMIN = "SUPERADMIN"


class EmployeeStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"


class StudentStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"


class _Address(RequestModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None


# ---------------------------------------------------------------------------
# Employee
# ---------------------------------------------------------------------------


class Employee(AuditedModel):
    email: str
    name: str
    phone: str | None = None
    role: EmployeeRole | None = None
    status: EmployeeStatus | None = None
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    qualifications: str | None = None
    salary: float | None = None
    description: str | None = None
    avatar_url: str | None = None
    center_id: int | None = None
    center: EntityRef | None = None


class CreateEmployeeRequest(_Address):
    email: str
    # The server generates a password when none is supplied.
    password: str | None = None
    name: str = Field(..., min_length=1)
    role: EmployeeRole
    phone: str | None = None
    status: EmployeeStatus | None = None
    qualifications: str | None = None
    salary: float | None = Field(default=None, ge=0)
    description: str | None = None
    avatar_url: str | None = None
    center_id: int | None = None


class UpdateEmployeeRequest(_Address):
    email: str | None = None
    name: str | None = None
    phone: str | None = None
    role: EmployeeRole | None = None
    status: EmployeeStatus | None = None
    qualifications: str | None = None
    salary: float | None = Field(default=None, ge=0)
    description: str | None = None
    avatar_url: str | None = None
    center_id: int | None = None


class EmployeeFilters(ListFilters):
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search: str | None = None
    role: EmployeeRole | None = None
    status: EmployeeStatus | None = None
    center_id: int | None = None
    sort_by: str | None = None
    sort_order: str | None = None


# ---------------------------------------------------------------------------
# Student
# ---------------------------------------------------------------------------


class Student(AuditedModel):
    center_id: int | None = None
    name: str
    email: str | None = None
    phone: str | None = None
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    education: str | None = None
    profession: str | None = None
    interests: str | None = None
    avatar_url: str | None = None
    docs_url: list[str] | None = None
    description: str | None = None
    status: StudentStatus | None = None
    center: EntityRef | None = None


class CreateStudentRequest(_Address):
    center_id: int
    name: str = Field(..., min_length=1)
    email: str
    password: str | None = None
    phone: str | None = None
    education: str | None = None
    profession: str | None = None
    interests: str | None = None
    avatar_url: str | None = None
    docs_url: list[str] | None = None
    description: str | None = None
    status: StudentStatus | None = None


class UpdateStudentRequest(_Address):
    center_id: int | None = None
    name: str | None = None
    email: str | None = None
    password: str | None = None
    phone: str | None = None
    education: str | None = None
    profession: str | None = None
    interests: str | None = None
    avatar_url: str | None = None
    docs_url: list[str] | None = None
    description: str | None = None
    status: StudentStatus | None = None


class StudentFilters(ListFilters):
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search: str | None = None
    status: StudentStatus | None = None
    center_id: int | None = None
    sort_by: str | None = None
    sort_order: str | None = None
