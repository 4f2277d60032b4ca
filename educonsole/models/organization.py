"""Organization and center records."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from educonsole.models.common import (
    AuditedModel,
    EntityRef,
    ListFilters,
    RequestModel,
    WireModel,
)


class OrganizationType(str, Enum):
    UNIVERSITY = "UNIVERSITY"
    CORPORATE = "CORPORATE"
    TRAINING = "TRAINING"
    NON_PROFIT = "NON_PROFIT"
    OTHER = "OTHER"


class OrganizationStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"


class Currency(str, Enum):
    INR = "INR"
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    AUD = "AUD"


class CenterStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"


class BillingContact(WireModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None


# ---------------------------------------------------------------------------
# Organization
# ---------------------------------------------------------------------------


class Organization(AuditedModel):
    name: str
    code: str | None = None
    type: OrganizationType | None = None
    status: OrganizationStatus | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    website: str | None = None
    address: str | None = None
    logo_url: str | None = None
    established_date: str | None = None
    currency: Currency | None = None
    timezone: str | None = None
    admin_employee_id: int | None = None
    billing_contact: BillingContact | None = None
    settings: dict[str, Any] | None = None


class CreateOrganizationRequest(RequestModel):
    name: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1)
    type: OrganizationType
    contact_email: str
    status: OrganizationStatus | None = None
    contact_phone: str | None = None
    website: str | None = None
    address: str | None = None
    logo_url: str | None = None
    established_date: str | None = None
    currency: Currency | None = None
    timezone: str | None = None
    admin_employee_id: int | None = None
    billing_contact: BillingContact | None = None
    settings: dict[str, Any] | None = None


class UpdateOrganizationRequest(RequestModel):
    name: str | None = None
    code: str | None = None
    type: OrganizationType | None = None
    status: OrganizationStatus | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    website: str | None = None
    address: str | None = None
    logo_url: str | None = None
    established_date: str | None = None
    currency: Currency | None = None
    timezone: str | None = None
    admin_employee_id: int | None = None
    billing_contact: BillingContact | None = None
    settings: dict[str, Any] | None = None


class OrganizationFilters(ListFilters):
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search_term: str | None = None
    sort_order: str | None = None


class OrganizationOption(WireModel):
    """Slim ``{id, name}`` row returned by the selector endpoint."""

    id: int
    name: str


# ---------------------------------------------------------------------------
# Center
# ---------------------------------------------------------------------------


class Center(AuditedModel):
    organization_id: int | None = None
    name: str
    street: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    capacity: int | None = None
    description: str | None = None
    logo_url: str | None = None
    status: CenterStatus | None = None
    organization: EntityRef | None = None


class CreateCenterRequest(RequestModel):
    organization_id: int
    name: str = Field(..., min_length=1)
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    capacity: int | None = Field(default=None, ge=0)
    description: str | None = None
    logo_url: str | None = None
    status: CenterStatus | None = None


class UpdateCenterRequest(RequestModel):
    organization_id: int | None = None
    name: str | None = None
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    capacity: int | None = Field(default=None, ge=0)
    description: str | None = None
    logo_url: str | None = None
    status: CenterStatus | None = None


class CenterFilters(ListFilters):
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search: str | None = None
    status: CenterStatus | None = None
    organization_id: int | None = None
    sort_by: str | None = None
    sort_order: str | None = None
