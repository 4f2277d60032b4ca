"""Payment and feedback records."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from educonsole.models.common import AuditedModel, EntityRef, ListFilters, RequestModel, WireModel
from educonsole.models.learning import PersonRef


class PaymentMethod(str, Enum):
    CREDIT_CARD = "CREDIT CARD"
    DEBIT_CARD = "DEBIT CARD"
    PAYPAL = "PAYPAL"
    UPI = "UPI"
    NET_BANKING = "NET BANKING"
    DIRECT_BILL = "DIRECT BILL"
    OTHER = "OTHER"


class PaymentStatus(str, Enum):
    COMPLETED = "COMPLETED"
    PENDING = "PENDING"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class FeedbackStatus(str, Enum):
    SUBMITTED = "SUBMITTED"
    REVIEWED = "REVIEWED"
    CLOSED = "CLOSED"


class CohortRef(EntityRef):
    code: str | None = None


class EnrollmentRef(WireModel):
    id: int
    enrollment_date: str | None = None
    status: str | None = None


# ---------------------------------------------------------------------------
# Payment
# ---------------------------------------------------------------------------


class Payment(AuditedModel):
    student_id: int | None = None
    enrollment_id: int | None = None
    course_id: int | None = None
    cohort_id: int | None = None
    center_id: int | None = None
    processed_by_employee_id: int | None = None
    amount: float
    balance: float | None = None
    payment_method: PaymentMethod | None = None
    transaction_id: str | None = None
    payment_date: str | None = None
    status: PaymentStatus | None = None
    description: str | None = None
    student: PersonRef | None = None
    enrollment: EnrollmentRef | None = None
    course: EntityRef | None = None
    cohort: CohortRef | None = None
    center: EntityRef | None = None
    processed_by_employee: PersonRef | None = None


class CreatePaymentRequest(RequestModel):
    student_id: int
    enrollment_id: int
    course_id: int
    cohort_id: int
    center_id: int
    processed_by_employee_id: int
    amount: float = Field(..., ge=0)
    balance: float = Field(..., ge=0)
    payment_method: PaymentMethod
    payment_date: str
    transaction_id: str | None = None
    status: PaymentStatus | None = None
    description: str | None = None


class UpdatePaymentRequest(RequestModel):
    student_id: int | None = None
    enrollment_id: int | None = None
    course_id: int | None = None
    cohort_id: int | None = None
    center_id: int | None = None
    processed_by_employee_id: int | None = None
    amount: float | None = Field(default=None, ge=0)
    balance: float | None = Field(default=None, ge=0)
    payment_method: PaymentMethod | None = None
    payment_date: str | None = None
    transaction_id: str | None = None
    status: PaymentStatus | None = None
    description: str | None = None


class PaymentFilters(ListFilters):
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search: str | None = None
    status: PaymentStatus | None = None
    payment_method: PaymentMethod | None = None
    student_id: int | None = None
    enrollment_id: int | None = None
    course_id: int | None = None
    cohort_id: int | None = None
    center_id: int | None = None
    processed_by_employee_id: int | None = None
    sort_by: str | None = None
    sort_order: str | None = None


# ---------------------------------------------------------------------------
# Feedback
# ---------------------------------------------------------------------------


class Feedback(AuditedModel):
    student_id: int | None = None
    course_id: int | None = None
    cohort_id: int | None = None
    rating: int
    comment: str | None = None
    description: str | None = None
    status: FeedbackStatus | None = None
    student: PersonRef | None = None
    course: EntityRef | None = None
    cohort: CohortRef | None = None


class CreateFeedbackRequest(RequestModel):
    student_id: int
    rating: int = Field(..., ge=1, le=5)
    course_id: int | None = None
    cohort_id: int | None = None
    comment: str | None = None
    description: str | None = None
    status: FeedbackStatus | None = None


class UpdateFeedbackRequest(RequestModel):
    student_id: int | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    course_id: int | None = None
    cohort_id: int | None = None
    comment: str | None = None
    description: str | None = None
    status: FeedbackStatus | None = None


class FeedbackFilters(ListFilters):
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search: str | None = None
    status: FeedbackStatus | None = None
    student_id: int | None = None
    course_id: int | None = None
    cohort_id: int | None = None
    min_rating: int | None = Field(default=None, ge=1, le=5)
    max_rating: int | None = Field(default=None, ge=1, le=5)
    sort_by: str | None = None
    sort_order: str | None = None
