"""Enquiry and enrollment records: the path from prospect to student."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from educonsole.models.common import AuditedModel, EntityRef, ListFilters, RequestModel, WireModel
from educonsole.models.learning import Cohort, PersonRef


class EnrollmentStatus(str, Enum):
    ENROLLED = "ENROLLED"
    COMPLETED = "COMPLETED"
    DROPPED = "DROPPED"
    PENDING = "PENDING"


class EnrollmentPaymentStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"
    CANCELLED = "CANCELLED"


class EnquirySource(str, Enum):
    WEBSITE = "WEBSITE"
    REFERRAL = "REFERRAL"
    ADVERTISEMENT = "ADVERTISEMENT"
    WALK_IN = "WALK IN"
    SOCIAL_MEDIA = "SOCIAL MEDIA"
    OTHER = "OTHER"


class EnquiryStatus(str, Enum):
    NEW = "NEW"
    CONTACTED = "CONTACTED"
    INTERESTED = "INTERESTED"
    CONVERTED = "CONVERTED"
    LOST = "LOST"


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class ModeOfLearning(str, Enum):
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"


# ---------------------------------------------------------------------------
# Enrollment
# ---------------------------------------------------------------------------


class Enrollment(AuditedModel):
    student_id: int | None = None
    cohort_id: int | None = None
    enrollment_date: str | None = None
    status: EnrollmentStatus | None = None
    payment_status: EnrollmentPaymentStatus | None = None
    payment_id: str | None = None
    avatar_url: str | None = None
    description: str | None = None
    student: PersonRef | None = None
    cohort: Cohort | None = None


class CreateEnrollmentRequest(RequestModel):
    student_id: int
    cohort_id: int
    enrollment_date: str
    status: EnrollmentStatus | None = None
    payment_status: EnrollmentPaymentStatus | None = None
    payment_id: str | None = None
    avatar_url: str | None = None
    description: str | None = None


class UpdateEnrollmentRequest(RequestModel):
    student_id: int | None = None
    cohort_id: int | None = None
    enrollment_date: str | None = None
    status: EnrollmentStatus | None = None
    payment_status: EnrollmentPaymentStatus | None = None
    payment_id: str | None = None
    avatar_url: str | None = None
    description: str | None = None


class EnrollmentFilters(ListFilters):
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search: str | None = None
    status: EnrollmentStatus | None = None
    payment_status: EnrollmentPaymentStatus | None = None
    student_id: int | None = None
    cohort_id: int | None = None
    sort_by: str | None = None
    sort_order: str | None = None


# ---------------------------------------------------------------------------
# Enquiry
# ---------------------------------------------------------------------------


class EnquiryDocument(WireModel):
    id: str
    filename: str
    original_filename: str | None = None
    url: str
    mimetype: str | None = None
    size: int | None = None
    uploaded_at: str | None = None
    description: str | None = None
    category: str | None = None


class _EnquiryFields(WireModel):
    """Intake form fields shared by the record and its create/update bodies."""

    phone: str | None = None
    enquiry_date: str | None = None
    description: str | None = None
    center_id: int | None = None
    course_id: int | None = None
    assigned_employee_id: int | None = None

    # Address
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None

    # Personal
    date_of_birth: str | None = None
    gender: Gender | None = None
    whatsapp_number: str | None = None
    nationality: str | None = None

    # Emergency contact
    emergency_contact_name: str | None = None
    emergency_contact_relationship: str | None = None
    emergency_contact_number: str | None = None

    # Education
    education: str | None = None
    college_university: str | None = None
    year_of_completion: int | None = None
    specialized_subjects: str | None = None

    # Professional
    profession: str | None = None
    company_organization: str | None = None
    designation: str | None = None
    years_of_experience: int | None = None
    industry: str | None = None
    current_skills_tools: str | None = None
    current_salary_range: str | None = None
    career_goal_after_course: str | None = None

    # Course preferences
    program_applying_for: str | None = None
    preferred_batch_timing: str | None = None
    mode_of_learning: ModeOfLearning | None = None
    has_laptop_pc: bool | None = None
    has_internet_connectivity: bool | None = None
    why_learn_digital_marketing: str | None = None

    # Payment
    payment_preference: str | None = None
    preferred_payment_method: str | None = None

    # Documents & declaration
    has_id_proof: bool | None = None
    has_passport_photo: bool | None = None
    has_educational_certificate: bool | None = None
    preferred_job_role: str | None = None
    signature: str | None = None
    declaration_date: str | None = None


class Enquiry(_EnquiryFields, AuditedModel):
    name: str
    source: EnquirySource | None = None
    status: EnquiryStatus | None = None
    docs_url: list[EnquiryDocument] | None = None
    center: EntityRef | None = None
    course: EntityRef | None = None
    assigned_employee: EntityRef | None = None


class CreateEnquiryRequest(_EnquiryFields, RequestModel):
    name: str = Field(..., min_length=1)
    enquiry_date: str
    source: EnquirySource
    status: EnquiryStatus


class UpdateEnquiryRequest(_EnquiryFields, RequestModel):
    name: str | None = None
    source: EnquirySource | None = None
    status: EnquiryStatus | None = None


class EnquiryFilters(ListFilters):
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search: str | None = None
    status: EnquiryStatus | None = None
    source: EnquirySource | None = None
    center_id: int | None = None
    course_id: int | None = None
    assigned_employee_id: int | None = None
