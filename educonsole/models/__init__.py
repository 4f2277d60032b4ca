"""Public models for the console API client."""

from educonsole.models.access import (
    AuditLog,
    AuditLogFilters,
    LoginRequest,
    LoginResponse,
    Role,
    RoleFilters,
    User,
    UserType,
)
from educonsole.models.admissions import (
    Enquiry,
    EnquiryFilters,
    EnquiryStatus,
    Enrollment,
    EnrollmentFilters,
    EnrollmentStatus,
)
from educonsole.models.billing import (
    Feedback,
    FeedbackFilters,
    FeedbackStatus,
    Payment,
    PaymentFilters,
    PaymentStatus,
)
from educonsole.models.envelope import (
    ApiResponse,
    ErrorInfo,
    ErrorType,
    ModuleName,
    PaginatedData,
    PaginationQuery,
    extract_page,
    get_data,
    get_error,
    is_error,
    is_success,
)
from educonsole.models.learning import (
    ClassFilters,
    ClassSession,
    ClassStatus,
    Cohort,
    CohortFilters,
    CohortStatus,
    Course,
    CourseFilters,
    CourseStatus,
)
from educonsole.models.organization import (
    Center,
    CenterFilters,
    Organization,
    OrganizationFilters,
)
from educonsole.models.people import (
    Employee,
    EmployeeFilters,
    Student,
    StudentFilters,
)

__all__ = [
    "ApiResponse",
    "AuditLog",
    "AuditLogFilters",
    "Center",
    "CenterFilters",
    "ClassFilters",
    "ClassSession",
    "ClassStatus",
    "Cohort",
    "CohortFilters",
    "CohortStatus",
    "Course",
    "CourseFilters",
    "CourseStatus",
    "Employee",
    "EmployeeFilters",
    "Enquiry",
    "EnquiryFilters",
    "EnquiryStatus",
    "Enrollment",
    "EnrollmentFilters",
    "EnrollmentStatus",
    "ErrorInfo",
    "ErrorType",
    "Feedback",
    "FeedbackFilters",
    "FeedbackStatus",
    "LoginRequest",
    "LoginResponse",
    "ModuleName",
    "Organization",
    "OrganizationFilters",
    "PaginatedData",
    "PaginationQuery",
    "Payment",
    "PaymentFilters",
    "PaymentStatus",
    "Role",
    "RoleFilters",
    "Student",
    "StudentFilters",
    "User",
    "UserType",
    "extract_page",
    "get_data",
    "get_error",
    "is_error",
    "is_success",
]
