"""Per-entity wrappers around ``ApiClient``."""

from educonsole.services.access import AuditLogService, RoleService
from educonsole.services.admissions import EnquiryService, EnrollmentService
from educonsole.services.auth import (
    AuthService,
    is_login_success,
    token_from_login,
    user_from_login,
)
from educonsole.services.base import ReadOnlyService, ResourceService, WorkflowService
from educonsole.services.billing import FeedbackService, PaymentService
from educonsole.services.learning import ClassService, CohortService, CourseService
from educonsole.services.organizations import CenterService, OrganizationService
from educonsole.services.people import EmployeeService, StudentService

__all__ = [
    "AuditLogService",
    "AuthService",
    "CenterService",
    "ClassService",
    "CohortService",
    "CourseService",
    "EmployeeService",
    "EnquiryService",
    "EnrollmentService",
    "FeedbackService",
    "OrganizationService",
    "PaymentService",
    "ReadOnlyService",
    "ResourceService",
    "RoleService",
    "StudentService",
    "WorkflowService",
    "is_login_success",
    "token_from_login",
    "user_from_login",
]
