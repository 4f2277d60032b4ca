"""Composition root: one ``ApiClient`` shared by every entity service."""

from __future__ import annotations

import httpx

from educonsole.client import ApiClient
from educonsole.config.settings import ConsoleSettings
from educonsole.logging_config import configure_logging
from educonsole.notifications import Notifier
from educonsole.services import (
    AuditLogService,
    AuthService,
    CenterService,
    ClassService,
    CohortService,
    CourseService,
    EmployeeService,
    EnquiryService,
    EnrollmentService,
    FeedbackService,
    OrganizationService,
    PaymentService,
    RoleService,
    StudentService,
)


class AdminConsole:
    """All entity services bound to a single client.

    Login state lives on the client, so ``console.auth.login(...)`` makes
    every other service call authenticated.
    """

    def __init__(self, client: ApiClient) -> None:
        self.client = client

        self.auth = AuthService(client)
        self.organizations = OrganizationService(client)
        self.centers = CenterService(client)
        self.employees = EmployeeService(client)
        self.students = StudentService(client)
        self.courses = CourseService(client)
        self.cohorts = CohortService(client)
        self.classes = ClassService(client)
        self.enrollments = EnrollmentService(client)
        self.enquiries = EnquiryService(client)
        self.payments = PaymentService(client)
        self.feedbacks = FeedbackService(client)
        self.roles = RoleService(client)
        self.audit_logs = AuditLogService(client)

    @classmethod
    def from_settings(
        cls,
        settings: ConsoleSettings | None = None,
        notifier: Notifier | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        setup_logging: bool = False,
    ) -> AdminConsole:
        """Build a console from ``ConsoleSettings`` (env vars when omitted).

        With *setup_logging* the root logger is switched to JSON output at
        ``settings.log_level``.
        """
        settings = settings or ConsoleSettings()
        if setup_logging:
            configure_logging(settings.log_level)
        client = ApiClient.from_settings(settings, notifier=notifier, transport=transport)
        return cls(client)
