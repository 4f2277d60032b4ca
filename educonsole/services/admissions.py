"""Enrollment and enquiry services."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from educonsole.models.admissions import (
    Enquiry,
    EnquiryFilters,
    Enrollment,
    EnrollmentFilters,
)
from educonsole.models.envelope import ApiResponse
from educonsole.services.base import API_PREFIX, ResourceService, WorkflowService


class EnrollmentService(ResourceService):
    base_path = f"{API_PREFIX}/enrollments"
    model = Enrollment
    filters_model = EnrollmentFilters
    items_key = "enrollments"


class EnquiryService(WorkflowService):
    base_path = f"{API_PREFIX}/enquiries"
    model = Enquiry
    filters_model = EnquiryFilters

    async def assign(self, id: int, employee_id: int) -> ApiResponse[Any]:
        """Hand the enquiry to a counsellor."""
        return await self._action(id, "assign", {"employeeId": employee_id}, method="PATCH")

    async def convert(
        self, id: int, enrollment: Mapping[str, Any] | None = None
    ) -> ApiResponse[Any]:
        """Turn the enquiry into an enrollment (server creates the student if needed)."""
        return await self._action(id, "convert", dict(enrollment or {}))
