"""Course, cohort and class services.

Cohort lifecycle calls (``start``, ``complete`` ...) are proxied as-is; the
server decides whether a transition is legal.
"""

from __future__ import annotations

from typing import Any

from educonsole.models.envelope import ApiResponse
from educonsole.models.learning import (
    ClassFilters,
    ClassSession,
    ClassStatus,
    Cohort,
    CohortFilters,
    CohortStatus,
    Course,
    CourseChapterFilters,
    CourseFilters,
    CourseModuleFilters,
)
from educonsole.services.base import API_PREFIX, Filters, ResourceService, filter_params


class _CodedResourceService(ResourceService):
    """Entities with a unique ``code`` and per-center stats."""

    async def stats(self, center_id: int | None = None) -> ApiResponse[Any]:
        params = {"centerId": center_id} if center_id is not None else None
        return await self._client.get(self._path("stats"), params=params)

    async def validate_code(
        self, code: str, exclude_id: int | None = None
    ) -> ApiResponse[Any]:
        """Ask whether *code* is free, ignoring the row *exclude_id* (when editing)."""
        params: dict[str, Any] = {"code": code}
        if exclude_id is not None:
            params["excludeId"] = exclude_id
        return await self._client.get(self._path("validate-code"), params=params)


class CourseService(_CodedResourceService):
    base_path = f"{API_PREFIX}/courses"
    model = Course
    filters_model = CourseFilters
    items_key = "courses"

    async def by_instructor(
        self, instructor_id: int, filters: Filters = None
    ) -> ApiResponse[Any]:
        return await self.list(filters, instructor_id=instructor_id)

    async def by_category(
        self, category_id: int, filters: Filters = None
    ) -> ApiResponse[Any]:
        return await self.list(filters, category_id=category_id)

    async def public(self, filters: Filters = None) -> ApiResponse[Any]:
        return await self.list(filters, is_public=True)

    async def modules(self, filters: Filters = None, **overrides: Any) -> ApiResponse[Any]:
        return await self._client.get(
            self._path("modules"),
            params=filter_params(CourseModuleFilters, filters, **overrides),
        )

    async def chapters(self, filters: Filters = None, **overrides: Any) -> ApiResponse[Any]:
        return await self._client.get(
            self._path("chapters"),
            params=filter_params(CourseChapterFilters, filters, **overrides),
        )


class CohortService(_CodedResourceService):
    base_path = f"{API_PREFIX}/cohorts"
    model = Cohort
    filters_model = CohortFilters
    items_key = "cohorts"

    async def by_course(self, course_id: int, filters: Filters = None) -> ApiResponse[Any]:
        return await self.list(filters, course_id=course_id)

    async def by_instructor(
        self, instructor_id: int, filters: Filters = None
    ) -> ApiResponse[Any]:
        return await self.list(filters, instructor_id=instructor_id)

    async def public(self, filters: Filters = None) -> ApiResponse[Any]:
        return await self.list(filters, is_public=True)

    async def active(self, filters: Filters = None) -> ApiResponse[Any]:
        return await self.list(filters, status=CohortStatus.ACTIVE)

    async def enrolling(self, filters: Filters = None) -> ApiResponse[Any]:
        return await self.list(filters, status=CohortStatus.ENROLLING)

    # Lifecycle transitions

    async def start(self, id: int) -> ApiResponse[Any]:
        return await self._action(id, "start")

    async def complete(self, id: int) -> ApiResponse[Any]:
        return await self._action(id, "complete")

    async def cancel(self, id: int) -> ApiResponse[Any]:
        return await self._action(id, "cancel")

    async def open_enrollment(self, id: int) -> ApiResponse[Any]:
        return await self._action(id, "open-enrollment")

    async def close_enrollment(self, id: int) -> ApiResponse[Any]:
        return await self._action(id, "close-enrollment")


class ClassService(ResourceService):
    base_path = f"{API_PREFIX}/classes"
    model = ClassSession
    filters_model = ClassFilters
    items_key = "classes"

    async def by_cohort(self, cohort_id: int, filters: Filters = None) -> ApiResponse[Any]:
        return await self.list(filters, cohort_id=cohort_id)

    async def by_instructor(
        self, instructor_employee_id: int, filters: Filters = None
    ) -> ApiResponse[Any]:
        return await self.list(filters, instructor_employee_id=instructor_employee_id)

    async def by_center(self, center_id: int, filters: Filters = None) -> ApiResponse[Any]:
        return await self.list(filters, center_id=center_id)

    async def upcoming(self, filters: Filters = None) -> ApiResponse[Any]:
        return await self.list(filters, status=ClassStatus.SCHEDULED)

    async def completed(self, filters: Filters = None) -> ApiResponse[Any]:
        return await self.list(filters, status=ClassStatus.COMPLETED)
