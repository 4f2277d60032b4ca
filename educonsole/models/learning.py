"""Course, cohort, and class records.

Status enums mirror the server's lifecycle columns. Transitions between them
(e.g. cohort PLANNING -> ENROLLING -> ACTIVE) are enforced by the server; the
client only issues the transition calls.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from educonsole.models.common import (
    AuditedModel,
    EntityRef,
    ListFilters,
    RequestModel,
    WireModel,
)


class CourseStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DRAFT = "DRAFT"
    ARCHIVED = "ARCHIVED"


class CourseDifficulty(str, Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    EXPERT = "EXPERT"


class CohortStatus(str, Enum):
    PLANNING = "PLANNING"
    ENROLLING = "ENROLLING"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class ClassMode(str, Enum):
    ONLINE = "ONLINE"
    IN_PERSON = "IN PERSON"
    HYBRID = "HYBRID"


class ClassStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class PersonRef(EntityRef):
    email: str | None = None


# ---------------------------------------------------------------------------
# Course
# ---------------------------------------------------------------------------


class Course(AuditedModel):
    center_id: int | None = None
    name: str
    code: str | None = None
    description: str | None = None
    short_description: str | None = None
    thumbnail_url: str | None = None
    duration: float | None = None  # hours
    difficulty: CourseDifficulty | None = None
    status: CourseStatus | None = None
    price: float | None = None
    currency: str | None = None
    max_students: int | None = None
    prerequisites: list[str] | None = None
    learning_objectives: list[str] | None = None
    syllabus: str | None = None
    instructor_id: int | None = None
    category_id: int | None = None
    tags: list[str] | None = None
    is_public: bool | None = None
    enrollment_start_date: str | None = None
    enrollment_end_date: str | None = None
    course_start_date: str | None = None
    course_end_date: str | None = None
    center: EntityRef | None = None
    instructor: PersonRef | None = None
    category: EntityRef | None = None
    enrollment_count: int | None = None
    rating: float | None = None
    review_count: int | None = None


class CourseModule(WireModel):
    id: int
    course_id: int | None = None
    name: str
    description: str | None = None
    order: int | None = None
    is_active: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None


class CourseChapter(WireModel):
    id: int
    course_module_id: int | None = None
    name: str
    description: str | None = None
    content: str | None = None
    order: int | None = None
    duration: int | None = None  # minutes
    is_active: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None


class CreateCourseRequest(RequestModel):
    center_id: int
    name: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1)
    duration: float = Field(..., gt=0)
    difficulty: CourseDifficulty
    price: float = Field(..., ge=0)
    description: str | None = None
    short_description: str | None = None
    thumbnail_url: str | None = None
    status: CourseStatus | None = None
    currency: str | None = None
    max_students: int | None = Field(default=None, ge=1)
    prerequisites: list[str] | None = None
    learning_objectives: list[str] | None = None
    syllabus: str | None = None
    instructor_id: int | None = None
    category_id: int | None = None
    tags: list[str] | None = None
    is_public: bool | None = None
    enrollment_start_date: str | None = None
    enrollment_end_date: str | None = None
    course_start_date: str | None = None
    course_end_date: str | None = None


class UpdateCourseRequest(RequestModel):
    center_id: int | None = None
    name: str | None = None
    code: str | None = None
    duration: float | None = Field(default=None, gt=0)
    difficulty: CourseDifficulty | None = None
    price: float | None = Field(default=None, ge=0)
    description: str | None = None
    short_description: str | None = None
    thumbnail_url: str | None = None
    status: CourseStatus | None = None
    currency: str | None = None
    max_students: int | None = Field(default=None, ge=1)
    prerequisites: list[str] | None = None
    learning_objectives: list[str] | None = None
    syllabus: str | None = None
    instructor_id: int | None = None
    category_id: int | None = None
    tags: list[str] | None = None
    is_public: bool | None = None
    enrollment_start_date: str | None = None
    enrollment_end_date: str | None = None
    course_start_date: str | None = None
    course_end_date: str | None = None


class CourseFilters(ListFilters):
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search: str | None = None
    status: CourseStatus | None = None
    difficulty: CourseDifficulty | None = None
    center_id: int | None = None
    instructor_id: int | None = None
    category_id: int | None = None
    is_public: bool | None = None
    sort_by: str | None = None
    sort_order: str | None = None


class CourseModuleFilters(ListFilters):
    course_id: int | None = None
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)


class CourseChapterFilters(ListFilters):
    course_module_id: int | None = None
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)


# ---------------------------------------------------------------------------
# Cohort
# ---------------------------------------------------------------------------


class CohortEnrollment(AuditedModel):
    """Enrollment row as embedded in a cohort detail response."""

    student_id: int | None = None
    cohort_id: int | None = None
    enrollment_date: str | None = None
    status: str | None = None
    payment_status: str | None = None
    payment_id: str | None = None
    avatar_url: str | None = None
    description: str | None = None


class Cohort(AuditedModel):
    course_id: int | None = None
    center_id: int | None = None
    instructor_employee_id: int | None = None
    name: str
    code: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    mode: str | None = None
    capacity: int | None = None
    avatar_url: str | None = None
    description: str | None = None
    status: CohortStatus | None = None
    enrollments: list[CohortEnrollment] | None = None
    enrollment_count: int | None = None


class CreateCohortRequest(RequestModel):
    center_id: int
    course_id: int
    name: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1)
    start_date: str
    end_date: str
    description: str | None = None
    enrollment_start_date: str | None = None
    enrollment_end_date: str | None = None
    max_students: int | None = Field(default=None, ge=1)
    status: CohortStatus | None = None
    is_public: bool | None = None


class UpdateCohortRequest(RequestModel):
    center_id: int | None = None
    course_id: int | None = None
    name: str | None = None
    code: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None
    enrollment_start_date: str | None = None
    enrollment_end_date: str | None = None
    max_students: int | None = Field(default=None, ge=1)
    status: CohortStatus | None = None
    is_public: bool | None = None


class CohortFilters(ListFilters):
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search: str | None = None
    status: CohortStatus | None = None
    center_id: int | None = None
    course_id: int | None = None
    instructor_id: int | None = None
    is_public: bool | None = None
    sort_by: str | None = None
    sort_order: str | None = None


# ---------------------------------------------------------------------------
# Class (a single scheduled session of a cohort)
# ---------------------------------------------------------------------------


class ClassSession(AuditedModel):
    cohort_id: int | None = None
    center_id: int | None = None
    instructor_employee_id: int | None = None
    course_module_id: int | None = None
    course_chapter_id: int | None = None
    name: str
    start_time: str | None = None
    end_time: str | None = None
    mode: ClassMode | None = None
    meeting_url: str | None = None
    resource_url: str | None = None
    video_url: str | None = None
    avatar_url: str | None = None
    description: str | None = None
    status: ClassStatus | None = None
    cohort: EntityRef | None = None
    center: EntityRef | None = None
    instructor: PersonRef | None = None
    course_module: EntityRef | None = None
    course_chapter: EntityRef | None = None


class CreateClassRequest(RequestModel):
    cohort_id: int
    name: str = Field(..., min_length=1)
    start_time: str
    center_id: int | None = None
    instructor_employee_id: int | None = None
    course_module_id: int | None = None
    course_chapter_id: int | None = None
    end_time: str | None = None
    mode: ClassMode | None = None
    meeting_url: str | None = None
    resource_url: str | None = None
    video_url: str | None = None
    avatar_url: str | None = None
    description: str | None = None
    status: ClassStatus | None = None


class UpdateClassRequest(RequestModel):
    cohort_id: int | None = None
    name: str | None = None
    start_time: str | None = None
    center_id: int | None = None
    instructor_employee_id: int | None = None
    course_module_id: int | None = None
    course_chapter_id: int | None = None
    end_time: str | None = None
    mode: ClassMode | None = None
    meeting_url: str | None = None
    resource_url: str | None = None
    video_url: str | None = None
    avatar_url: str | None = None
    description: str | None = None
    status: ClassStatus | None = None


class ClassFilters(ListFilters):
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search: str | None = None
    status: ClassStatus | None = None
    mode: ClassMode | None = None
    cohort_id: int | None = None
    center_id: int | None = None
    instructor_employee_id: int | None = None
    course_module_id: int | None = None
    course_chapter_id: int | None = None
    sort_by: str | None = None
    sort_order: str | None = None
