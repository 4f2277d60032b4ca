"""Employee and student services."""

from __future__ import annotations

from educonsole.models.people import Employee, EmployeeFilters, Student, StudentFilters
from educonsole.services.base import API_PREFIX, ResourceService


class EmployeeService(ResourceService):
    base_path = f"{API_PREFIX}/employees"
    model = Employee
    filters_model = EmployeeFilters
    items_key = "employees"
    update_method = "PUT"


class StudentService(ResourceService):
    base_path = f"{API_PREFIX}/students"
    model = Student
    filters_model = StudentFilters
    items_key = "students"
