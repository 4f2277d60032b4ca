"""Role (RBAC) and audit-log services."""

from __future__ import annotations

from typing import Any

from educonsole.models.access import (
    AuditExport,
    AuditLog,
    AuditLogFilters,
    ModuleActions,
    Role,
    RoleFilters,
)
from educonsole.models.envelope import ApiResponse
from educonsole.services.base import (
    API_PREFIX,
    EXPORT_EXCLUDED_PARAMS,
    Filters,
    ReadOnlyService,
    ResourceService,
)


class RoleService(ResourceService):
    base_path = f"{API_PREFIX}/rbac/roles"
    model = Role
    filters_model = RoleFilters
    items_key = "roles"

    async def get_by_name(self, name: str) -> ApiResponse[Any]:
        return await self._client.get(self._path("name", name), data_type=Role)

    async def actions(self, role_name: str, module_name: str) -> ApiResponse[Any]:
        """Actions *role_name* may perform in *module_name*."""
        return await self._client.get(
            self._path(role_name, "actions", module_name), data_type=ModuleActions
        )


class AuditLogService(ReadOnlyService):
    """Audit trail. Rows are written by the server only."""

    base_path = f"{API_PREFIX}/audit-logs"
    model = AuditLog
    filters_model = AuditLogFilters

    async def for_entity(
        self, entity_type: str, entity_id: int, filters: Filters = None
    ) -> ApiResponse[Any]:
        params = self.query_params(filters)
        params.pop("entityType", None)
        params.pop("entityId", None)
        return await self._client.get(
            self._path("entity", entity_type, entity_id), params=params
        )

    async def for_user(self, user_id: int, filters: Filters = None) -> ApiResponse[Any]:
        params = self.query_params(filters)
        params.pop("userId", None)
        return await self._client.get(self._path("user", user_id), params=params)

    async def export(self, filters: Filters = None, **overrides: Any) -> ApiResponse[Any]:
        """Request a server-side export; the envelope carries ``downloadUrl``."""
        params = self.query_params(filters, **overrides)
        for key in EXPORT_EXCLUDED_PARAMS:
            params.pop(key, None)
        return await self._client.get(
            self._path("export"), params=params, data_type=AuditExport
        )
