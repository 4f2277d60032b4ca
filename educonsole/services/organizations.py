"""Organization and center services."""

from __future__ import annotations

from typing import Any

from educonsole.models.envelope import ApiResponse
from educonsole.models.organization import (
    Center,
    CenterFilters,
    Organization,
    OrganizationFilters,
    OrganizationOption,
)
from educonsole.services.base import API_PREFIX, ResourceService


class OrganizationService(ResourceService):
    base_path = f"{API_PREFIX}/organizations"
    model = Organization
    filters_model = OrganizationFilters
    items_key = "organizations"
    update_method = "PUT"

    async def selector(self) -> ApiResponse[Any]:
        """``{id, name}`` pairs for dropdowns."""
        return await self._client.get(
            self._path("selector"), data_type=list[OrganizationOption]
        )


class CenterService(ResourceService):
    base_path = f"{API_PREFIX}/centers"
    model = Center
    filters_model = CenterFilters
    items_key = "centers"
