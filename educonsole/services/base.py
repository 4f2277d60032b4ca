"""Shared entity-service template.

Every entity service is the same shape: a fixed ``base_path`` under
``/api/v1``, a filters model whose declared field order fixes the query
string, and a handful of CRUD calls proxied through ``ApiClient``. The
subclasses only declare those class attributes plus entity-specific actions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ValidationError

from educonsole.client import ApiClient
from educonsole.models.common import ListFilters
from educonsole.models.envelope import ApiResponse, PaginatedData, extract_page

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

# Paging and ordering are meaningless for CSV exports.
EXPORT_EXCLUDED_PARAMS = frozenset({"page", "limit", "sortBy", "sortOrder"})

Filters = ListFilters | Mapping[str, Any] | None


def filter_params(
    filters_model: type[ListFilters] | None,
    filters: ListFilters | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Turn *filters* into ordered query parameters.

    Only fields that are set (not ``None``) are emitted, in the filters
    model's declared order, under their wire names. Keyword *overrides*
    replace individual fields and are validated like the rest.
    """
    if filters_model is None:
        params = dict(filters or {})
        params.update(overrides)
        return {key: value for key, value in params.items() if value is not None}

    # Wire names win over field names on validation, so normalize first.
    if isinstance(filters, BaseModel):
        values = filters.model_dump(exclude_none=True)
    else:
        values = filters_model.model_validate(dict(filters or {})).model_dump(
            exclude_none=True
        )
    values.update(overrides)
    model = filters_model.model_validate(values)

    params = {}
    for name, field in filters_model.model_fields.items():
        value = getattr(model, name)
        if value is None:
            continue
        params[field.alias or name] = value
    return params


class ReadOnlyService:
    """List and fetch-by-id for one entity.

    Class attributes
    ----------------
    base_path:
        Full path of the collection, e.g. ``/api/v1/students``.
    model:
        Pydantic model used to parse single rows and list pages.
    filters_model:
        ``ListFilters`` subclass accepted by ``list``.
    items_key:
        Name of the row array when the server nests list results as
        ``{<items_key>: [...], pagination: {...}}``.
    """

    base_path: ClassVar[str] = ""
    model: ClassVar[type[BaseModel] | None] = None
    filters_model: ClassVar[type[ListFilters] | None] = None
    items_key: ClassVar[str | None] = None

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    @property
    def client(self) -> ApiClient:
        return self._client

    def _path(self, *parts: object) -> str:
        return "/".join([self.base_path, *(str(part) for part in parts)])

    def query_params(
        self,
        filters: ListFilters | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> dict[str, Any]:
        return filter_params(self.filters_model, filters, **overrides)

    async def list(
        self,
        filters: ListFilters | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> ApiResponse[Any]:
        """Fetch one page. The envelope is returned exactly as the server sent it."""
        return await self._client.get(
            self.base_path, params=self.query_params(filters, **overrides)
        )

    async def list_page(
        self,
        filters: ListFilters | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> PaginatedData[Any] | None:
        """Fetch one page normalized to ``PaginatedData`` with parsed rows.

        Rows that do not fit the model are kept as raw mappings. Returns None
        when the call failed or the payload has no row array.
        """
        envelope = await self.list(filters, **overrides)
        page = extract_page(envelope, self.items_key)
        if page is None:
            if envelope.success:
                logger.warning(
                    "Unrecognized list payload from %s", self.base_path
                )
            return None
        if self.model is not None:
            page.data = [self._parse_row(row) for row in page.data]
        return page

    def _parse_row(self, row: Any) -> Any:
        """Parse one list row into ``model``; a row that does not fit stays raw."""
        if not isinstance(row, Mapping):
            return row
        try:
            return self.model.model_validate(row)
        except ValidationError as exc:
            logger.warning(
                "Row from %s does not match %s (%d errors); keeping raw data",
                self.base_path,
                self.model.__name__,
                exc.error_count(),
            )
            return row

    async def get(self, id: int | str) -> ApiResponse[Any]:
        return await self._client.get(self._path(id), data_type=self.model)


class ResourceService(ReadOnlyService):
    """Full CRUD with the three-tier delete convention.

    ``update_method`` is PATCH for most entities; a few endpoints take PUT.
    """

    update_method: ClassVar[str] = "PATCH"

    async def create(self, body: BaseModel | Mapping[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(self.base_path, body, data_type=self.model)

    async def update(
        self, id: int | str, body: BaseModel | Mapping[str, Any]
    ) -> ApiResponse[Any]:
        return await self._client.request(
            self.update_method, self._path(id), body, data_type=self.model
        )

    async def delete(self, id: int | str) -> ApiResponse[Any]:
        """Soft delete: the row is hidden but can be restored."""
        return await self._client.delete(self._path(id))

    soft_delete = delete

    async def restore(self, id: int | str) -> ApiResponse[Any]:
        return await self._client.post(self._path(id, "restore"), data_type=self.model)

    async def force_delete(self, id: int | str) -> ApiResponse[Any]:
        return await self._client.delete(self._path(id, "force"))

    async def _action(
        self,
        id: int | str,
        action: str,
        body: BaseModel | Mapping[str, Any] | None = None,
        method: str = "POST",
    ) -> ApiResponse[Any]:
        """Named remote procedure on one row: ``<method> base/{id}/{action}``."""
        return await self._client.request(
            method, self._path(id, action), body, data_type=self.model
        )


class WorkflowService(ResourceService):
    """Resources with a status workflow, bulk delete, CSV export and stats."""

    async def bulk_delete(self, ids: list[int]) -> ApiResponse[Any]:
        return await self._client.post(self._path("bulk-delete"), {"ids": list(ids)})

    async def update_status(self, id: int | str, status: Any) -> ApiResponse[Any]:
        return await self._action(id, "status", {"status": status}, method="PATCH")

    async def export(
        self,
        filters: ListFilters | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> bytes:
        """Download the filtered rows as CSV.

        Raises
        ------
        ExportError
            If the export endpoint fails.
        """
        params = self.query_params(filters, **overrides)
        for key in EXPORT_EXCLUDED_PARAMS:
            params.pop(key, None)
        return await self._client.download(self._path("export"), params=params)

    async def stats(self) -> ApiResponse[Any]:
        return await self._client.get(self._path("stats"))
