"""Shared base models.

The remote API speaks camelCase JSON. Models keep snake_case attribute names
and map them to the wire names through an alias generator, so
``status_code`` round-trips as ``statusCode``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for records exchanged with the REST API.

    Unknown fields are kept: the server owns the schema and may add columns
    this client does not know about yet.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump using wire names, dropping unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class RequestModel(WireModel):
    """Base for create/update request bodies."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class ListFilters(BaseModel):
    """Base for list-endpoint filters.

    Field declaration order is the order parameters appear in the query
    string. ``None`` means "not set" and is never sent.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class AuditedModel(WireModel):
    """Entity row carrying the soft-delete and audit columns."""

    id: int
    created_at: str | None = None
    updated_at: str | None = None
    deleted_at: str | None = None
    created_by: int | None = None
    updated_by: int | None = None
    deleted_by: int | None = None


class EntityRef(WireModel):
    """Minimal nested reference (``{id, name}``) embedded in joined rows."""

    id: int
    name: str | None = None
