"""Payment and feedback services."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from educonsole.models.billing import Feedback, FeedbackFilters, Payment, PaymentFilters
from educonsole.models.envelope import ApiResponse
from educonsole.services.base import API_PREFIX, WorkflowService


class PaymentService(WorkflowService):
    base_path = f"{API_PREFIX}/payments"
    model = Payment
    filters_model = PaymentFilters

    async def process(
        self, id: int, details: Mapping[str, Any] | None = None
    ) -> ApiResponse[Any]:
        return await self._action(id, "process", dict(details or {}), method="PATCH")

    async def refund(
        self, id: int, details: Mapping[str, Any] | None = None
    ) -> ApiResponse[Any]:
        return await self._action(id, "refund", dict(details or {}), method="PATCH")


class FeedbackService(WorkflowService):
    base_path = f"{API_PREFIX}/feedbacks"
    model = Feedback
    filters_model = FeedbackFilters

    async def review(
        self, id: int, details: Mapping[str, Any] | None = None
    ) -> ApiResponse[Any]:
        return await self._action(id, "review", dict(details or {}), method="PATCH")

    async def close(
        self, id: int, details: Mapping[str, Any] | None = None
    ) -> ApiResponse[Any]:
        return await self._action(id, "close", dict(details or {}), method="PATCH")
