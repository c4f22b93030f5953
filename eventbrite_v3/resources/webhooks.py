"""Webhook subscriptions."""

from dataclasses import dataclass
from typing import Optional

from eventbrite_v3.api.params import param
from eventbrite_v3.core.types import DeleteResult, Webhook, WebhooksResult


@dataclass
class WebhooksRequest:
    organization_id: str = param("organization_id")


@dataclass
class CreateWebhookRequest:
    endpoint_url: str = param("endpoint_url", required=True)
    # Defaults to order.placed, event.published and event.unpublished when empty.
    actions: str = param("actions")
    organization_id: str = param("organization_id")
    # Blank for all events
    event_id: str = param("event_id")


class WebhooksMixin:

    async def webhook_get(self, webhook_id: str, timeout: Optional[float] = None) -> Webhook:
        return await self.get_json(f"/webhooks/{webhook_id}/", result_type=Webhook, timeout=timeout)

    async def webhook_delete(self, webhook_id: str, timeout: Optional[float] = None) -> DeleteResult:
        return await self.delete_json(f"/webhooks/{webhook_id}/", result_type=DeleteResult, timeout=timeout)

    async def webhooks(
        self, req: Optional[WebhooksRequest] = None, timeout: Optional[float] = None
    ) -> WebhooksResult:
        """Webhooks owned by the authenticated user."""
        return await self.get_json("/webhooks/", req, result_type=WebhooksResult, timeout=timeout)

    async def webhook_create(self, req: CreateWebhookRequest, timeout: Optional[float] = None) -> Webhook:
        return await self.post_json("/webhooks/", req, result_type=Webhook, timeout=timeout)
