"""Orders placed against events."""

from typing import Optional

from eventbrite_v3.core.types import Order


class OrdersMixin:

    async def order_get(self, order_id: str, timeout: Optional[float] = None) -> Order:
        """Fetch one order. Only visible to the event owner and the buyer."""
        return await self.get_json(f"/orders/{order_id}/", result_type=Order, timeout=timeout)
