"""Users: the account behind the token, and events it owns."""

from dataclasses import dataclass
from typing import Optional

from eventbrite_v3.api.params import param
from eventbrite_v3.core.types import EventsResult, User


@dataclass
class UserOwnedEventsRequest:
    # start_asc, start_desc, created_asc, created_desc, name_asc or name_desc
    order_by: str = param("order_by")
    show_series_parent: bool = param("show_series_parent", default=False)
    # Comma delimited: all, draft, live, canceled, started, ended
    status: str = param("status")


class UsersMixin:

    async def user_me(self, timeout: Optional[float] = None) -> User:
        """The user owning the configured token."""
        return await self.get_json("/users/me/", result_type=User, timeout=timeout)

    async def user_get(self, user_id: str, timeout: Optional[float] = None) -> User:
        return await self.get_json(f"/users/{user_id}/", result_type=User, timeout=timeout)

    async def user_owned_events(
        self,
        user_id: str,
        req: Optional[UserOwnedEventsRequest] = None,
        timeout: Optional[float] = None,
    ) -> EventsResult:
        return await self.get_json(
            f"/users/{user_id}/owned_events/", req, result_type=EventsResult, timeout=timeout
        )
