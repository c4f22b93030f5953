"""Organizers: the public owner profile shown on events."""

from dataclasses import dataclass
from typing import Optional

from eventbrite_v3.api.params import param
from eventbrite_v3.core.types import EventsResult, Organizer


@dataclass
class UpdateOrganizerRequest:
    name: str = param("organizer.name")
    description: str = param("organizer.description.html")
    long_description: str = param("organizer.long_description.html")
    logo_id: str = param("organizer.logo.id")
    website: str = param("organizer.website")
    twitter: str = param("organizer.twitter")
    facebook: str = param("organizer.facebook")
    instagram: str = param("organizer.instagram")


@dataclass
class CreateOrganizerRequest(UpdateOrganizerRequest):
    name: str = param("organizer.name", required=True)


@dataclass
class OrganizerEventsRequest:
    # Comma delimited: all, draft, live, canceled, started, ended
    status: str = param("status")
    order_by: str = param("order_by")
    start_date_range_start: str = param("start_date.range_start")
    start_date_range_end: str = param("start_date.range_end")
    only_public: bool = param("only_public", default=False)


class OrganizersMixin:

    async def organizer_create(self, req: CreateOrganizerRequest, timeout: Optional[float] = None) -> Organizer:
        return await self.post_json("/organizers/", req, result_type=Organizer, timeout=timeout)

    async def organizer_get(self, organizer_id: str, timeout: Optional[float] = None) -> Organizer:
        return await self.get_json(f"/organizers/{organizer_id}/", result_type=Organizer, timeout=timeout)

    async def organizer_update(
        self, organizer_id: str, req: UpdateOrganizerRequest, timeout: Optional[float] = None
    ) -> Organizer:
        return await self.post_json(
            f"/organizers/{organizer_id}/", req, result_type=Organizer, timeout=timeout
        )

    async def organizer_get_events(
        self,
        organizer_id: str,
        req: Optional[OrganizerEventsRequest] = None,
        timeout: Optional[float] = None,
    ) -> EventsResult:
        return await self.get_json(
            f"/organizers/{organizer_id}/events/", req, result_type=EventsResult, timeout=timeout
        )
