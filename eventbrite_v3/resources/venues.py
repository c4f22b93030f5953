"""Venues: locations where events happen."""

from dataclasses import dataclass
from typing import Optional

from eventbrite_v3.api.params import param
from eventbrite_v3.core.types import EventsResult, Venue


@dataclass
class UpdateVenueRequest:
    name: str = param("venue.name")
    # Leave empty to use the default organizer
    organizer_id: str = param("venue.organizer_id")
    address_1: str = param("venue.address.address_1")
    address_2: str = param("venue.address.address_2")
    city: str = param("venue.address.city")
    region: str = param("venue.address.region")
    postal_code: str = param("venue.address.postal_code")
    country: str = param("venue.address.country")
    latitude: Optional[float] = param("venue.address.latitude", default=None)
    longitude: Optional[float] = param("venue.address.longitude", default=None)
    age_restriction: str = param("venue.age_restriction")
    capacity: Optional[int] = param("venue.capacity", default=None)


@dataclass
class CreateVenueRequest(UpdateVenueRequest):
    name: str = param("venue.name", required=True)


@dataclass
class VenueEventsRequest:
    status: str = param("status")
    order_by: str = param("order_by")
    start_date_range_start: str = param("start_date.range_start")
    start_date_range_end: str = param("start_date.range_end")
    only_public: bool = param("only_public", default=False)


class VenuesMixin:

    async def venue_get(self, venue_id: str, timeout: Optional[float] = None) -> Venue:
        return await self.get_json(f"/venues/{venue_id}/", result_type=Venue, timeout=timeout)

    async def venue_update(
        self, venue_id: str, req: UpdateVenueRequest, timeout: Optional[float] = None
    ) -> Venue:
        return await self.post_json(f"/venues/{venue_id}/", req, result_type=Venue, timeout=timeout)

    async def venue_create(self, req: CreateVenueRequest, timeout: Optional[float] = None) -> Venue:
        """Create a venue with its address."""
        return await self.post_json("/venues/", req, result_type=Venue, timeout=timeout)

    async def venue_events(
        self,
        venue_id: str,
        req: Optional[VenueEventsRequest] = None,
        timeout: Optional[float] = None,
    ) -> EventsResult:
        return await self.get_json(
            f"/venues/{venue_id}/events/", req, result_type=EventsResult, timeout=timeout
        )
