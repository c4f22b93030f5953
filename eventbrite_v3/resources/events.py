"""
Events
------
Search, lifecycle (create/update/publish/cancel/delete), display
settings and ticket classes of events.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional

from eventbrite_v3.api.params import param
from eventbrite_v3.core.types import (
    DeleteResult,
    Event,
    EventSearchResult,
    EventSettings,
    TicketClass,
    TicketClassesResult,
)


@dataclass
class EventSearchRequest:
    """Public event search across the whole directory."""
    query: str = param("q")
    # date, distance or best; prefix with '-' to reverse
    sort_by: str = param("sort_by")
    location_address: str = param("location.address")
    # integer followed by 'mi' or 'km'
    location_within: str = param("location.within")
    location_latitude: str = param("location.latitude")
    location_longitude: str = param("location.longitude")
    viewport_northeast_latitude: str = param("location.viewport.northeast.latitude")
    viewport_northeast_longitude: str = param("location.viewport.northeast.longitude")
    viewport_southwest_latitude: str = param("location.viewport.southwest.latitude")
    viewport_southwest_longitude: str = param("location.viewport.southwest.longitude")
    organizer_id: str = param("organizer.id")
    user_id: str = param("user.id")
    tracking_code: str = param("tracking_code")
    # Comma delimited ID lists
    categories: str = param("categories")
    subcategories: str = param("subcategories")
    formats: str = param("formats")
    # free or paid
    price: str = param("price")
    start_date_range_start: str = param("start_date.range_start")
    start_date_range_end: str = param("start_date.range_end")
    # this_week, next_week, this_weekend, next_month, this_month, tomorrow, today
    start_date_keyword: str = param("start_date.keyword")
    date_modified_range_start: str = param("date_modified.range_start")
    date_modified_range_end: str = param("date_modified.range_end")
    date_modified_keyword: str = param("date_modified.keyword")
    search_type: str = param("search_type")
    include_all_series_instances: bool = param("include_all_series_instances", default=False)
    include_unavailable_events: bool = param("include_unavailable_events", default=False)
    include_adult_events: bool = param("include_adult_events", default=False)
    incorporate_user_affinities: bool = param("incorporate_user_affinities", default=False)
    high_affinity_categories: str = param("high_affinity_categories")
    page: Optional[int] = param("page", default=None)


@dataclass
class EventCreateRequest:
    name_html: str = param("event.name.html", required=True)
    description_html: str = param("event.description.html")
    organizer_id: str = param("event.organizer_id")
    start_utc: Optional[datetime] = param("event.start.utc", required=True, default=None)
    # Olson format
    start_timezone: str = param("event.start.timezone", required=True)
    end_utc: Optional[datetime] = param("event.end.utc", required=True, default=None)
    end_timezone: str = param("event.end.timezone", required=True)
    hide_start_date: bool = param("event.hide_start_date", default=False)
    hide_end_date: bool = param("event.hide_end_date", default=False)
    # 3 letter code
    currency: str = param("event.currency", required=True)
    # Omit when online_event is set
    venue_id: str = param("event.venue_id")
    online_event: bool = param("event.online_event", default=False)
    listed: bool = param("event.listed", default=True)
    logo_id: str = param("event.logo_id")
    category_id: str = param("event.category_id")
    subcategory_id: str = param("event.subcategory_id")
    format_id: str = param("event.format_id")
    shareable: bool = param("event.shareable", default=False)
    invite_only: bool = param("event.invite_only", default=False)
    password: str = param("event.password")
    # Sums ticket capacities when omitted
    capacity: Optional[int] = param("event.capacity", default=None)
    show_remaining: bool = param("event.show_remaining", default=False)
    is_reserved_seating: bool = param("event.is_reserved_seating", default=False)
    source: str = param("event.source")


@dataclass
class EventUpdateRequest:
    name_html: str = param("event.name.html")
    description_html: str = param("event.description.html")
    organizer_id: str = param("event.organizer_id")
    start_utc: Optional[datetime] = param("event.start.utc", default=None)
    start_timezone: str = param("event.start.timezone")
    end_utc: Optional[datetime] = param("event.end.utc", default=None)
    end_timezone: str = param("event.end.timezone")
    currency: str = param("event.currency")
    venue_id: str = param("event.venue_id")
    online_event: bool = param("event.online_event", default=False)
    listed: bool = param("event.listed", default=True)
    logo_id: str = param("event.logo_id")
    category_id: str = param("event.category_id")
    subcategory_id: str = param("event.subcategory_id")
    format_id: str = param("event.format_id")
    password: str = param("event.password")
    capacity: Optional[int] = param("event.capacity", default=None)
    source: str = param("event.source")


@dataclass
class EventUpdateDisplaySettings:
    show_start_date: bool = param("display_settings.show_start_date", default=False)
    show_end_date: bool = param("display_settings.show_end_date", default=False)
    show_start_end_time: bool = param("display_settings.show_start_end_time", default=False)
    show_timezone: bool = param("display_settings.show_timezone", default=False)
    show_map: bool = param("display_settings.show_map", default=False)
    show_remaining: bool = param("display_settings.show_remaining", default=False)
    show_organizer_facebook: bool = param("display_settings.show_organizer_facebook", default=False)
    show_organizer_twitter: bool = param("display_settings.show_organizer_twitter", default=False)
    show_facebook_friends_going: bool = param("display_settings.show_facebook_friends_going", default=False)
    show_attendee_list: bool = param("display_settings.show_attendee_list", default=False)


@dataclass
class EventGetTicketClasses:
    # online or at_the_door
    pos: str = param("pos")


@dataclass
class EventTicketClassRequest:
    """Body for creating or updating a ticket class."""
    name: str = param("ticket_class.name")
    description: str = param("ticket_class.description")
    quantity_total: Optional[int] = param("ticket_class.quantity_total", default=None)
    # Currency and minor units, e.g. 'USD,4500' for $45
    cost: str = param("ticket_class.cost")
    donation: bool = param("ticket_class.donation", default=False)
    free: bool = param("ticket_class.free", default=False)
    include_fee: bool = param("ticket_class.include_fee", default=False)
    split_fee: bool = param("ticket_class.split_fee", default=False)
    hide_description: bool = param("ticket_class.hide_description", default=False)
    # ["online"], ["online", "atd"] or ["atd"]
    sales_channels: List[str] = param("ticket_class.sales_channels", default_factory=list)
    sales_start: str = param("ticket_class.sales_start")
    sales_end: str = param("ticket_class.sales_end")
    sales_start_after: str = param("ticket_class.sales_start_after")
    minimum_quantity: Optional[int] = param("ticket_class.minimum_quantity", default=None)
    maximum_quantity: Optional[int] = param("ticket_class.maximum_quantity", default=None)
    hidden: bool = param("ticket_class.hidden", default=False)
    auto_hide: bool = param("ticket_class.auto_hide", default=False)
    auto_hide_before: str = param("ticket_class.auto_hide_before")
    auto_hide_after: str = param("ticket_class.auto_hide_after")
    order_confirmation_message: str = param("ticket_class.order_confirmation_message")


class EventsMixin:

    async def event_search(self, req: EventSearchRequest, timeout: Optional[float] = None) -> EventSearchResult:
        """Paginated public events, regardless of owner."""
        return await self.get_json("/events/search/", req, result_type=EventSearchResult, timeout=timeout)

    async def event_get(self, event_id: str, timeout: Optional[float] = None) -> Event:
        return await self.get_json(f"/events/{event_id}/", result_type=Event, timeout=timeout)

    async def event_create(self, req: EventCreateRequest, timeout: Optional[float] = None) -> Event:
        return await self.post_json("/events/", req, result_type=Event, timeout=timeout)

    async def event_update(
        self, event_id: str, req: EventUpdateRequest, timeout: Optional[float] = None
    ) -> Event:
        return await self.post_json(f"/events/{event_id}/", req, result_type=Event, timeout=timeout)

    async def event_publish(self, event_id: str, timeout: Optional[float] = None) -> Any:
        """Publish an event. Returns {"published": bool}."""
        return await self.post_json(f"/events/{event_id}/publish/", timeout=timeout)

    async def event_unpublish(self, event_id: str, timeout: Optional[float] = None) -> Any:
        """Unpublish an event. Returns {"unpublished": bool}."""
        return await self.post_json(f"/events/{event_id}/unpublish/", timeout=timeout)

    async def event_cancel(self, event_id: str, timeout: Optional[float] = None) -> Any:
        """Cancel an event if it has no pending or completed orders. Returns {"canceled": bool}."""
        return await self.post_json(f"/events/{event_id}/cancel/", timeout=timeout)

    async def event_delete(self, event_id: str, timeout: Optional[float] = None) -> DeleteResult:
        """Delete an event if it has no pending or completed orders."""
        return await self.delete_json(f"/events/{event_id}/", result_type=DeleteResult, timeout=timeout)

    async def event_get_display_settings(self, event_id: str, timeout: Optional[float] = None) -> EventSettings:
        return await self.get_json(
            f"/events/{event_id}/display_settings/", result_type=EventSettings, timeout=timeout
        )

    async def event_update_display_settings(
        self, event_id: str, settings: EventUpdateDisplaySettings, timeout: Optional[float] = None
    ) -> EventSettings:
        return await self.post_json(
            f"/events/{event_id}/display_settings/", settings, result_type=EventSettings, timeout=timeout
        )

    async def event_get_ticket_classes(
        self,
        event_id: str,
        req: Optional[EventGetTicketClasses] = None,
        timeout: Optional[float] = None,
    ) -> TicketClassesResult:
        return await self.get_json(
            f"/events/{event_id}/ticket_classes/", req, result_type=TicketClassesResult, timeout=timeout
        )

    async def event_create_ticket_class(
        self, event_id: str, req: EventTicketClassRequest, timeout: Optional[float] = None
    ) -> TicketClass:
        return await self.post_json(
            f"/events/{event_id}/ticket_classes/", req, result_type=TicketClass, timeout=timeout
        )

    async def event_get_ticket_class(
        self, event_id: str, ticket_class_id: str, timeout: Optional[float] = None
    ) -> TicketClass:
        return await self.get_json(
            f"/events/{event_id}/ticket_classes/{ticket_class_id}/", result_type=TicketClass, timeout=timeout
        )

    async def event_update_ticket_class(
        self,
        event_id: str,
        ticket_class_id: str,
        req: EventTicketClassRequest,
        timeout: Optional[float] = None,
    ) -> TicketClass:
        return await self.post_json(
            f"/events/{event_id}/ticket_classes/{ticket_class_id}/", req,
            result_type=TicketClass, timeout=timeout,
        )

    async def event_delete_ticket_class(
        self, event_id: str, ticket_class_id: str, timeout: Optional[float] = None
    ) -> DeleteResult:
        """Delete a ticket class. Fails if other classes' sales depend on it."""
        return await self.delete_json(
            f"/events/{event_id}/ticket_classes/{ticket_class_id}/", result_type=DeleteResult, timeout=timeout
        )
