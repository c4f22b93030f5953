# Resources - one mixin per API resource, each a thin layer over the transport core

from .categories import CategoriesMixin
from .events import (
    EventsMixin, EventSearchRequest, EventCreateRequest, EventUpdateRequest,
    EventUpdateDisplaySettings, EventGetTicketClasses, EventTicketClassRequest,
)
from .formats import FormatsMixin
from .orders import OrdersMixin
from .organizers import (
    OrganizersMixin, CreateOrganizerRequest, UpdateOrganizerRequest, OrganizerEventsRequest,
)
from .system import SystemMixin
from .tracking_beacons import TrackingBeaconsMixin, TrackingBeaconRequest, GetTrackingBeaconRequest
from .users import UsersMixin, UserOwnedEventsRequest
from .venues import VenuesMixin, CreateVenueRequest, UpdateVenueRequest, VenueEventsRequest
from .webhooks import WebhooksMixin, WebhooksRequest, CreateWebhookRequest

__all__ = [
    "CategoriesMixin",
    "EventsMixin", "EventSearchRequest", "EventCreateRequest", "EventUpdateRequest",
    "EventUpdateDisplaySettings", "EventGetTicketClasses", "EventTicketClassRequest",
    "FormatsMixin",
    "OrdersMixin",
    "OrganizersMixin", "CreateOrganizerRequest", "UpdateOrganizerRequest", "OrganizerEventsRequest",
    "SystemMixin",
    "TrackingBeaconsMixin", "TrackingBeaconRequest", "GetTrackingBeaconRequest",
    "UsersMixin", "UserOwnedEventsRequest",
    "VenuesMixin", "CreateVenueRequest", "UpdateVenueRequest", "VenueEventsRequest",
    "WebhooksMixin", "WebhooksRequest", "CreateWebhookRequest",
]
