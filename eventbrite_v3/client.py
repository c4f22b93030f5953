"""
Eventbrite Client
-----------------
One object exposing every supported endpoint.

Usage:
    config = ClientConfig.from_env()
    async with Eventbrite(config) as eb:
        me = await eb.user_me()
"""

from eventbrite_v3.api.client import APIClient
from eventbrite_v3.resources import (
    CategoriesMixin,
    EventsMixin,
    FormatsMixin,
    OrdersMixin,
    OrganizersMixin,
    SystemMixin,
    TrackingBeaconsMixin,
    UsersMixin,
    VenuesMixin,
    WebhooksMixin,
)


class Eventbrite(
    CategoriesMixin,
    EventsMixin,
    FormatsMixin,
    OrdersMixin,
    OrganizersMixin,
    SystemMixin,
    TrackingBeaconsMixin,
    UsersMixin,
    VenuesMixin,
    WebhooksMixin,
    APIClient,
):
    """Eventbrite v3 API client."""

    async def __aenter__(self) -> "Eventbrite":
        return self
