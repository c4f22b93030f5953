"""
Response Types
--------------
Shared response shapes of the Eventbrite v3 API.

Fields the API leaves open (refund policies, tracking triggers, ...)
are typed as JsonValue instead of inventing structure.
Unknown keys are kept on the model (extra="allow").
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue


class APIModel(BaseModel):
    """Base for every decoded response."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Pagination(APIModel):
    """Present on every list response, supplied entirely by the API."""
    object_count: int = 0
    page_number: int = 0
    page_size: int = 0
    page_count: int = 0
    has_more_items: bool = False


class MultipartText(APIModel):
    """HTML field with a stripped text rendition."""
    text: Optional[str] = None
    html: Optional[str] = None


class DatetimeTz(APIModel):
    timezone: str = ""
    utc: str = ""
    local: str = ""


class Currency(APIModel):
    currency: str = ""
    value: float = 0
    display: str = ""


class Timezone(APIModel):
    id: str = ""
    timezone: str = ""
    label: str = ""


class Country(APIModel):
    code: str = ""
    label: str = ""


class Region(APIModel):
    country_code: str = ""
    code: str = ""
    label: str = ""


class Image(APIModel):
    id: str = ""
    url: Optional[str] = None


class Address(APIModel):
    address_1: Optional[str] = None
    address_2: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    localized_address_display: Optional[str] = None
    localized_area_display: Optional[str] = None
    localized_multi_line_address_display: List[JsonValue] = Field(default_factory=list)


class Venue(APIModel):
    id: str = ""
    name: Optional[str] = None
    address: Optional[Address] = None
    age_restriction: Optional[str] = None
    capacity: Optional[int] = None


class Organizer(APIModel):
    id: str = ""
    name: Optional[str] = None
    description: Optional[MultipartText] = None
    url: Optional[str] = None


class Email(APIModel):
    email: str = ""
    verified: bool = False
    primary: bool = False


class User(APIModel):
    id: str = ""
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    emails: List[Email] = Field(default_factory=list)


class Category(APIModel):
    """Top-level vertical, e.g. 'Music'."""
    id: str = ""
    name: str = ""
    name_localized: Optional[str] = None
    short_name: Optional[str] = None
    short_name_localized: Optional[str] = None
    # Only some endpoints include these.
    subcategories: List["SubCategory"] = Field(default_factory=list)


class SubCategory(APIModel):
    id: str = ""
    name: str = ""
    parent_category: Optional[Category] = None


class Format(APIModel):
    """Presentation type, e.g. 'seminar' or 'concert'."""
    id: str = ""
    name: str = Field(default="", alias="format")
    short_name: Optional[str] = None


class Event(APIModel):
    id: str = ""
    name: Optional[MultipartText] = None
    description: Optional[MultipartText] = None
    url: Optional[str] = None
    start: Optional[DatetimeTz] = None
    end: Optional[DatetimeTz] = None
    created: Optional[datetime] = None
    changed: Optional[datetime] = None
    status: Optional[str] = None  # canceled, live, started, ended, completed
    currency: Optional[str] = None
    online_event: bool = False
    venue: Optional[Venue] = None
    venue_id: Optional[str] = None
    organizer: Optional[Organizer] = None
    organizer_id: Optional[str] = None
    format: Optional[Format] = None
    format_id: Optional[str] = None
    category: Optional[Category] = None
    category_id: Optional[str] = None
    subcategory: Optional[SubCategory] = None
    subcategory_id: Optional[str] = None
    logo_id: Optional[str] = None
    logo: Optional[Image] = None
    refund_policy: JsonValue = None
    bookmark_info: JsonValue = None


class EventSettings(APIModel):
    """Display settings of an event listing."""
    show_start_date: bool = False
    show_end_date: bool = False
    show_start_end_time: bool = False
    show_timezone: bool = False
    show_map: bool = False
    show_remaining: bool = False
    show_organizer_facebook: bool = False
    show_organizer_twitter: bool = False
    show_facebook_friends_going: bool = False
    show_attendee_list: bool = False


class TicketClass(APIModel):
    id: str = ""
    name: str = ""
    description: Optional[str] = None
    cost: Optional[Currency] = None
    fee: Optional[Currency] = None
    donation: bool = False
    free: bool = False
    minimum_quantity: Optional[int] = None
    maximum_quantity: Optional[int] = None
    event_id: Optional[str] = None
    event: Optional[Event] = None
    # Only shown to the event owner
    quantity_total: Optional[int] = None
    quantity_sold: Optional[int] = None
    hidden: bool = False
    sales_start: Optional[str] = None
    sales_end: Optional[str] = None
    sales_start_after: Optional[str] = None
    include_fee: bool = False
    split_fee: bool = False
    hide_description: bool = False
    auto_hide: bool = False
    auto_hide_before: Optional[str] = None
    auto_hide_after: Optional[str] = None


class Webhook(APIModel):
    id: str = ""
    endpoint_url: str = ""
    actions: str = ""


class TrackingBeacon(APIModel):
    id: str = ""
    tracking_type: Optional[str] = None
    event_id: Optional[str] = None
    user_id: Optional[str] = None
    pixel_id: Optional[str] = None
    triggers: JsonValue = None


class OrderCosts(APIModel):
    gross: Optional[Currency] = None
    eventbrite_fee: Optional[Currency] = None
    payment_fee: Optional[Currency] = None
    tax: Optional[Currency] = None


class Order(APIModel):
    id: str = ""
    created: Optional[datetime] = None
    changed: Optional[datetime] = None
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    costs: Optional[OrderCosts] = None
    event: Optional[Event] = None
    event_id: Optional[str] = None
    refund_requests: JsonValue = None
    attendees: List[JsonValue] = Field(default_factory=list)
    time_remaining: Optional[int] = None


class DeleteResult(APIModel):
    deleted: bool = False


# -- list envelopes -----------------------------------------------------------

class CategoriesResult(APIModel):
    locale: Optional[str] = None
    pagination: Pagination = Field(default_factory=Pagination)
    categories: List[Category] = Field(default_factory=list)


class SubCategoriesResult(APIModel):
    locale: Optional[str] = None
    pagination: Pagination = Field(default_factory=Pagination)
    subcategories: List[SubCategory] = Field(default_factory=list)


class FormatsResult(APIModel):
    locale: Optional[str] = None
    formats: List[Format] = Field(default_factory=list)


class TimezonesResult(APIModel):
    locale: Optional[str] = None
    pagination: Pagination = Field(default_factory=Pagination)
    timezones: List[Timezone] = Field(default_factory=list)


class RegionsResult(APIModel):
    locale: Optional[str] = None
    pagination: Pagination = Field(default_factory=Pagination)
    regions: List[Region] = Field(default_factory=list)


class CountriesResult(APIModel):
    locale: Optional[str] = None
    pagination: Pagination = Field(default_factory=Pagination)
    countries: List[Country] = Field(default_factory=list)


class WebhooksResult(APIModel):
    pagination: Pagination = Field(default_factory=Pagination)
    webhooks: List[Webhook] = Field(default_factory=list)


class EventsResult(APIModel):
    pagination: Pagination = Field(default_factory=Pagination)
    events: List[Event] = Field(default_factory=list)


class EventSearchResult(EventsResult):
    top_match_events: List[Event] = Field(default_factory=list)


class TicketClassesResult(APIModel):
    pagination: Pagination = Field(default_factory=Pagination)
    ticket_classes: List[TicketClass] = Field(default_factory=list)


class TrackingBeaconsResult(APIModel):
    pagination: Pagination = Field(default_factory=Pagination)
    tracking_beacons: List[TrackingBeacon] = Field(default_factory=list)


Category.model_rebuild()
