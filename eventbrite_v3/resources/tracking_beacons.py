"""Tracking beacons: third party pixels fired on event pages."""

from dataclasses import dataclass
from typing import Any, Optional

from eventbrite_v3.api.params import param
from eventbrite_v3.core.types import DeleteResult, TrackingBeacon, TrackingBeaconsResult


@dataclass
class TrackingBeaconRequest:
    """
    Body for creating or updating a beacon.

    Either event_id or user_id must be set: event_id fires the pixel for
    that event only, user_id for every event the user organizes.
    """
    # Facebook Pixel, Twitter Ads, AdWords, Google Analytics, Simple Image Pixel, Adroll iPixel
    tracking_type: str = param("tracking_type", required=True)
    event_id: str = param("event_id")
    user_id: str = param("user_id")
    pixel_id: str = param("pixel_id")
    triggers: Any = param("triggers", default=None)


@dataclass
class GetTrackingBeaconRequest:
    return_fmt: str = param("return_fmt")


class TrackingBeaconsMixin:

    async def tracking_beacon_create(
        self, req: TrackingBeaconRequest, timeout: Optional[float] = None
    ) -> TrackingBeacon:
        return await self.post_json("/tracking_beacons/", req, result_type=TrackingBeacon, timeout=timeout)

    async def tracking_beacon_get(
        self,
        beacon_id: str,
        req: Optional[GetTrackingBeaconRequest] = None,
        timeout: Optional[float] = None,
    ) -> TrackingBeacon:
        return await self.get_json(
            f"/tracking_beacons/{beacon_id}/", req, result_type=TrackingBeacon, timeout=timeout
        )

    async def tracking_beacon_update(
        self, beacon_id: str, req: TrackingBeaconRequest, timeout: Optional[float] = None
    ) -> TrackingBeacon:
        return await self.post_json(
            f"/tracking_beacons/{beacon_id}/", req, result_type=TrackingBeacon, timeout=timeout
        )

    async def tracking_beacon_delete(self, beacon_id: str, timeout: Optional[float] = None) -> DeleteResult:
        return await self.delete_json(
            f"/tracking_beacons/{beacon_id}/", result_type=DeleteResult, timeout=timeout
        )

    async def tracking_beacons_for_event(
        self,
        event_id: str,
        req: Optional[GetTrackingBeaconRequest] = None,
        timeout: Optional[float] = None,
    ) -> TrackingBeaconsResult:
        return await self.get_json(
            f"/events/{event_id}/tracking_beacons/", req, result_type=TrackingBeaconsResult, timeout=timeout
        )

    async def tracking_beacons_for_user(
        self,
        user_id: str,
        req: Optional[GetTrackingBeaconRequest] = None,
        timeout: Optional[float] = None,
    ) -> TrackingBeaconsResult:
        return await self.get_json(
            f"/users/{user_id}/tracking_beacons/", req, result_type=TrackingBeaconsResult, timeout=timeout
        )
