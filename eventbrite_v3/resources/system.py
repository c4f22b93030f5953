"""System reference lists: timezones, regions, countries."""

from typing import Optional

from eventbrite_v3.core.types import CountriesResult, RegionsResult, TimezonesResult


class SystemMixin:

    async def timezones(self, timeout: Optional[float] = None) -> TimezonesResult:
        """Paginated list of timezones."""
        return await self.get_json("/system/timezones/", result_type=TimezonesResult, timeout=timeout)

    async def regions(self, timeout: Optional[float] = None) -> RegionsResult:
        """Single page of regions."""
        return await self.get_json("/system/regions/", result_type=RegionsResult, timeout=timeout)

    async def countries(self, timeout: Optional[float] = None) -> CountriesResult:
        """Single page of countries."""
        return await self.get_json("/system/countries/", result_type=CountriesResult, timeout=timeout)
