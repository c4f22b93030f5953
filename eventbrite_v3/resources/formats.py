"""Event formats (seminar, concert, ...)."""

from typing import Optional

from eventbrite_v3.core.types import Format, FormatsResult


class FormatsMixin:

    async def formats(self, timeout: Optional[float] = None) -> FormatsResult:
        return await self.get_json("/formats/", result_type=FormatsResult, timeout=timeout)

    async def format(self, format_id: str, timeout: Optional[float] = None) -> Format:
        return await self.get_json(f"/formats/{format_id}/", result_type=Format, timeout=timeout)
