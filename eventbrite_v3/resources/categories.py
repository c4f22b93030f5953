"""Categories and subcategories."""

from typing import Optional

from eventbrite_v3.core.types import (
    CategoriesResult,
    Category,
    SubCategoriesResult,
    SubCategory,
)


class CategoriesMixin:

    async def categories(self, timeout: Optional[float] = None) -> CategoriesResult:
        """List categories, subcategories nested."""
        return await self.get_json("/categories/", result_type=CategoriesResult, timeout=timeout)

    async def category(self, category_id: str, timeout: Optional[float] = None) -> Category:
        return await self.get_json(f"/categories/{category_id}/", result_type=Category, timeout=timeout)

    async def subcategories(self, timeout: Optional[float] = None) -> SubCategoriesResult:
        return await self.get_json("/subcategories/", result_type=SubCategoriesResult, timeout=timeout)

    async def subcategory(self, subcategory_id: str, timeout: Optional[float] = None) -> SubCategory:
        return await self.get_json(
            f"/subcategories/{subcategory_id}/", result_type=SubCategory, timeout=timeout
        )
