"""Pydantic schemas for API responses.

This module defines what the rendering surface receives for one menu page:
navigation entries, product sections and the empty-state signal. Schemas
are built from the engine's `MenuView` so every surface stays consistent
with the selection.
"""

from __future__ import annotations

from pydantic import BaseModel

from menu import Business, CategoryEntry, MenuSection, MenuView, Product
from shared.types import EmptyState, TaxonomyMode


# =============================================================================
# Navigation
# =============================================================================


class CategoryItem(BaseModel):
    """A category button / dropdown entry / pill."""

    label: str
    active: bool

    @classmethod
    def from_entry(cls, entry: CategoryEntry) -> CategoryItem:
        return cls(label=entry.label, active=entry.active)


# =============================================================================
# Products
# =============================================================================


class ProductItem(BaseModel):
    """A product card. `image` is never empty: a placeholder fills the gap."""

    key: str
    id: int | None = None
    name: str
    image: str
    description: str
    price: float
    group_name: str
    top_group_name: str | None = None

    @classmethod
    def from_product(cls, product: Product, placeholder_image: str) -> ProductItem:
        return cls(
            key=product.key,
            id=product.id,
            name=product.name,
            image=product.image_path or placeholder_image,
            description=product.description,
            price=product.price,
            group_name=product.group_name,
            top_group_name=product.top_group_name,
        )


class SectionItem(BaseModel):
    """A block of product cards, with a header in the aggregate view."""

    header: str | None = None
    products: list[ProductItem]

    @classmethod
    def from_section(cls, section: MenuSection, placeholder_image: str) -> SectionItem:
        return cls(
            header=section.label,
            products=[ProductItem.from_product(p, placeholder_image) for p in section.products],
        )


# =============================================================================
# Response Schemas
# =============================================================================


class BusinessInfo(BaseModel):
    """Header data: business name and resolved logo."""

    id: int
    name: str
    logo: str | None = None


class MenuResponse(BaseModel):
    """Response for the /menu/{short_name} endpoint.

    `empty_state` distinguishes a business without any products from a
    selection or search that matches nothing.
    """

    business: BusinessInfo
    mode: TaxonomyMode
    search: str
    location: str
    top_categories: list[CategoryItem]
    sub_categories: list[CategoryItem]
    sections: list[SectionItem]
    empty_state: EmptyState

    @classmethod
    def from_view(
        cls,
        view: MenuView,
        business: Business,
        logo: str | None,
        placeholder_image: str,
    ) -> MenuResponse:
        return cls(
            business=BusinessInfo(id=business.id, name=business.name, logo=logo),
            mode=view.mode,
            search=view.selection.search_term,
            location=view.categories.location_label,
            top_categories=[CategoryItem.from_entry(e) for e in view.categories.top_categories],
            sub_categories=[CategoryItem.from_entry(e) for e in view.categories.sub_categories],
            sections=[SectionItem.from_section(s, placeholder_image) for s in view.sections],
            empty_state=view.empty_state,
        )


class HealthResponse(BaseModel):
    status: str = "ok"
