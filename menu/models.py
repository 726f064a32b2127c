"""Pydantic models for records received from the upstream menu service.

The upstream speaks Turkish field names (`urunAdi`, `grupIsim`, ...). Models
keep them as aliases and expose English attribute names to the engine.
Optional fields stay `None` when absent: the presence of `ustGrupIsim`
switches the whole menu to hierarchical mode, so it must never be defaulted.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class Product(BaseModel):
    """A single menu item as delivered by the upstream service."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    name: str = Field(default="", alias="urunAdi")
    image_path: str = Field(default="", alias="resimYolu")
    description: str = Field(default="", alias="aciklama")
    price: float = Field(default=0, alias="fiyat")
    group_name: str = Field(default="", alias="grupIsim")
    id: int | None = None
    top_group_name: str | None = Field(default=None, alias="ustGrupIsim")
    top_group_id: int | None = Field(default=None, alias="ustGrupId")
    group_id: int | None = Field(default=None, alias="grupId")
    order: float | None = Field(default=None, alias="sira")

    @field_validator("name", "image_path", "description", "group_name", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        # A missing group still forms a (visible) category named ""
        return "" if value is None else value

    @property
    def key(self) -> str:
        """UI identity of the product."""
        return f"{self.group_name}-{self.name}"


def parse_products(records: list[Any]) -> list[Product]:
    """Validate upstream records one by one.

    Records that cannot be validated at all are logged and skipped so a
    single broken item never empties the whole menu.

    Args:
        records: Raw JSON records from the `urunler` array.

    Returns:
        Products in source order.
    """
    products: list[Product] = []
    for index, record in enumerate(records):
        try:
            products.append(Product.model_validate(record))
        except ValidationError as e:
            logger.warning("Skipping product record %d: %s", index, e)
    return products


class Business(BaseModel):
    """Business (restaurant) owning a menu."""

    id: int
    name: str
    short_name: str
    logo: str | None = None


# =============================================================================
# Upstream envelopes
# =============================================================================


class BusinessRecord(BaseModel):
    """One entry of the `isletmeler` array."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    name: str | None = Field(default=None, alias="isletmeAdi")
    short_name: str | None = Field(default=None, alias="kisaAdi")
    logo: str | None = None


class BusinessResponse(BaseModel):
    """Response of `GET /isletmeler/{short_name}`."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    success: bool = Field(default=False, alias="basarili")
    error_message: str | None = Field(default=None, alias="hataMesaj")
    businesses: list[BusinessRecord] = Field(default_factory=list, alias="isletmeler")


class ProductListResponse(BaseModel):
    """Response of `POST /urunler/getir`. Records are validated separately."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    products: list[Any] | None = Field(default=None, alias="urunler")
