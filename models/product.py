"""
Product schemas built from the stock feed.

A ProductGroup is one catalog product (one ean + color); its variants are
the sizes. The ``to_*_payload`` helpers produce the JSON bodies the catalog
API expects.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from models.base import BaseSchema


SIZE_OPTION_NAME = "Size"
VARIANT_WEIGHT = 0.1
PRODUCT_WEIGHT = 0


class ProductOption(BaseSchema):
    """Option value attached to a variant (always a size)."""

    label: str = Field(..., description="Option value, e.g. 'M'")
    option_id: int = Field(default=0, description="Not sent on create")
    option_display_name: str = Field(default=SIZE_OPTION_NAME)

    def to_payload(self) -> dict:
        return {
            "label": self.label,
            "option_display_name": self.option_display_name,
        }


class ProductVariant(BaseSchema):
    """
    One size of a product group.

    SKU is ``{ean}-{color}-{size}`` so it never clashes with the parent SKU.
    """

    sku: str = Field(..., description="Variant SKU")
    price: Decimal = Field(default=Decimal("0"))
    mpn: str = Field(..., description="Manufacturer part number (feed EAN)")
    inventory_level: int = Field(..., ge=0)
    option_values: list[ProductOption] = Field(default_factory=list)

    @property
    def size(self) -> str:
        """Size label, empty when the feed row had none."""
        return self.option_values[0].label if self.option_values else ""

    @property
    def in_stock(self) -> bool:
        return self.inventory_level > 0

    def to_create_payload(self) -> dict:
        """Variant body embedded in a product create request."""
        return {
            "price": float(self.price),
            "weight": VARIANT_WEIGHT,
            "sku": self.sku,
            "mpn": self.mpn,
            "inventory_level": self.inventory_level,
            "option_values": [o.to_payload() for o in self.option_values[:1]],
        }

    def to_variant_create_payload(self, product_id: int) -> dict:
        """Body for POST {base}/{product_id}/variants."""
        return {
            "product_id": product_id,
            "sku": self.sku,
            "price": float(self.price),
            "weight": VARIANT_WEIGHT,
            "inventory_level": self.inventory_level,
            "option_values": [o.to_payload() for o in self.option_values[:1]],
        }

    def to_inventory_payload(self) -> dict:
        """Partial update body; only the stock level is overwritten."""
        return {"inventory_level": self.inventory_level}


class ProductGroup(BaseSchema):
    """
    Parent product for all sizes of one ean + color.

    Name is ``{name} {color} {ean}`` so every group has a unique catalog name.
    """

    name: str
    sku: str
    price: Decimal = Field(default=Decimal("0"))
    mpn: str
    inventory_tracking: str = "variant"
    is_visible: bool = False
    variants: list[ProductVariant] = Field(default_factory=list)

    def in_stock_variants(self) -> list[ProductVariant]:
        return [v for v in self.variants if v.in_stock]

    def with_variants(self, variants: list[ProductVariant]) -> "ProductGroup":
        """Copy of this group carrying ``variants``; the original is untouched."""
        return self.model_copy(update={"variants": list(variants)})

    def find_variant(self, sku: str) -> Optional[ProductVariant]:
        """First variant with ``sku``, or None."""
        return next((v for v in self.variants if v.sku == sku), None)

    def to_create_payload(self) -> dict:
        """Body for POST {base}: product plus inline variants."""
        return {
            "name": self.name,
            "type": "physical",
            "price": float(self.price),
            "weight": PRODUCT_WEIGHT,
            "sku": self.sku,
            "inventory_tracking": self.inventory_tracking,
            "is_visible": self.is_visible,
            "mpn": self.mpn,
            "variants": [v.to_create_payload() for v in self.variants],
        }


class ProductDetail(BaseModel):
    """Remote product matched by a catalog lookup."""

    product_id: int
