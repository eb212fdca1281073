"""
Typed catalog API responses.

Every body is wrapped in a top-level ``data`` key.
"""

from typing import Optional

from models.base import ResponseSchema


class CatalogProduct(ResponseSchema):
    id: int
    name: Optional[str] = None
    sku: Optional[str] = None


class CatalogVariant(ResponseSchema):
    id: int
    product_id: Optional[int] = None
    sku: str
    inventory_level: Optional[int] = None


class ProductSearchResponse(ResponseSchema):
    """GET {base}?name=...&limit=1"""
    data: list[CatalogProduct]


class ProductCreateResponse(ResponseSchema):
    """POST {base}"""
    data: CatalogProduct


class VariantListResponse(ResponseSchema):
    """GET {base}/{id}/variants"""
    data: list[CatalogVariant]


class VariantResponse(ResponseSchema):
    """PUT/POST on a single variant."""
    data: CatalogVariant
