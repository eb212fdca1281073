"""
Pydantic models and result types.
"""

from models.base import (
    BaseSchema,
    ResponseSchema,
)
from models.product import (
    ProductOption,
    ProductVariant,
    ProductGroup,
    ProductDetail,
)
from models.catalog import (
    CatalogProduct,
    CatalogVariant,
    ProductSearchResponse,
    ProductCreateResponse,
    VariantListResponse,
    VariantResponse,
)
from models.sync import (
    SyncOutcome,
    LookupStatus,
    ProductLookup,
    CreateResult,
    VariantUpdateResult,
    ReconcileResult,
    GroupResult,
    SyncSummary,
)

__all__ = [
    # Base
    "BaseSchema",
    "ResponseSchema",

    # Product
    "ProductOption",
    "ProductVariant",
    "ProductGroup",
    "ProductDetail",

    # Catalog API
    "CatalogProduct",
    "CatalogVariant",
    "ProductSearchResponse",
    "ProductCreateResponse",
    "VariantListResponse",
    "VariantResponse",

    # Sync results
    "SyncOutcome",
    "LookupStatus",
    "ProductLookup",
    "CreateResult",
    "VariantUpdateResult",
    "ReconcileResult",
    "GroupResult",
    "SyncSummary",
]
