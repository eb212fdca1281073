"""
Sync services.

Each service handles one step of the catalog sync.
"""

from services.catalog_lookup_service import CatalogLookupService
from services.product_creator_service import ProductCreatorService
from services.inventory_reconciler_service import InventoryReconcilerService
from services.sync_service import InventorySyncService

__all__ = [
    "CatalogLookupService",
    "ProductCreatorService",
    "InventoryReconcilerService",
    "InventorySyncService",
]
