"""
Inventory reconciliation for products that already exist in the catalog.

Remote variants are matched to feed variants by SKU and their stock level is
overwritten. Remote variants absent from the feed are left alone.
"""

from typing import Callable, Optional
import structlog

from config.settings import Settings
from exceptions import AppError, CatalogRequestError
from integrations.catalog_client import CatalogClient
from models.catalog import CatalogVariant
from models.product import ProductVariant
from models.sync import ReconcileResult, SyncOutcome, VariantUpdateResult
from services.product_creator_service import ProductCreatorService

logger = structlog.get_logger(__name__)

ClientFactory = Callable[[Settings], CatalogClient]


class InventoryReconcilerService:
    """
    Pushes feed stock levels onto existing remote variants.

    With ``sync_create_missing_variants`` on, in-stock feed variants that the
    remote product lacks are created through ProductCreatorService.
    """

    def __init__(
        self,
        settings: Settings,
        client_factory: ClientFactory = CatalogClient,
        creator: Optional[ProductCreatorService] = None
    ):
        self.settings = settings
        self.client_factory = client_factory
        self.creator = creator or ProductCreatorService(settings, client_factory)

    def reconcile(
        self,
        product_id: int,
        variants: list[ProductVariant]
    ) -> ReconcileResult:
        """
        Update inventory of every remote variant that has a feed counterpart.

        Args:
            product_id: Remote product id
            variants: Full feed variant list for the group (zero stock included)

        Returns:
            ReconcileResult with one entry per remote variant. ``error`` is
            set if the remote variant list couldn't be fetched.
        """
        result = ReconcileResult(product_id=product_id)
        by_sku: dict[str, ProductVariant] = {}
        for variant in variants:
            by_sku.setdefault(variant.sku, variant)  # first match wins

        with self.client_factory(self.settings) as client:
            try:
                existing = client.list_variants(product_id).data
            except CatalogRequestError as e:
                logger.error(
                    "variant_list_failed",
                    product_id=product_id,
                    status_code=e.status_code,
                    body=e.body
                )
                result.error = e.message
                return result
            except AppError as e:
                logger.error(
                    "variant_list_failed",
                    product_id=product_id,
                    error=e.message,
                    error_code=e.code
                )
                result.error = e.message
                return result

            for remote in existing:
                result.variants.append(
                    self._update_one(client, product_id, remote, by_sku.get(remote.sku))
                )

        remote_skus = {remote.sku for remote in existing}
        missing = [v for sku, v in by_sku.items() if sku not in remote_skus]
        result.missing_remotely = [v.sku for v in missing]
        if missing:
            self._handle_missing(product_id, missing, result)

        logger.info(
            "inventory_reconciled",
            product_id=product_id,
            updated=len(result.updated),
            not_in_feed=len(result.not_in_feed),
            failed=len(result.failed),
            missing_remotely=len(result.missing_remotely)
        )

        return result

    def _update_one(
        self,
        client: CatalogClient,
        product_id: int,
        remote: CatalogVariant,
        feed_variant: Optional[ProductVariant]
    ) -> VariantUpdateResult:
        if feed_variant is None:
            logger.info("sku_not_in_update_list", product_id=product_id, sku=remote.sku)
            return VariantUpdateResult(
                sku=remote.sku,
                variant_id=remote.id,
                outcome=SyncOutcome.SKIPPED,
                reason="not_in_feed"
            )

        try:
            client.update_variant(product_id, remote.id, feed_variant.to_inventory_payload())
        except CatalogRequestError as e:
            logger.error(
                "inventory_update_failed",
                product_id=product_id,
                sku=remote.sku,
                status_code=e.status_code,
                body=e.body
            )
            return VariantUpdateResult(
                sku=remote.sku,
                variant_id=remote.id,
                outcome=SyncOutcome.FAILED,
                reason=e.message
            )
        except AppError as e:
            logger.error(
                "inventory_update_failed",
                product_id=product_id,
                sku=remote.sku,
                error=e.message
            )
            return VariantUpdateResult(
                sku=remote.sku,
                variant_id=remote.id,
                outcome=SyncOutcome.FAILED,
                reason=e.message
            )

        logger.info(
            "inventory_updated",
            product_id=product_id,
            sku=remote.sku,
            inventory_level=feed_variant.inventory_level
        )
        return VariantUpdateResult(
            sku=remote.sku,
            variant_id=remote.id,
            outcome=SyncOutcome.UPDATED
        )

    def _handle_missing(
        self,
        product_id: int,
        missing: list[ProductVariant],
        result: ReconcileResult
    ) -> None:
        """Feed sizes the remote product doesn't have yet."""
        for variant in missing:
            logger.info("variant_missing_remotely", product_id=product_id, sku=variant.sku)

        if not self.settings.sync_create_missing_variants:
            return

        to_create = [v for v in missing if v.in_stock]
        if to_create:
            result.variants.extend(self.creator.create_variants(product_id, to_create))
