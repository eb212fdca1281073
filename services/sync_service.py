"""
Inventory sync run: download feed, parse, then create or update each product.

Per product group:
    found      -> reconcile inventory on existing variants (all feed variants)
    not found  -> create with in-stock variants, or skip if none have stock
    lookup err -> fail the group without creating anything

One group failing never stops the run.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional, Union
import structlog

from config.settings import Settings
from integrations.catalog_client import CatalogClient
from integrations.ftp_client import download_feed
from models.product import ProductGroup
from models.sync import GroupResult, LookupStatus, SyncOutcome, SyncSummary
from parsers.stock_parser import parse_stock_file
from services.catalog_lookup_service import CatalogLookupService
from services.inventory_reconciler_service import InventoryReconcilerService
from services.product_creator_service import ProductCreatorService

logger = structlog.get_logger(__name__)

ClientFactory = Callable[[Settings], CatalogClient]


class InventorySyncService:
    """
    Drives a full sync.

    Usage:
        summary = InventorySyncService(settings).run()
    """

    def __init__(
        self,
        settings: Settings,
        client_factory: ClientFactory = CatalogClient,
        downloader: Callable[[Settings], Path] = download_feed
    ):
        self.settings = settings
        self.downloader = downloader
        self.lookup = CatalogLookupService(settings, client_factory)
        self.creator = ProductCreatorService(settings, client_factory)
        self.reconciler = InventoryReconcilerService(
            settings, client_factory, creator=self.creator
        )

    # ===================
    # RUN
    # ===================

    def run(self, feed_path: Optional[Union[str, Path]] = None) -> SyncSummary:
        """
        Run the whole sync.

        Args:
            feed_path: Parse this local file instead of downloading from FTP

        Returns:
            SyncSummary. Never raises; a failure before the group loop is
            recorded in ``fatal_error``.
        """
        summary = SyncSummary()
        logger.info("inventory_sync_started", feed_path=str(feed_path) if feed_path else None)

        try:
            if feed_path is None:
                feed_path = self.downloader(self.settings)
            else:
                logger.info("feed_download_skipped", feed_path=str(feed_path))

            parsed = parse_stock_file(feed_path)
            summary.groups_parsed = len(parsed.groups)

            for group in parsed.groups:
                summary.results.append(self._sync_group_safely(group))

        except Exception as e:
            summary.fatal_error = str(e)
            logger.error(
                "inventory_sync_aborted",
                error=str(e),
                error_type=type(e).__name__
            )

        summary.finished_at = datetime.now(timezone.utc)
        logger.info("inventory_sync_completed", **summary.to_dict())
        return summary

    def _sync_group_safely(self, group: ProductGroup) -> GroupResult:
        try:
            return self.sync_group(group)
        except Exception as e:
            logger.error(
                "product_group_failed",
                name=group.name,
                error=str(e),
                error_type=type(e).__name__
            )
            return GroupResult(
                name=group.name,
                outcome=SyncOutcome.FAILED,
                reason=str(e)
            )

    # ===================
    # PER GROUP
    # ===================

    def sync_group(self, group: ProductGroup) -> GroupResult:
        """
        Route one group to create, update or skip.

        Raises whatever the services don't handle; ``run`` catches it.
        """
        lookup = self.lookup.find_by_name(group.name)

        if lookup.status == LookupStatus.ERROR:
            # Unknown whether the product exists; creating could duplicate it
            logger.warning("product_lookup_failed_skipping", name=group.name)
            return GroupResult(
                name=group.name,
                outcome=SyncOutcome.FAILED,
                reason="lookup_failed"
            )

        if lookup.found:
            return self._update_existing(group, lookup.detail.product_id)

        return self._create_new(group)

    def _update_existing(self, group: ProductGroup, product_id: int) -> GroupResult:
        result = self.reconciler.reconcile(product_id, group.variants)
        if not result.success:
            return GroupResult(
                name=group.name,
                outcome=SyncOutcome.FAILED,
                reason=result.error,
                product_id=product_id
            )
        return GroupResult(
            name=group.name,
            outcome=SyncOutcome.UPDATED,
            product_id=product_id
        )

    def _create_new(self, group: ProductGroup) -> GroupResult:
        in_stock = group.in_stock_variants()
        if not in_stock:
            logger.info("product_has_no_stock_not_created", name=group.name)
            return GroupResult(
                name=group.name,
                outcome=SyncOutcome.SKIPPED,
                reason="no_stock"
            )

        created = self.creator.create_product(group.with_variants(in_stock))
        if not created.success:
            return GroupResult(
                name=group.name,
                outcome=SyncOutcome.FAILED,
                reason=created.error
            )
        return GroupResult(
            name=group.name,
            outcome=SyncOutcome.CREATED,
            product_id=created.product_id
        )
