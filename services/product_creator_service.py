"""
Product creation: new catalog products with their size variants.
"""

from typing import Callable
import structlog

from config.settings import Settings
from exceptions import AppError, CatalogRequestError
from integrations.catalog_client import CatalogClient
from models.product import ProductGroup, ProductVariant
from models.sync import CreateResult, SyncOutcome, VariantUpdateResult

logger = structlog.get_logger(__name__)

ClientFactory = Callable[[Settings], CatalogClient]


class ProductCreatorService:
    """
    Creates products in the catalog.

    The caller decides which variants to send; nothing is filtered here.
    """

    def __init__(
        self,
        settings: Settings,
        client_factory: ClientFactory = CatalogClient
    ):
        self.settings = settings
        self.client_factory = client_factory

    def create_product(self, group: ProductGroup) -> CreateResult:
        """
        POST a product with its variants inline.

        Args:
            group: Product group, already narrowed to the variants to create

        Returns:
            CreateResult; failures are logged and returned, not raised
        """
        logger.info(
            "creating_product",
            name=group.name,
            sku=group.sku,
            variants_count=len(group.variants)
        )

        try:
            with self.client_factory(self.settings) as client:
                response = client.create_product(group.to_create_payload())
        except CatalogRequestError as e:
            logger.error(
                "product_create_failed",
                name=group.name,
                sku=group.sku,
                status_code=e.status_code,
                body=e.body
            )
            return CreateResult(success=False, error=e.message)
        except AppError as e:
            logger.error(
                "product_create_failed",
                name=group.name,
                sku=group.sku,
                error=e.message,
                error_code=e.code
            )
            return CreateResult(success=False, error=e.message)

        created = response.data
        logger.info(
            "product_created",
            name=group.name,
            product_id=created.id,
            sku=created.sku
        )

        if not group.variants:
            logger.warning("product_created_without_variants", name=group.name)

        return CreateResult(success=True, product_id=created.id, sku=created.sku)

    def create_variants(
        self,
        product_id: int,
        variants: list[ProductVariant]
    ) -> list[VariantUpdateResult]:
        """
        POST variants one at a time onto an existing product.

        Each variant is attempted regardless of earlier failures.
        """
        results: list[VariantUpdateResult] = []

        with self.client_factory(self.settings) as client:
            for variant in variants:
                try:
                    response = client.create_variant(
                        product_id, variant.to_variant_create_payload(product_id)
                    )
                except AppError as e:
                    logger.error(
                        "variant_create_failed",
                        product_id=product_id,
                        sku=variant.sku,
                        status_code=e.status_code,
                        error=e.message,
                        body=getattr(e, "body", None)
                    )
                    results.append(VariantUpdateResult(
                        sku=variant.sku,
                        outcome=SyncOutcome.FAILED,
                        reason=e.message
                    ))
                    continue

                logger.info(
                    "variant_created",
                    product_id=product_id,
                    sku=variant.sku,
                    size=variant.size,
                    variant_id=response.data.id
                )
                results.append(VariantUpdateResult(
                    sku=variant.sku,
                    outcome=SyncOutcome.CREATED,
                    variant_id=response.data.id
                ))

        return results
