"""
Catalog lookup: find an existing remote product by exact name.
"""

from typing import Callable
import structlog

from config.settings import Settings
from exceptions import AppError, CatalogRequestError
from integrations.catalog_client import CatalogClient
from models.product import ProductDetail
from models.sync import LookupStatus, ProductLookup

logger = structlog.get_logger(__name__)

ClientFactory = Callable[[Settings], CatalogClient]


class CatalogLookupService:
    """Read-only product search against the catalog."""

    def __init__(
        self,
        settings: Settings,
        client_factory: ClientFactory = CatalogClient
    ):
        self.settings = settings
        self.client_factory = client_factory

    def find_by_name(self, name: str) -> ProductLookup:
        """
        Search the catalog for ``name`` (first result only).

        Args:
            name: Product group name

        Returns:
            ProductLookup: FOUND with the product id, NOT_FOUND for an empty
            result, or ERROR if the search itself failed. Errors are logged,
            never raised.
        """
        logger.debug("looking_up_product", name=name)

        try:
            with self.client_factory(self.settings) as client:
                response = client.search_products(name, limit=1)
        except CatalogRequestError as e:
            logger.error(
                "product_search_failed",
                name=name,
                status_code=e.status_code,
                body=e.body
            )
            return ProductLookup(status=LookupStatus.ERROR, error=e.message)
        except AppError as e:
            logger.error(
                "product_search_failed",
                name=name,
                error=e.message,
                error_code=e.code
            )
            return ProductLookup(status=LookupStatus.ERROR, error=e.message)

        if not response.data:
            logger.debug("product_not_found", name=name)
            return ProductLookup(status=LookupStatus.NOT_FOUND)

        product_id = response.data[0].id
        logger.debug("product_found", name=name, product_id=product_id)
        return ProductLookup(
            status=LookupStatus.FOUND,
            detail=ProductDetail(product_id=product_id)
        )
