"""
Catalog REST API client.

Thin wrapper over a requests Session: sends the auth token, turns non-2xx
answers and transport failures into exceptions, and decodes bodies into
typed response models.
"""

from typing import Any, Optional, Type, TypeVar

import requests
import structlog
from pydantic import ValidationError as PydanticValidationError

from config.settings import Settings
from exceptions import (
    CatalogRequestError,
    CatalogTransportError,
    MalformedResponseError,
)
from models.catalog import (
    ProductCreateResponse,
    ProductSearchResponse,
    VariantListResponse,
    VariantResponse,
)
from models.base import ResponseSchema

logger = structlog.get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=ResponseSchema)


class CatalogClient:
    """
    Catalog products endpoint client.

    Usage:
        with CatalogClient(settings) as client:
            found = client.search_products("Shirt Red E1")
    """

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.base_url = settings.bigcommerce_api_url
        self.timeout = settings.catalog_timeout_seconds
        self.session = session or requests.Session()
        self.session.headers.update({
            "X-Auth-Token": settings.bigcommerce_token,
            "Accept": "application/json",
        })

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False  # Don't suppress exceptions

    def close(self) -> None:
        self.session.close()

    # ===================
    # PRODUCTS
    # ===================

    def search_products(self, name: str, limit: int = 1) -> ProductSearchResponse:
        """GET {base}?name=...&limit=... (name is URL-encoded by requests)."""
        response = self._request(
            "GET", self.base_url, params={"name": name, "limit": limit}
        )
        return self._decode(response, ProductSearchResponse)

    def create_product(self, payload: dict) -> ProductCreateResponse:
        """POST {base} with a product and its inline variants."""
        response = self._request("POST", self.base_url, json=payload)
        return self._decode(response, ProductCreateResponse)

    # ===================
    # VARIANTS
    # ===================

    def list_variants(self, product_id: int) -> VariantListResponse:
        response = self._request("GET", self._variants_url(product_id))
        return self._decode(response, VariantListResponse)

    def update_variant(
        self,
        product_id: int,
        variant_id: int,
        payload: dict
    ) -> None:
        """
        PUT {base}/{product_id}/variants/{variant_id}.

        Only the status matters here; the echoed variant isn't used.
        """
        self._request(
            "PUT", f"{self._variants_url(product_id)}/{variant_id}", json=payload
        )

    def create_variant(self, product_id: int, payload: dict) -> VariantResponse:
        response = self._request("POST", self._variants_url(product_id), json=payload)
        return self._decode(response, VariantResponse)

    # ===================
    # HELPERS
    # ===================

    def _variants_url(self, product_id: int) -> str:
        return f"{self.base_url}/{product_id}/variants"

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Send a request.

        Raises:
            CatalogTransportError: Connection/timeout failures
            CatalogRequestError: Non-2xx status
        """
        logger.debug("catalog_request", method=method, url=url)

        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise CatalogTransportError(method, url, str(e)) from e

        if not 200 <= response.status_code < 300:
            raise CatalogRequestError(method, url, response.status_code, response.text)

        return response

    def _decode(self, response: requests.Response, model: Type[ResponseT]) -> ResponseT:
        """
        Decode a JSON body into ``model``.

        Raises:
            MalformedResponseError: Body isn't JSON or doesn't fit the model
        """
        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError(response.url, f"invalid JSON: {e}") from e

        try:
            return model.model_validate(body)
        except PydanticValidationError as e:
            raise MalformedResponseError(
                response.url, f"{model.__name__}: {e.error_count()} validation error(s)"
            ) from e
