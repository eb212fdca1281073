"""
Shared test fixtures.
"""

import sys
from pathlib import Path

# Add project root to Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

import pytest
from typing import Optional

from config.settings import Settings
from exceptions import CatalogRequestError
from models.catalog import (
    ProductCreateResponse,
    ProductSearchResponse,
    VariantListResponse,
    VariantResponse,
)

from tests.factories import API_URL


# ===================
# FAKE CATALOG CLIENT
# ===================

class FakeCatalogClient:
    """
    In-memory stand-in for CatalogClient.

    Records every call in ``calls`` as (method, args) tuples. Configure
    remote state with ``add_product``; register an exception with
    ``fail(method, exc)`` to make a call raise.
    """

    def __init__(self):
        self.calls: list[tuple] = []
        self.products: dict[str, int] = {}
        self.variants: dict[int, list[dict]] = {}
        self.failures: dict[str, Exception] = {}
        self.failing_variant_ids: set[int] = set()
        self.next_product_id = 100
        self.next_variant_id = 500
        self.closed = 0

    # Configuration helpers

    def add_product(self, name: str, product_id: int, variants: Optional[list[dict]] = None):
        self.products[name] = product_id
        self.variants[product_id] = variants or []

    def fail(self, method: str, exc: Exception):
        self.failures[method] = exc

    def calls_to(self, method: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == method]

    def _maybe_fail(self, method: str):
        if method in self.failures:
            raise self.failures[method]

    # Context manager

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.closed += 1
        return False

    # CatalogClient interface

    def search_products(self, name: str, limit: int = 1) -> ProductSearchResponse:
        self.calls.append(("search_products", name, limit))
        self._maybe_fail("search_products")
        if name in self.products:
            return ProductSearchResponse(data=[{"id": self.products[name], "name": name}])
        return ProductSearchResponse(data=[])

    def create_product(self, payload: dict) -> ProductCreateResponse:
        self.calls.append(("create_product", payload))
        self._maybe_fail("create_product")
        product_id = self.next_product_id
        self.next_product_id += 1
        self.add_product(payload["name"], product_id, [
            {"id": self._new_variant_id(), "product_id": product_id, **v}
            for v in payload["variants"]
        ])
        return ProductCreateResponse(data={"id": product_id, "sku": payload["sku"]})

    def list_variants(self, product_id: int) -> VariantListResponse:
        self.calls.append(("list_variants", product_id))
        self._maybe_fail("list_variants")
        return VariantListResponse(data=self.variants.get(product_id, []))

    def update_variant(self, product_id: int, variant_id: int, payload: dict) -> None:
        self.calls.append(("update_variant", product_id, variant_id, payload))
        self._maybe_fail("update_variant")
        if variant_id in self.failing_variant_ids:
            raise CatalogRequestError("PUT", f"{API_URL}/{product_id}/variants/{variant_id}", 422, "bad")
        for variant in self.variants.get(product_id, []):
            if variant["id"] == variant_id:
                variant.update(payload)

    def create_variant(self, product_id: int, payload: dict) -> VariantResponse:
        self.calls.append(("create_variant", product_id, payload))
        self._maybe_fail("create_variant")
        variant = {"id": self._new_variant_id(), **payload}
        self.variants.setdefault(product_id, []).append(variant)
        return VariantResponse(data=variant)

    def _new_variant_id(self) -> int:
        self.next_variant_id += 1
        return self.next_variant_id


# ===================
# FIXTURES
# ===================

@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings that never read the real environment or .env files."""
    return Settings(
        _env_file=None,
        ftp_host="ftp.example.com",
        ftp_user="feed",
        ftp_pass="secret",
        local_feed_path=tmp_path / "stock.txt",
        bigcommerce_api_url=API_URL + "/",
        bigcommerce_token="test-token",
    )


@pytest.fixture
def fake_client() -> FakeCatalogClient:
    """
    Fake catalog client.

    Usage:
        def test_something(fake_client, client_factory):
            fake_client.add_product("Shirt Red E1", 7, [...])
            service = CatalogLookupService(settings, client_factory)
    """
    return FakeCatalogClient()


@pytest.fixture
def client_factory(fake_client):
    """Client factory that always hands out ``fake_client``."""
    return lambda settings: fake_client


@pytest.fixture
def feed_file(tmp_path):
    """
    Write feed lines to a temp file.

    Usage:
        path = feed_file(["A1|E1|Shirt|B|C|M|Red|S|10|19.99"])
    """
    def _write(lines: list[str]) -> Path:
        path = tmp_path / "feed.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write
