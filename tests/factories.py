"""
Test data factories.

Uses factory pattern to generate consistent test data.
"""

from decimal import Decimal
from typing import Optional

from models.product import ProductGroup, ProductOption, ProductVariant

API_URL = "https://api.example.com/stores/abc/v3/catalog/products"


def feed_line(
    sku: str = "A1",
    ean: str = "E1",
    name: str = "Shirt",
    brand: str = "B",
    category: str = "C",
    gender: str = "M",
    color: str = "Red",
    size: str = "S",
    inventory: str = "10",
    price: str = "19.99",
) -> str:
    """Build one pipe-delimited feed line."""
    return "|".join([sku, ean, name, brand, category, gender, color, size, inventory, price])


class ProductGroupFactory:
    """
    Factory for ProductGroup test data.

    Usage:
        # One group, sizes S (5) and M (0)
        group = ProductGroupFactory.create(sizes={"S": 5, "M": 0})
    """

    @classmethod
    def variant(
        cls,
        ean: str = "E1",
        color: str = "Red",
        size: str = "S",
        inventory_level: int = 10,
        price: Decimal = Decimal("19.99"),
    ) -> ProductVariant:
        return ProductVariant(
            sku=f"{ean}-{color}-{size}",
            price=price,
            mpn=ean,
            inventory_level=inventory_level,
            option_values=[ProductOption(label=size)],
        )

    @classmethod
    def create(
        cls,
        name: str = "Shirt",
        ean: str = "E1",
        color: str = "Red",
        sku: str = "A1",
        price: Decimal = Decimal("19.99"),
        sizes: Optional[dict[str, int]] = None,
    ) -> ProductGroup:
        sizes = {"S": 10} if sizes is None else sizes
        return ProductGroup(
            name=f"{name} {color} {ean}",
            sku=sku,
            price=price,
            mpn=ean,
            variants=[
                cls.variant(ean=ean, color=color, size=size, inventory_level=qty, price=price)
                for size, qty in sizes.items()
            ],
        )

    @classmethod
    def remote_variant(
        cls,
        variant_id: int,
        sku: str,
        product_id: int = 7,
        inventory_level: int = 0,
    ) -> dict:
        """Variant as the catalog API returns it."""
        return {
            "id": variant_id,
            "product_id": product_id,
            "sku": sku,
            "inventory_level": inventory_level,
        }
