"""
Products that orders reference, and the catalog the presentation layer picks them from.
"""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Catalog identifier")
    name: str = Field(..., description="Display name")
    price: Decimal = Field(..., ge=0, description="Unit price")
    description: str = Field(default="", description="Short description")


class ProductCatalog:
    """Explicitly constructed product list, looked up by id."""

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: dict[int, Product] = {}
        for product in products or []:
            self.add(product)

    def add(self, product: Product) -> None:
        if product.id in self._products:
            raise ValueError(f"Product #{product.id} already in catalog")
        self._products[product.id] = product

    def get(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def list(self) -> list[Product]:
        return list(self._products.values())


def default_catalog() -> ProductCatalog:
    return ProductCatalog([
        Product(id=1, name="Laptop", price=Decimal("999.99"), description="High-performance laptop"),
        Product(id=2, name="Smartphone", price=Decimal("499.99"), description="Latest model smartphone"),
        Product(id=3, name="Headphones", price=Decimal("99.99"), description="Wireless noise-cancelling headphones"),
        Product(id=4, name="Tablet", price=Decimal("299.99"), description="10-inch tablet"),
        Product(id=5, name="Smartwatch", price=Decimal("199.99"), description="Fitness and health tracking watch"),
    ])
