"""Product and portion lookups."""

from typing import Protocol

from diet_tracker.domain.products import Portion, Product


class ProductRepository(Protocol):
    """Read-only persistence interface for products and portions."""

    def get_product(self, product_id: int) -> Product:
        """Return a product by id or raise NotFoundError."""

    def list_portions(self, product_id: int) -> list[Portion]:
        """Return the portions defined for a product."""
