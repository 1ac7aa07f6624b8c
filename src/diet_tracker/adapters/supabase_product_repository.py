"""Supabase repository for products and portions."""

from dataclasses import dataclass

from supabase import Client

from diet_tracker.adapters.supabase_errors import STORE_ERRORS, store_error
from diet_tracker.domain.errors import NotFoundError
from diet_tracker.domain.products import Portion, Product
from diet_tracker.services.products import ProductRepository


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Supabase-backed product lookups."""

    client: Client

    def get_product(self, product_id: int) -> Product:
        """Return a product by id."""
        try:
            response = (
                self.client.table("products")
                .select("id, name, creator")
                .eq("id", product_id)
                .limit(1)
                .execute()
            )
        except STORE_ERRORS as exc:
            raise store_error("While selecting product", exc) from exc
        if not response.data:
            raise NotFoundError(f"Product {product_id} not found")
        row = response.data[0]
        return Product(
            id=int(row["id"]),
            name=str(row.get("name", "")),
            creator=int(row["creator"]) if row.get("creator") is not None else None,
        )

    def list_portions(self, product_id: int) -> list[Portion]:
        """Return portions for a product ordered by id."""
        try:
            response = (
                self.client.table("portions")
                .select("id, product_id, unit, energy")
                .eq("product_id", product_id)
                .order("id", desc=False)
                .execute()
            )
        except STORE_ERRORS as exc:
            raise store_error("While selecting portions", exc) from exc
        return [
            Portion(
                id=int(row["id"]),
                product_id=int(row["product_id"]),
                unit=str(row.get("unit", "")),
                energy=float(row.get("energy") or 0.0),
            )
            for row in response.data or []
        ]
