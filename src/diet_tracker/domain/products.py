"""Domain models for products and their portions."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Portion:
    """A serving-size definition belonging to a product."""

    id: int
    product_id: int
    unit: str
    energy: float


@dataclass(frozen=True)
class Product:
    """A food item referenced by entries."""

    id: int
    name: str
    creator: int | None
    portions: list[Portion] = field(default_factory=list)
