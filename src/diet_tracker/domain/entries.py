"""Domain models for logged diet entries."""

from dataclasses import dataclass
from datetime import date

from diet_tracker.domain.products import Product


@dataclass(frozen=True)
class Entry:
    """A logged consumption of a product by a user on a date."""

    id: int
    user_id: int
    product_id: int
    quantity: float
    date: date


@dataclass(frozen=True)
class EntryValues:
    """Client-writable fields of an entry."""

    product_id: int
    quantity: float
    user_id: int | None = None


@dataclass(frozen=True)
class PopulatedEntry:
    """An entry with its product and the product's portions embedded."""

    entry: Entry
    product: Product
