"""Pydantic models for entry request and response bodies."""

import datetime as dt

from pydantic import BaseModel, field_validator

from diet_tracker.domain.entries import Entry, EntryValues, PopulatedEntry
from diet_tracker.domain.products import Portion, Product


class EntryPayload(BaseModel):
    """Entry fields supplied by a client."""

    user_id: int | None = None
    product_id: int
    quantity: float

    def to_values(self) -> EntryValues:
        return EntryValues(
            product_id=self.product_id,
            quantity=self.quantity,
            user_id=self.user_id,
        )


class CreateEntryRequest(BaseModel):
    """Create entry request body."""

    entry: EntryPayload | None = None


class ListEntriesRequest(BaseModel):
    """List entries request body."""

    date: dt.date | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _date_from_timestamp(cls, value: object) -> object:
        # Browsers send Date.toISOString(), keep only the calendar date.
        if isinstance(value, str) and len(value) > 10:
            return dt.datetime.fromisoformat(value).date()
        return value


class DeleteEntryRequest(BaseModel):
    """Delete entry request body."""

    id: int


class UpdateEntryRequest(BaseModel):
    """Update entry request body."""

    id: int
    entry: EntryPayload | None = None


class EntryModel(BaseModel):
    """Entry as returned to clients."""

    id: int
    user_id: int
    product_id: int
    quantity: float
    date: dt.date

    @classmethod
    def from_domain(cls, entry: Entry) -> "EntryModel":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            product_id=entry.product_id,
            quantity=entry.quantity,
            date=entry.date,
        )


class PortionModel(BaseModel):
    """Portion as returned to clients."""

    id: int
    product_id: int
    unit: str
    energy: float

    @classmethod
    def from_domain(cls, portion: Portion) -> "PortionModel":
        return cls(
            id=portion.id,
            product_id=portion.product_id,
            unit=portion.unit,
            energy=portion.energy,
        )


class ProductModel(BaseModel):
    """Product with its portions embedded."""

    id: int
    name: str
    creator: int | None = None
    portions: list[PortionModel]

    @classmethod
    def from_domain(cls, product: Product) -> "ProductModel":
        return cls(
            id=product.id,
            name=product.name,
            creator=product.creator,
            portions=[PortionModel.from_domain(p) for p in product.portions],
        )


class PopulatedEntryModel(EntryModel):
    """Entry with its product embedded."""

    product: ProductModel

    @classmethod
    def from_populated(cls, populated: PopulatedEntry) -> "PopulatedEntryModel":
        entry = populated.entry
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            product_id=entry.product_id,
            quantity=entry.quantity,
            date=entry.date,
            product=ProductModel.from_domain(populated.product),
        )


class CreateEntryResponse(BaseModel):
    """Create entry response body."""

    entry: EntryModel


class ListEntriesResponse(BaseModel):
    """List entries response body."""

    entries: list[PopulatedEntryModel]


class EntryDatesResponse(BaseModel):
    """Logged dates response body."""

    dates: list[dt.date]
