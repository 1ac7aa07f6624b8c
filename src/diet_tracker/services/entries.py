"""Entry logging service."""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol

from diet_tracker.domain.entries import Entry, EntryValues, PopulatedEntry
from diet_tracker.domain.errors import (
    AuthorizationError,
    DietTrackerError,
    StoreError,
)
from diet_tracker.services.products import ProductRepository

logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for entries."""

    def create_entry(self, values: EntryValues) -> Entry:
        """Insert an entry and return the stored row."""

    def get_entry(self, entry_id: int) -> Entry:
        """Return an entry by id or raise NotFoundError."""

    def list_user_entries(
        self, user_id: int, entry_date: date | None = None
    ) -> list[Entry]:
        """Return entries owned by a user, optionally for a single date."""

    def update_entry(self, entry_id: int, user_id: int, values: EntryValues) -> Entry:
        """Replace an owned entry's fields or raise NotFoundError."""

    def delete_entry(self, entry_id: int, user_id: int) -> None:
        """Delete an owned entry or raise NotFoundError."""

    def list_entry_dates(self, user_id: int) -> list[date]:
        """Return the distinct dates a user logged entries on."""


@dataclass
class EntryService:
    """Authorizes and orchestrates entry operations for a caller."""

    repository: EntryRepository
    product_repository: ProductRepository

    def create_entry(self, user_id: int, values: EntryValues) -> Entry:
        """Persist an entry owned by the caller, whatever user_id was sent."""
        try:
            entry = self.repository.create_entry(replace(values, user_id=user_id))
        except DietTrackerError as exc:
            raise exc.wrap("While creating db entry") from exc
        logger.info("Created entry %s for user %s", entry.id, user_id)
        return entry

    def list_entries(
        self, user_id: int, entry_date: date | None = None
    ) -> list[PopulatedEntry]:
        """Return the caller's entries with products and portions embedded.

        Any failed product or portion lookup aborts the whole listing.
        """
        try:
            entries = self.repository.list_user_entries(user_id, entry_date)
        except DietTrackerError as exc:
            raise exc.wrap("While getting db users entries") from exc
        populated = []
        for entry in entries:
            try:
                product = self.product_repository.get_product(entry.product_id)
            except DietTrackerError as exc:
                raise StoreError(f"While getting db product: {exc}") from exc
            try:
                portions = self.product_repository.list_portions(entry.product_id)
            except DietTrackerError as exc:
                raise StoreError(f"While getting db product portion: {exc}") from exc
            populated.append(
                PopulatedEntry(entry=entry, product=replace(product, portions=portions))
            )
        return populated

    def list_logged_dates(self, user_id: int) -> list[date]:
        """Return the dates the caller has logged entries on."""
        try:
            return self.repository.list_entry_dates(user_id)
        except DietTrackerError as exc:
            raise exc.wrap("While getting db entry dates") from exc

    def delete_entry(self, user_id: int, entry_id: int) -> None:
        """Delete an entry after checking the caller owns it."""
        self._require_owner(user_id, entry_id)
        try:
            self.repository.delete_entry(entry_id, user_id)
        except DietTrackerError as exc:
            raise exc.wrap("While deleting db users entry") from exc
        logger.info("Deleted entry %s for user %s", entry_id, user_id)

    def update_entry(self, user_id: int, entry_id: int, values: EntryValues) -> Entry:
        """Replace an entry's fields after checking the caller owns it."""
        self._require_owner(user_id, entry_id)
        try:
            entry = self.repository.update_entry(
                entry_id, user_id, replace(values, user_id=user_id)
            )
        except DietTrackerError as exc:
            raise exc.wrap("While db update entry") from exc
        logger.info("Updated entry %s for user %s", entry_id, user_id)
        return entry

    def _require_owner(self, user_id: int, entry_id: int) -> Entry:
        try:
            entry = self.repository.get_entry(entry_id)
        except DietTrackerError as exc:
            raise exc.wrap("While getting db entry") from exc
        if entry.user_id != user_id:
            raise AuthorizationError("Permission denied, user id do not match")
        return entry
