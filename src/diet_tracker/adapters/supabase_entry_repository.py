"""Supabase repository for diet entries."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Any

from supabase import Client

from diet_tracker.adapters.supabase_errors import STORE_ERRORS, store_error
from diet_tracker.domain.entries import Entry, EntryValues
from diet_tracker.domain.errors import DataIntegrityError, NotFoundError, StoreError
from diet_tracker.services.entries import EntryRepository

_ENTRY_COLUMNS = "id, user_id, product_id, quantity, date"

# Supabase's default PostgREST max_rows.
DEFAULT_PAGE_SIZE = 1000


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for the entries table."""

    client: Client
    page_size: int = DEFAULT_PAGE_SIZE

    def create_entry(self, values: EntryValues) -> Entry:
        """Insert an entry row and return it with its assigned id and date."""
        try:
            response = (
                self.client.table("entries")
                .insert(_payload(values))
                .execute()
            )
        except STORE_ERRORS as exc:
            raise store_error("While inserting entry", exc) from exc
        if not response.data:
            raise StoreError("Insert returned no entry row")
        return _parse_entry(response.data[0])

    def get_entry(self, entry_id: int) -> Entry:
        """Return the entry with the given id."""
        try:
            response = (
                self.client.table("entries")
                .select(_ENTRY_COLUMNS)
                .eq("id", entry_id)
                .limit(2)
                .execute()
            )
        except STORE_ERRORS as exc:
            raise store_error("While selecting entry", exc) from exc
        rows = response.data or []
        if len(rows) > 1:
            raise DataIntegrityError("Two entries with the same id")
        if not rows:
            raise NotFoundError(f"Entry {entry_id} not found")
        return _parse_entry(rows[0])

    def list_user_entries(
        self, user_id: int, entry_date: date | None = None
    ) -> list[Entry]:
        """Return a user's entries ordered by id."""

        def build() -> Any:
            query = (
                self.client.table("entries")
                .select(_ENTRY_COLUMNS)
                .eq("user_id", user_id)
            )
            if entry_date is not None:
                query = query.eq("date", entry_date.isoformat())
            return query.order("id", desc=False)

        rows = self._select_all(build, "While selecting user entries")
        return [_parse_entry(row) for row in rows]

    def update_entry(self, entry_id: int, user_id: int, values: EntryValues) -> Entry:
        """Replace the fields of an entry owned by user_id."""
        try:
            response = (
                self.client.table("entries")
                .update(_payload(values))
                .eq("id", entry_id)
                .eq("user_id", user_id)
                .execute()
            )
        except STORE_ERRORS as exc:
            raise store_error("While updating entry", exc) from exc
        if not response.data:
            raise NotFoundError(f"Entry {entry_id} not found")
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: int, user_id: int) -> None:
        """Delete an entry owned by user_id."""
        try:
            response = (
                self.client.table("entries")
                .delete()
                .eq("id", entry_id)
                .eq("user_id", user_id)
                .execute()
            )
        except STORE_ERRORS as exc:
            raise store_error("While deleting entry", exc) from exc
        if not response.data:
            raise NotFoundError(f"Entry {entry_id} not found")

    def list_entry_dates(self, user_id: int) -> list[date]:
        """Return distinct entry dates for a user, ascending."""
        rows = self._select_all(
            lambda: (
                self.client.table("entries")
                .select("date")
                .eq("user_id", user_id)
                .order("date", desc=False)
            ),
            "While selecting entry dates",
        )
        return sorted({date.fromisoformat(str(row["date"])) for row in rows})

    def _select_all(
        self, build: Callable[[], Any], context: str
    ) -> list[dict[str, object]]:
        """Fetch every row of a select, one page at a time until a short page."""
        rows: list[dict[str, object]] = []
        start = 0
        while True:
            try:
                response = (
                    build().range(start, start + self.page_size - 1).execute()
                )
            except STORE_ERRORS as exc:
                raise store_error(context, exc) from exc
            page = response.data or []
            rows.extend(page)
            if len(page) < self.page_size:
                return rows
            start += self.page_size


def _payload(values: EntryValues) -> dict[str, object]:
    return {
        "user_id": values.user_id,
        "product_id": values.product_id,
        "quantity": values.quantity,
    }


def _parse_entry(row: dict[str, object]) -> Entry:
    return Entry(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        product_id=int(row["product_id"]),
        quantity=float(row.get("quantity") or 0.0),
        date=date.fromisoformat(str(row["date"])),
    )
