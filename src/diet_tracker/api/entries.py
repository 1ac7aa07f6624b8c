"""Entry API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from diet_tracker.api.auth import current_user_id
from diet_tracker.api.entry_models import (
    CreateEntryRequest,
    CreateEntryResponse,
    DeleteEntryRequest,
    EntryDatesResponse,
    EntryModel,
    ListEntriesRequest,
    ListEntriesResponse,
    PopulatedEntryModel,
    UpdateEntryRequest,
)
from diet_tracker.domain.errors import DecodeError, DietTrackerError

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/api/entries", tags=["entries"])


@router.post("/create", response_model=CreateEntryResponse)
async def create_entry(
    body: CreateEntryRequest,
    request: Request,
    user_id: int = Depends(current_user_id),
) -> CreateEntryResponse:
    """Log an entry for the authenticated user."""
    container: AppContainer = request.app.state.container
    try:
        if body.entry is None:
            raise DecodeError("No entry provided")
        entry = container.entry_service.create_entry(user_id, body.entry.to_values())
    except DietTrackerError as exc:
        raise exc.wrap("While creating entry") from exc
    return CreateEntryResponse(entry=EntryModel.from_domain(entry))


@router.post("/view", response_model=ListEntriesResponse)
async def list_entries(
    request: Request,
    body: ListEntriesRequest | None = None,
    user_id: int = Depends(current_user_id),
) -> ListEntriesResponse:
    """Return the user's entries with products and portions."""
    container: AppContainer = request.app.state.container
    entry_date = body.date if body else None
    try:
        populated = container.entry_service.list_entries(user_id, entry_date)
    except DietTrackerError as exc:
        raise exc.wrap("While getting users entries") from exc
    return ListEntriesResponse(
        entries=[PopulatedEntryModel.from_populated(item) for item in populated]
    )


@router.get("/dates", response_model=EntryDatesResponse)
async def list_entry_dates(
    request: Request, user_id: int = Depends(current_user_id)
) -> EntryDatesResponse:
    """Return the dates the user has logged entries on."""
    container: AppContainer = request.app.state.container
    try:
        dates = container.entry_service.list_logged_dates(user_id)
    except DietTrackerError as exc:
        raise exc.wrap("While getting entry dates") from exc
    return EntryDatesResponse(dates=dates)


@router.post("/delete")
async def delete_entry(
    body: DeleteEntryRequest,
    request: Request,
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    """Delete one of the user's entries."""
    container: AppContainer = request.app.state.container
    try:
        container.entry_service.delete_entry(user_id, body.id)
    except DietTrackerError as exc:
        raise exc.wrap("While deleting entry") from exc
    return {}


@router.post("/update")
async def update_entry(
    body: UpdateEntryRequest,
    request: Request,
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    """Replace one of the user's entries."""
    container: AppContainer = request.app.state.container
    try:
        if body.entry is None:
            raise DecodeError("No entry provided")
        container.entry_service.update_entry(
            user_id, body.id, body.entry.to_values()
        )
    except DietTrackerError as exc:
        raise exc.wrap("While updating entry") from exc
    return {}
