"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from diet_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from diet_tracker.adapters.supabase_product_repository import (
    SupabaseProductRepository,
)
from diet_tracker.config import Settings
from diet_tracker.services.entries import EntryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    entry_service: EntryService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    entry_service = EntryService(
        repository=SupabaseEntryRepository(supabase_client),
        product_repository=SupabaseProductRepository(supabase_client),
    )
    return AppContainer(settings=resolved_settings, entry_service=entry_service)
