"""Driver failures raised by the Supabase client."""

import httpx
from postgrest.exceptions import APIError

from diet_tracker.domain.errors import StoreError

# PostgREST rejections and transport failures (connect, timeout, protocol).
STORE_ERRORS = (APIError, httpx.HTTPError)


def store_error(context: str, exc: Exception) -> StoreError:
    """Build a StoreError describing a failed Supabase call."""
    detail = exc.message if isinstance(exc, APIError) and exc.message else str(exc)
    return StoreError(f"{context}: {detail or type(exc).__name__}")
