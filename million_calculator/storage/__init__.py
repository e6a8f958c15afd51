"""Lead persistence backends."""

from typing import Optional

from million_calculator.config import Settings
from million_calculator.storage.base import InMemoryLeadStore, LeadRecord, LeadStore, StorageError
from million_calculator.storage.sqlite_store import SqliteLeadStore
from million_calculator.storage.supabase_store import SupabaseLeadStore


def build_lead_store(settings: Settings) -> Optional[LeadStore]:
    """Construct the configured lead store, or None when persistence is off."""
    if settings.LEAD_STORE == "none":
        return None
    if settings.LEAD_STORE == "memory":
        return InMemoryLeadStore()
    if settings.LEAD_STORE == "sqlite":
        return SqliteLeadStore(settings.SQLITE_PATH)

    if not settings.SUPABASE_URL or not settings.SUPABASE_ANON_KEY:
        raise ValueError("Missing Supabase settings: SUPABASE_URL and SUPABASE_ANON_KEY are required")
    return SupabaseLeadStore(
        url=settings.SUPABASE_URL,
        api_key=settings.SUPABASE_ANON_KEY,
        table=settings.SUPABASE_TABLE,
        timeout=settings.SUPABASE_TIMEOUT_SECONDS,
    )


__all__ = [
    "InMemoryLeadStore",
    "LeadRecord",
    "LeadStore",
    "SqliteLeadStore",
    "StorageError",
    "SupabaseLeadStore",
    "build_lead_store",
]
