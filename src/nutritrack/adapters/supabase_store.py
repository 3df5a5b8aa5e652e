"""Supabase-backed key-value store."""

from dataclasses import dataclass

from supabase import Client

from nutritrack.services.store import KeyValueStore


@dataclass
class SupabaseKeyValueStore(KeyValueStore):
    """Stores each key as one row with a JSON value column."""

    client: Client
    table: str = "nutritrack_store"

    def get(self, key: str, default: object = None) -> object:
        """Return the stored value for a key."""
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return default
        return response.data[0].get("value", default)

    def set(self, key: str, value: object) -> None:
        """Insert or replace the value for a key."""
        self.client.table(self.table).upsert(
            {"key": key, "value": value}, on_conflict="key"
        ).execute()
