"""Tests for the Supabase key-value store."""

from dataclasses import dataclass, field
from uuid import uuid4

from nutritrack.adapters.store_repositories import StoreWeeklyPlanRepository
from nutritrack.adapters.supabase_store import SupabaseKeyValueStore


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    rows: dict[str, object] = field(default_factory=dict)
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_upsert: tuple[dict[str, object], str | None] | None = None

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def upsert(  # type: ignore[no-untyped-def]
        self, payload, on_conflict: str | None = None
    ) -> "FakeTable":
        self._action = "upsert"
        self.last_upsert = (payload, on_conflict)
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        if self._action == "upsert" and self.last_upsert is not None:
            payload = self.last_upsert[0]
            self.rows[str(payload["key"])] = payload["value"]
            return FakeResponse(data=[payload])
        key = str(self.last_filters[-1][1])
        if key not in self.rows:
            return FakeResponse(data=[])
        return FakeResponse(data=[{"value": self.rows[key]}])


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_store_get_returns_default_when_missing() -> None:
    client = FakeSupabaseClient()
    store = SupabaseKeyValueStore(client)

    assert store.get("nutritrack-meals", []) == []
    assert client.tables["nutritrack_store"].last_filters == [
        ("key", "nutritrack-meals")
    ]


def test_supabase_store_upserts_by_key() -> None:
    client = FakeSupabaseClient()
    store = SupabaseKeyValueStore(client, table="kv")

    store.set("nutritrack-goals", {"calories": 2000})

    table = client.tables["kv"]
    assert table.last_upsert == (
        {"key": "nutritrack-goals", "value": {"calories": 2000}},
        "key",
    )
    assert store.get("nutritrack-goals") == {"calories": 2000}


def test_supabase_store_backs_repositories() -> None:
    store = SupabaseKeyValueStore(FakeSupabaseClient())
    repository = StoreWeeklyPlanRepository(store)
    meal_id = uuid4()

    repository.save_plan({meal_id: 3})

    assert repository.get_plan() == {meal_id: 3}
