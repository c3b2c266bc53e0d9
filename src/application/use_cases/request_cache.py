"""Per-request memoization of record store reads.

A RequestCache is created for one request (a page render, a report
export), handed to every use case involved, and dropped afterwards. It is
never shared between requests.
"""

from collections.abc import Callable, Hashable, Sequence
from datetime import datetime
from typing import Any, TypeVar

from src.application.ports.record_store import RecordStorePort
from src.domain.models import (
    FinancialRecordRow,
    InvestorRow,
    TransactionRow,
    VehicleRow,
)


T = TypeVar("T")


class RequestCache:
    """Map of (operation, arguments) to the rows it resolved to."""

    def __init__(self) -> None:
        self._entries: dict[tuple[str, Hashable], Any] = {}
        self.hits = 0
        self.misses = 0

    def get_or_load(
        self,
        operation: str,
        arguments: Hashable,
        loader: Callable[[], T],
    ) -> T:
        """Return the cached value or run the loader and remember it.

        Exceptions raised by the loader propagate and nothing is stored.

        Args:
            operation: Name of the read operation.
            arguments: Hashable form of the operation arguments.
            loader: Callable performing the actual read.

        Returns:
            T: Cached or freshly loaded value.
        """
        key = (operation, arguments)
        if key in self._entries:
            self.hits += 1
            return self._entries[key]
        self.misses += 1
        value = loader()
        self._entries[key] = value
        return value

    def clear(self) -> None:
        """Forget every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: tuple[str, Hashable]) -> bool:
        return key in self._entries


class CachedRecordStore(RecordStorePort):
    """RecordStorePort decorator reading through a RequestCache."""

    def __init__(self, store: RecordStorePort, cache: RequestCache) -> None:
        self._store = store
        self._cache = cache

    def list_investors(
        self,
        role: str,
        investor_id: str | None = None,
    ) -> list[InvestorRow]:
        rows = self._cache.get_or_load(
            "list_investors",
            (role, investor_id),
            lambda: self._store.list_investors(role, investor_id),
        )
        return list(rows)

    def list_vehicles(
        self,
        must_have_assigned_investor: bool = True,
        investor_id: str | None = None,
    ) -> list[VehicleRow]:
        rows = self._cache.get_or_load(
            "list_vehicles",
            (must_have_assigned_investor, investor_id),
            lambda: self._store.list_vehicles(
                must_have_assigned_investor,
                investor_id,
            ),
        )
        return list(rows)

    def list_financial_records(
        self,
        vehicle_ids: Sequence[str],
        date_from: datetime | None = None,
    ) -> list[FinancialRecordRow]:
        ids = tuple(sorted(vehicle_ids))
        rows = self._cache.get_or_load(
            "list_financial_records",
            (ids, date_from),
            lambda: self._store.list_financial_records(ids, date_from),
        )
        return list(rows)

    def list_transactions(
        self,
        vehicle_ids: Sequence[str],
    ) -> list[TransactionRow]:
        ids = tuple(sorted(vehicle_ids))
        rows = self._cache.get_or_load(
            "list_transactions",
            ids,
            lambda: self._store.list_transactions(ids),
        )
        return list(rows)


def with_request_cache(
    store: RecordStorePort,
    cache: RequestCache | None,
) -> RecordStorePort:
    """Wrap the store with the cache when one is provided."""
    if cache is None:
        return store
    return CachedRecordStore(store, cache)


__all__ = ["RequestCache", "CachedRecordStore", "with_request_cache"]
