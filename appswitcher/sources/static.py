"""Usage sources backed by data already in memory."""
from typing import List, Optional
from .base import UsageStatsSource
from ..models import UsageRecord
from ..store import RunInfoStore


class StaticUsageStatsSource(UsageStatsSource):
    """Serves a fixed record list, or nothing when no grant was given."""

    def __init__(self, records: Optional[List[UsageRecord]] = None, granted: bool = True) -> None:
        self._records = [record.copy() for record in records or []]
        self.granted = granted

    @property
    def name(self) -> str:
        return "Static"

    def has_permission(self) -> bool:
        return self.granted

    def get_usage_stats(self) -> List[UsageRecord]:
        return [record.copy() for record in self._records]


class StoredUsageStatsSource(UsageStatsSource):
    """Restores the records last saved to a RunInfoStore."""

    def __init__(self, store: RunInfoStore) -> None:
        self.store = store

    @property
    def name(self) -> str:
        return "Stored"

    def has_permission(self) -> bool:
        # Reading our own saved data needs no grant
        return True

    def get_usage_stats(self) -> List[UsageRecord]:
        return self.store.load()
