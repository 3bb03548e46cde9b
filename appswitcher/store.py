"""Persistence collaborator for the tracked record set."""
from abc import ABC, abstractmethod
from typing import Dict, List
from .models import UsageRecord


class RunInfoStore(ABC):
    """
    Saves and restores the full set of usage records.

    Implementations own the storage format; the switcher only hands over
    records and takes them back.
    """

    @abstractmethod
    def save(self, records: List[UsageRecord]) -> None:
        """Persist every record, replacing what was stored before."""
        pass

    @abstractmethod
    def load(self) -> List[UsageRecord]:
        """Return the stored records (empty if nothing was saved)."""
        pass


class MemoryRunInfoStore(RunInfoStore):
    """Keeps the last saved record set in memory."""

    def __init__(self) -> None:
        self._records: Dict[str, UsageRecord] = {}
        self.save_count = 0

    def save(self, records: List[UsageRecord]) -> None:
        self._records = {record.key: record.copy() for record in records}
        self.save_count += 1

    def load(self) -> List[UsageRecord]:
        return [record.copy() for record in self._records.values()]
