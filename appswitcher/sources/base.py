"""Base usage statistics source."""
from abc import ABC, abstractmethod
from typing import List
from ..models import UsageRecord


class UsageStatsSource(ABC):
    """
    Supplies usage records for a cold-start load of the switcher.

    Sources that need a user grant report it through has_permission();
    the switcher then loads an empty record set instead of failing.
    """

    @abstractmethod
    def has_permission(self) -> bool:
        """Return True if usage statistics may be read."""
        pass

    @abstractmethod
    def get_usage_stats(self) -> List[UsageRecord]:
        """Return one record per known application."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Source name for logging."""
        pass
