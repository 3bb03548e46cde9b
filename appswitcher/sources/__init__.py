"""Usage statistics sources."""
from .base import UsageStatsSource
from .static import StaticUsageStatsSource, StoredUsageStatsSource

__all__ = ["UsageStatsSource", "StaticUsageStatsSource", "StoredUsageStatsSource"]
