"""
Most used and recently used application tracking.
"""
from .models import AppAge, ComponentName, UsageRecord, compute_age, generate_run_info
from .ranking import BoundedRankedList, InvalidCapacityError
from .services import UsageTracker, AppSwitcherService

__all__ = [
    "AppAge",
    "ComponentName",
    "UsageRecord",
    "compute_age",
    "generate_run_info",
    "BoundedRankedList",
    "InvalidCapacityError",
    "UsageTracker",
    "AppSwitcherService",
]
