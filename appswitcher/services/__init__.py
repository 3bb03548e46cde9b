"""Business logic services."""
from .usage_tracker import UsageTracker
from .switcher_service import AppSwitcherService

__all__ = ['UsageTracker', 'AppSwitcherService']
