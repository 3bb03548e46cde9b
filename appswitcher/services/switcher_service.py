"""
appswitcher/services/switcher_service.py

Host-side glue between the tracker and its collaborators.
"""
import datetime
import threading
from typing import Iterable, List, Optional
from ..debug import debug_log
from ..config import DEBUG_MODE
from ..events import Event, EventBus, SwitcherUpdatedContext
from ..models import ComponentName, Identity, UsageRecord
from ..sources import UsageStatsSource
from ..store import RunInfoStore
from .usage_tracker import UsageTracker


class AppSwitcherService:
    """
    Owns one UsageTracker and keeps its collaborators in step.

    Every mutating call records the event, saves the full record set to
    the store and emits SWITCHER_UPDATED so display surfaces can refresh.
    A single lock serializes access to the tracker.

    Usage:
        service = AppSwitcherService(tracker, source, store, bus)
        service.load()
        service.application_started(ComponentName("org.mozilla.firefox", "Main"))
    """

    def __init__(
        self,
        tracker: UsageTracker,
        source: UsageStatsSource,
        store: RunInfoStore,
        bus: EventBus
    ) -> None:
        self.tracker = tracker
        self.source = source
        self.store = store
        self.bus = bus
        self._lock = threading.Lock()

    # Loading

    def _fetch_usage_stats(self) -> List[UsageRecord]:
        """Read the source, falling back to no data when it is unavailable."""
        try:
            if not self.source.has_permission():
                print(f"Usage stats unavailable from {self.source.name} (no permission)")
                return []
            return self.source.get_usage_stats()
        except Exception as e:
            print(f"Error loading usage stats from {self.source.name}: {e}")
            return []

    def load(self) -> None:
        """Replace the tracked records with a fresh load from the source."""
        records = self._fetch_usage_stats()
        if DEBUG_MODE:
            debug_log(f"Loaded {len(records)} records from {self.source.name}")

        with self._lock:
            self.tracker.reset_state()
            self.tracker.bulk_replace(records)
            context = self._context("load")
        self.bus.emit(Event.SWITCHER_LOADED, context)

    # Events

    def application_started(
        self,
        component: Identity,
        timestamp: Optional[datetime.datetime] = None
    ) -> UsageRecord:
        """Count a launch, then save and notify."""
        with self._lock:
            record = self.tracker.record_start(component, timestamp or datetime.datetime.now())
            self._save()
            context = self._context("started")
        self._notify(context)
        return record

    def application_installed(
        self,
        component: Identity,
        timestamp: Optional[datetime.datetime] = None
    ) -> UsageRecord:
        with self._lock:
            record = self.tracker.record_install(component, timestamp or datetime.datetime.now())
            self._save()
            context = self._context("installed")
        self._notify(context)
        return record

    def application_updated(
        self,
        component: Identity,
        timestamp: Optional[datetime.datetime] = None
    ) -> UsageRecord:
        with self._lock:
            record = self.tracker.record_update(component, timestamp or datetime.datetime.now())
            self._save()
            context = self._context("updated")
        self._notify(context)
        return record

    def toggle_pin(self, component: Identity) -> bool:
        """Flip the pin state of an application; returns the new state."""
        with self._lock:
            pinned = self.tracker.toggle_pin(component)
            self._save()
            context = self._context("pinned")
        self._notify(context)
        return pinned

    def application_removed(self, component: Identity) -> bool:
        """
        Forget an application.

        Returns:
            True if the application was tracked
        """
        with self._lock:
            removed = self.tracker.remove(component) is not None
            self._save()
            context = self._context("removed")
        self._notify(context)
        return removed

    def packages_removed(self, package_names: Iterable[str]) -> List[ComponentName]:
        """
        Forget every tracked component belonging to the given packages.

        Returns:
            The components that were removed
        """
        packages = set(package_names)
        with self._lock:
            removed = [
                record.identity for record in self.tracker.all_records()
                if record.identity.package_name in packages
            ]
            for component in removed:
                self.tracker.remove(component)
            self._save()
            context = self._context("packages_removed")
        self._notify(context)
        return removed

    # Read access

    def most_used(self) -> List[UsageRecord]:
        with self._lock:
            return self._with_age(self.tracker.most_used_view())

    def recent(self) -> List[UsageRecord]:
        with self._lock:
            return self._with_age(self.tracker.recent_view())

    def get(self, component: Identity) -> Optional[UsageRecord]:
        with self._lock:
            return self.tracker.get(component)

    # Internals

    def _with_age(self, records: List[UsageRecord]) -> List[UsageRecord]:
        """Refresh the age of listed records against a single 'now'."""
        now = datetime.datetime.now()
        for record in records:
            self.tracker.get(record.identity, now)
        return records

    def _save(self) -> None:
        """Persist the record set; a failing store never blocks the update."""
        try:
            self.store.save(self.tracker.all_records())
        except Exception as e:
            print(f"Error saving usage records: {e}")

    def _context(self, reason: str) -> SwitcherUpdatedContext:
        return SwitcherUpdatedContext(
            most_used=self.tracker.most_used_view(),
            recent=self.tracker.recent_view(),
            reason=reason
        )

    def _notify(self, context: SwitcherUpdatedContext) -> None:
        # Emitted outside the lock so handlers may read back through the service
        self.bus.emit(Event.SWITCHER_UPDATED, context)
