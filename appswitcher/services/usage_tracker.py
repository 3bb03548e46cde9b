"""
appswitcher/services/usage_tracker.py

Most used and recent application bookkeeping.
"""
import datetime
from typing import Dict, Iterable, List, Optional
from ..config import (
    MOST_USED_LIMIT,
    RECENT_LIMIT,
    MIN_MOST_USED_COUNT,
    DEBUG_MODE
)
from ..debug import debug_log
from ..models import (
    ComponentName,
    Identity,
    UsageRecord,
    as_component,
    compute_age,
    identity_key
)
from ..ranking import BoundedRankedList, InvalidCapacityError


def _by_count(candidate: UsageRecord, incumbent: UsageRecord) -> bool:
    return candidate.use_count > incumbent.use_count


def _by_date(candidate: UsageRecord, incumbent: UsageRecord) -> bool:
    return candidate.last_execution > incumbent.last_execution


class UsageTracker:
    """
    Keeps one UsageRecord per application and derives two ranked views:

    - most used: records launched at least `min_most_used_count` times,
      highest count first
    - recent: every other record, latest launch first

    The canonical record map is the single source of truth; the views
    are rebuilt from it and hold references to the same records.

    The tracker is not thread-safe. Callers sharing one instance across
    threads must serialize access.
    """

    def __init__(
        self,
        frequent_use_window: datetime.timedelta,
        most_used_limit: int = MOST_USED_LIMIT,
        recent_limit: int = RECENT_LIMIT,
        min_most_used_count: int = MIN_MOST_USED_COUNT,
        update_lists: bool = True
    ) -> None:
        """
        Args:
            frequent_use_window: Launch age below which an app is "frequent"
            most_used_limit: Capacity of the most used view
            recent_limit: Capacity of the recent view
            min_most_used_count: Launches needed to enter the most used view
            update_lists: False keeps only the record map (no views)
        """
        if min_most_used_count <= 0:
            raise InvalidCapacityError(
                f"Minimal most used count must be positive, got {min_most_used_count}"
            )
        self.frequent_use_window = frequent_use_window
        self.min_most_used_count = min_most_used_count
        self._update_lists = update_lists

        self._records: Dict[str, UsageRecord] = {}
        self._most_used: BoundedRankedList[UsageRecord] = BoundedRankedList(most_used_limit, _by_count)
        self._recent: BoundedRankedList[UsageRecord] = BoundedRankedList(recent_limit, _by_date)
        self.most_used_limit = most_used_limit
        self.recent_limit = recent_limit

    @property
    def update_lists(self) -> bool:
        """False when the tracker only keeps records (fixed at construction)."""
        return self._update_lists

    # Configuration

    def set_up_limits(self, most_used_limit: int, recent_limit: int) -> None:
        """
        Replace both views with new capacities and rebuild them.

        Limits are validated even in record-only mode.

        Raises:
            InvalidCapacityError: if either limit is not positive
        """
        most_used = BoundedRankedList(most_used_limit, _by_count)
        recent = BoundedRankedList(recent_limit, _by_date)

        self.most_used_limit = most_used_limit
        self.recent_limit = recent_limit
        self._most_used = most_used
        self._recent = recent
        self._rebuild()

    # Event handlers

    def record_start(
        self,
        identity: Identity,
        timestamp: datetime.datetime,
        is_pinned: Optional[bool] = None
    ) -> UsageRecord:
        """
        Count one launch of an application.

        Args:
            identity: Launched component
            timestamp: Launch time
            is_pinned: Pin state observed with the launch; None keeps the
                stored state
        """
        record = self._ensure_record(identity, timestamp)
        record.increment_count()
        record.last_execution = timestamp
        record.is_new = False
        record.is_updated = False
        if is_pinned is not None:
            record.is_pinned = is_pinned

        if DEBUG_MODE:
            debug_log(f"Application started: {record.key} : {record.use_count}")

        self._rebuild()
        return record

    def record_install(self, identity: Identity, timestamp: datetime.datetime) -> UsageRecord:
        """
        Mark an application as freshly installed. Views are not rebuilt.

        The timestamp only seeds a new record; an existing record keeps its
        last execution so the recent view stays ordered.
        """
        record = self._ensure_record(identity, timestamp)
        record.is_new = True
        record.is_updated = False
        record.is_pinned = False

        if DEBUG_MODE:
            debug_log(f"Application installed: {record.key} : {record.use_count}")
        return record

    def record_update(self, identity: Identity, timestamp: datetime.datetime) -> UsageRecord:
        """Mark an application as updated. Views are not rebuilt."""
        record = self._ensure_record(identity, timestamp)
        record.is_new = False
        record.is_updated = True

        if DEBUG_MODE:
            debug_log(f"Application updated: {record.key} : {record.use_count}")
        return record

    def toggle_pin(self, identity: Identity) -> bool:
        """
        Flip the pinned flag of an application.

        Pinning only affects the age classification, so views are not
        rebuilt.

        Returns:
            The new pinned state
        """
        record = self._ensure_record(identity, datetime.datetime.now())
        record.is_pinned = not record.is_pinned
        return record.is_pinned

    def remove(self, identity: Identity) -> Optional[UsageRecord]:
        """
        Forget an application.

        Returns:
            The removed record, or None if the identity was unknown
        """
        record = self._records.pop(identity_key(identity), None)
        if record is None:
            return None

        # Only a listed record can change what the views show
        if record in self._most_used or record in self._recent:
            self._rebuild()
        return record

    def bulk_replace(self, records: Iterable[UsageRecord]) -> None:
        """Replace every known record, e.g. with a fresh usage stats load."""
        self.reset_state()
        for record in records:
            self._records[record.key] = record
        self._rebuild()

    def reset_state(self) -> None:
        """Forget every record and empty both views."""
        self._most_used.clear()
        self._recent.clear()
        self._records.clear()

    # Read access

    def get(
        self,
        identity: Identity,
        now: Optional[datetime.datetime] = None
    ) -> Optional[UsageRecord]:
        """Return the record for an identity with its age refreshed, or None."""
        record = self._records.get(identity_key(identity))
        if record is None:
            return None

        if now is None:
            now = datetime.datetime.now()
        record.age = compute_age(record, now, self.frequent_use_window)
        return record

    def most_used_view(self) -> List[UsageRecord]:
        """Most used records, highest count first."""
        return list(self._most_used)

    def recent_view(self) -> List[UsageRecord]:
        """Recently used records outside the most used view, latest first."""
        return list(self._recent)

    def all_records(self) -> List[UsageRecord]:
        """Every known record, for persistence."""
        return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, identity: object) -> bool:
        if not isinstance(identity, (ComponentName, str)):
            return False
        return identity_key(identity) in self._records

    # Internals

    def _ensure_record(self, identity: Identity, timestamp: datetime.datetime) -> UsageRecord:
        """Fetch the record for an identity, creating a zero-count one if unseen."""
        key = identity_key(identity)
        record = self._records.get(key)
        if record is None:
            if DEBUG_MODE:
                debug_log(f"No entry yet for {key}")
            record = UsageRecord(
                identity=as_component(identity),
                use_count=0,
                last_execution=timestamp
            )
            self._records[key] = record
        return record

    def _rebuild(self) -> None:
        """Recompute both views from the record map."""
        if not self._update_lists:
            return

        most_used, recent = self._most_used, self._recent
        most_used.clear()
        recent.clear()

        for record in self._records.values():
            if record.use_count >= self.min_most_used_count:
                most_used.insert(record)

        for record in self._records.values():
            if record not in most_used:
                recent.insert(record)

        if DEBUG_MODE:
            for record in most_used:
                debug_log(f"MostUsed - {record!r}")
            for record in recent:
                debug_log(f"RecentApps - {record!r}")
