"""
Data models for the application switcher.
"""
import datetime
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Union


class AppAge(Enum):
    """Freshness of an application, derived on every read."""
    FREQUENT_USE = "frequent_use"
    RARE_USE = "rare_use"


@dataclass(frozen=True)
class ComponentName:
    """Stable identity of one launchable application component."""
    package_name: str
    class_name: str

    def __post_init__(self) -> None:
        # A class name starting with "." is relative to the package
        if self.class_name.startswith("."):
            object.__setattr__(self, "class_name", self.package_name + self.class_name)

    def flatten(self) -> str:
        """Return the "package/class" form used as the tracker key."""
        return f"{self.package_name}/{self.class_name}"

    @staticmethod
    def unflatten(text: str) -> "ComponentName":
        """
        Parse a "package/class" string.

        A class name starting with "." is relative to the package, so
        "com.example/.Main" becomes class "com.example.Main".

        Raises:
            ValueError: if either half is missing
        """
        package_name, sep, class_name = text.partition("/")
        if not sep or not package_name or not class_name:
            raise ValueError(f"Invalid component name: {text!r}")
        return ComponentName(package_name, class_name)

    def __str__(self) -> str:
        return self.flatten()


# Anything the tracker accepts as an identity
Identity = Union[ComponentName, str]


def as_component(identity: Identity) -> ComponentName:
    if isinstance(identity, ComponentName):
        return identity
    return ComponentName.unflatten(identity)


def identity_key(identity: Identity) -> str:
    """Return the canonical map key for an identity."""
    return as_component(identity).flatten()


@dataclass(eq=False)
class UsageRecord:
    """
    Usage information for one application.

    Records compare by object identity: ranked views hold references to
    the tracker's records, never copies.
    """
    identity: ComponentName
    use_count: int = 0
    last_execution: datetime.datetime = field(default_factory=datetime.datetime.now)
    is_new: bool = False
    is_updated: bool = False
    is_pinned: bool = False
    age: AppAge = AppAge.RARE_USE

    @property
    def key(self) -> str:
        return self.identity.flatten()

    def increment_count(self) -> None:
        self.use_count += 1

    def reset_count(self) -> None:
        self.use_count = 0

    def copy(self) -> "UsageRecord":
        """Return a detached record with the same fields."""
        return replace(self)

    def to_dict(self) -> dict[str, object]:
        """Serialize for JSON responses."""
        return {
            "component": self.key,
            "count": self.use_count,
            "last_execution": self.last_execution.isoformat(timespec="seconds"),
            "is_new": self.is_new,
            "is_updated": self.is_updated,
            "is_pinned": self.is_pinned,
            "age": self.age.value,
        }

    def __repr__(self) -> str:
        return (f"UsageRecord({self.key}, count={self.use_count}, "
                f"last={self.last_execution.isoformat(timespec='seconds')}, "
                f"pinned={self.is_pinned})")


def compute_age(
    record: UsageRecord,
    now: datetime.datetime,
    frequent_use_window: datetime.timedelta
) -> AppAge:
    """
    Classify a record as frequently or rarely used.

    Pinned apps are always frequent.
    """
    if record.is_pinned or (now - record.last_execution) < frequent_use_window:
        return AppAge.FREQUENT_USE
    return AppAge.RARE_USE


def generate_run_info(
    component: ComponentName,
    is_fresh_install: bool = False,
    is_updated: bool = False,
    timestamp: Optional[datetime.datetime] = None
) -> UsageRecord:
    """Build an observation record for a single launch."""
    if timestamp is None:
        timestamp = datetime.datetime.now()
    return UsageRecord(
        identity=component,
        use_count=1,
        last_execution=timestamp,
        is_new=is_fresh_install,
        is_updated=is_updated,
        is_pinned=False,
    )
