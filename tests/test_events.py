"""Unit tests for the refresh event bus."""
import unittest
from unittest.mock import MagicMock
from appswitcher.events import Event, EventBus, SwitcherUpdatedContext


class TestEventBus(unittest.TestCase):

    def setUp(self) -> None:
        self.bus = EventBus()
        self.context = SwitcherUpdatedContext(most_used=[], recent=[], reason="test")

    def test_emit_reaches_subscribers_of_that_event_only(self) -> None:
        updated = MagicMock()
        loaded = MagicMock()
        self.bus.subscribe(Event.SWITCHER_UPDATED, updated)
        self.bus.subscribe(Event.SWITCHER_LOADED, loaded)

        self.bus.emit(Event.SWITCHER_UPDATED, self.context)

        updated.assert_called_once_with(self.context)
        loaded.assert_not_called()

    def test_unsubscribe(self) -> None:
        handler = MagicMock()
        self.bus.subscribe(Event.SWITCHER_UPDATED, handler)
        self.bus.unsubscribe(Event.SWITCHER_UPDATED, handler)
        self.bus.unsubscribe(Event.SWITCHER_LOADED, handler)

        self.bus.emit(Event.SWITCHER_UPDATED, self.context)

        handler.assert_not_called()

    def test_failing_handler_does_not_stop_others(self) -> None:
        failing = MagicMock(side_effect=RuntimeError("display gone"))
        working = MagicMock()
        self.bus.subscribe(Event.SWITCHER_UPDATED, failing)
        self.bus.subscribe(Event.SWITCHER_UPDATED, working)

        self.bus.emit(Event.SWITCHER_UPDATED, self.context)

        working.assert_called_once_with(self.context)


if __name__ == "__main__":
    unittest.main()
