"""Unit tests for BoundedRankedList."""
import unittest
from appswitcher.ranking import BoundedRankedList, InvalidCapacityError


class Entry:
    """Rankable test entry; compares by identity like UsageRecord."""

    def __init__(self, name: str, score: int) -> None:
        self.name = name
        self.score = score


def _by_score(a: Entry, b: Entry) -> bool:
    return a.score > b.score


class TestBoundedRankedList(unittest.TestCase):
    """Test bounded insertion-sort behaviour."""

    def _names(self, ranked: BoundedRankedList[Entry]) -> list[str]:
        return [e.name for e in ranked]

    def test_rejects_non_positive_limit(self) -> None:
        """Zero or negative capacity is a configuration error."""
        with self.assertRaises(InvalidCapacityError):
            BoundedRankedList(0, _by_score)
        with self.assertRaises(ValueError):
            BoundedRankedList(-3, _by_score)

    def test_keeps_descending_order(self) -> None:
        """Entries are placed best first regardless of arrival order."""
        ranked: BoundedRankedList[Entry] = BoundedRankedList(5, _by_score)
        for name, score in (("b", 2), ("d", 4), ("a", 1), ("c", 3)):
            ranked.insert(Entry(name, score))

        self.assertEqual(self._names(ranked), ["d", "c", "b", "a"])
        self.assertEqual(len(ranked), 4)

    def test_ties_keep_incumbent_first(self) -> None:
        """A new entry never displaces an equal-ranked incumbent."""
        ranked: BoundedRankedList[Entry] = BoundedRankedList(3, _by_score)
        ranked.insert(Entry("first", 5))
        ranked.insert(Entry("second", 5))
        ranked.insert(Entry("third", 5))

        self.assertEqual(self._names(ranked), ["first", "second", "third"])

    def test_tail_evicted_on_overflow(self) -> None:
        """A better entry pushes the lowest-ranked one out."""
        ranked: BoundedRankedList[Entry] = BoundedRankedList(2, _by_score)
        ranked.insert(Entry("low", 1))
        ranked.insert(Entry("mid", 2))
        inserted = ranked.insert(Entry("high", 3))

        self.assertTrue(inserted)
        self.assertEqual(self._names(ranked), ["high", "mid"])

    def test_full_list_drops_entry_that_cannot_outrank(self) -> None:
        """At capacity, an entry tying or trailing every incumbent is dropped."""
        ranked: BoundedRankedList[Entry] = BoundedRankedList(2, _by_score)
        ranked.insert(Entry("a", 5))
        ranked.insert(Entry("b", 5))

        self.assertFalse(ranked.insert(Entry("c", 4)))
        self.assertFalse(ranked.insert(Entry("d", 5)))
        self.assertEqual(self._names(ranked), ["a", "b"])

    def test_contains_uses_identity(self) -> None:
        """Membership is by object identity, not equal content."""
        ranked: BoundedRankedList[Entry] = BoundedRankedList(2, _by_score)
        entry = Entry("a", 1)
        ranked.insert(entry)

        self.assertIn(entry, ranked)
        self.assertNotIn(Entry("a", 1), ranked)

    def test_clear_and_index(self) -> None:
        """Indexed reads follow rank order; clear empties the list."""
        ranked: BoundedRankedList[Entry] = BoundedRankedList(3, _by_score)
        ranked.insert(Entry("a", 1))
        ranked.insert(Entry("b", 2))

        self.assertEqual(ranked[0].name, "b")
        self.assertEqual(ranked[-1].name, "a")
        self.assertEqual(ranked.limit, 3)

        ranked.clear()
        self.assertEqual(len(ranked), 0)
        self.assertEqual(list(ranked), [])


if __name__ == "__main__":
    unittest.main()
