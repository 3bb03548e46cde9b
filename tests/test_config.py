"""Unit tests for the settings loader."""
import json
import os
import tempfile
import unittest
import datetime
from appswitcher.config import Config


class TestConfig(unittest.TestCase):
    """Test JSON settings with fallback to defaults."""

    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "settings.json")

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def _write(self, content: str) -> None:
        with open(self.path, 'w') as f:
            f.write(content)

    def test_defaults_without_file(self) -> None:
        config = Config(self.path)

        self.assertEqual(config.most_used_limit, 5)
        self.assertEqual(config.recent_limit, 5)
        self.assertEqual(config.frequent_use_window, datetime.timedelta(hours=72))

    def test_values_from_file(self) -> None:
        self._write(json.dumps({"most_used_limit": 3, "recent_limit": 4, "frequent_use_hours": 24}))
        config = Config(self.path)

        self.assertEqual(config.most_used_limit, 3)
        self.assertEqual(config.recent_limit, 4)
        self.assertEqual(config.frequent_use_window, datetime.timedelta(hours=24))

    def test_invalid_values_fall_back(self) -> None:
        """Non-positive and non-integer limits are ignored."""
        self._write(json.dumps({"most_used_limit": 0, "recent_limit": "7", "frequent_use_hours": True}))
        config = Config(self.path)

        self.assertEqual(config.most_used_limit, 5)
        self.assertEqual(config.recent_limit, 5)
        self.assertEqual(config.frequent_use_hours, 72)

    def test_broken_file_falls_back(self) -> None:
        self._write("{not json")
        self.assertEqual(Config(self.path).most_used_limit, 5)

    def test_reload_picks_up_changes(self) -> None:
        config = Config(self.path)
        self._write(json.dumps({"recent_limit": 2}))

        config.reload()

        self.assertEqual(config.recent_limit, 2)


if __name__ == "__main__":
    unittest.main()
