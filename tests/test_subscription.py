"""Tests for the SubscriptionId class."""

import unittest

from kvpubsub.subscription import SubscriptionId, GLOBAL_NAMESPACE


class TestSubscriptionId(unittest.TestCase):
    """Test cases for SubscriptionId."""

    def test_entry_id_string_form(self):
        """Test that entry ids render as {key}_{n}."""
        sid = SubscriptionId("sensor", 3)

        assert str(sid) == "sensor_3"
        assert sid.namespace == "sensor"
        assert not sid.is_global

    def test_global_id_string_form(self):
        """Test that global ids render with the global namespace."""
        sid = SubscriptionId(None, 0)

        assert str(sid) == "global_0"
        assert sid.namespace == GLOBAL_NAMESPACE
        assert sid.is_global

    def test_equality_and_hash(self):
        """Test that ids compare and hash by key and sequence."""
        assert SubscriptionId("a", 1) == SubscriptionId("a", 1)
        assert SubscriptionId("a", 1) != SubscriptionId("a", 2)
        assert SubscriptionId("a", 1) != SubscriptionId(None, 1)
        assert len({SubscriptionId("a", 1), SubscriptionId("a", 1)}) == 1

    def test_not_equal_to_string(self):
        """Test that an id is not equal to its string form."""
        assert SubscriptionId("a", 1) != "a_1"

    def test_parse_entry_id(self):
        """Test parsing an entry id."""
        sid = SubscriptionId.parse("temperature_12")

        assert sid == SubscriptionId("temperature", 12)

    def test_parse_global_id(self):
        """Test that the global namespace parses to a global id."""
        sid = SubscriptionId.parse("global_4")

        assert sid.is_global
        assert sid.sequence == 4

    def test_parse_key_with_underscores(self):
        """Test that keys containing underscores survive parsing."""
        sid = SubscriptionId.parse("room_1_temp_7")

        assert sid.key == "room_1_temp"
        assert sid.sequence == 7

    def test_parse_empty_key(self):
        """Test that an empty namespace parses to the empty key."""
        sid = SubscriptionId.parse("_0")

        assert sid == SubscriptionId("", 0)
        assert not sid.is_global

    def test_parse_invalid(self):
        """Test that malformed ids raise ValueError."""
        invalid_ids = ["", "nounderscore", "key_", "key_x", "key_-1"]

        for text in invalid_ids:
            with self.assertRaises(ValueError) as context:
                SubscriptionId.parse(text)
            assert "invalid subscription id" in str(context.exception).lower()


if __name__ == "__main__":
    unittest.main()
