"""
Unit tests for the helpers in core/
"""

import pytest

from core.identifiers import is_valid_id, valid_ids
from core.sanitization import has_surrounding_whitespace, sanitize_tag, unique_tags
from core.security import hash_password, verify_password

pytestmark = pytest.mark.unit


class TestSanitization:
    def test_sanitize_tag_collapses_whitespace_and_control_chars(self):
        assert sanitize_tag("  upper\tbody \n day ") == "upper body day"

    def test_sanitize_tag_keeps_long_tags_whole(self):
        assert sanitize_tag("x" * 80) == "x" * 80

    def test_unique_tags_keeps_first_seen_order(self):
        assert unique_tags(["b", "a", " b", "", "c", "a"]) == ["b", "a", "c"]

    @pytest.mark.parametrize("value,expected", [("ada", False), (" ada", True), ("ada\n", True)])
    def test_has_surrounding_whitespace(self, value, expected):
        assert has_surrounding_whitespace(value) is expected


class TestIdentifiers:
    def test_is_valid_id(self):
        assert is_valid_id("2c5ea4c0-4067-4e43-9d52-6b1d2d8e7c11")
        assert not is_valid_id("squat")
        assert not is_valid_id("")

    def test_valid_ids_dedupes_and_drops_junk(self):
        a = "2c5ea4c0-4067-4e43-9d52-6b1d2d8e7c11"
        b = "6b0c1d3e-0000-4000-8000-000000000000"

        assert valid_ids([b, "junk", a, b]) == [b, a]


class TestSecurity:
    def test_hash_round_trip(self):
        stored = hash_password("correct-horse")

        assert stored != "correct-horse"
        assert verify_password(stored, "correct-horse")
        assert not verify_password(stored, "wrong-horse")

    def test_hashes_are_salted(self):
        assert hash_password("same") != hash_password("same")

    def test_empty_hash_never_verifies(self):
        assert not verify_password("", "")
