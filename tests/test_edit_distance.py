"""
Tests for bounded edit distance.
"""
from unittest.mock import patch

from home_command.resolution import MAX_EDIT_DISTANCE, edit_distance


class TestEditDistance:
    """Tests for edit_distance."""

    def test_identical_strings(self):
        """Test that identical strings have distance 0."""
        assert edit_distance("", "") == 0
        assert edit_distance("abc", "abc") == 0

    def test_empty_side_is_length_of_other(self):
        """Test that an empty string is as far as the other string is long."""
        assert edit_distance("", "abc") == 3
        assert edit_distance("kitchen", "") == 7

    def test_single_edits(self):
        """Test substitution, insertion and deletion."""
        assert edit_distance("abc", "abd") == 1
        assert edit_distance("kitchn", "kitchen") == 1
        assert edit_distance("lightt", "light") == 1

    def test_transposition_counts_as_two(self):
        """Test that swapped letters cost two substitutions."""
        assert edit_distance("light", "ligth") == 2

    def test_classic_example(self):
        """Test kitten/sitting."""
        assert edit_distance("kitten", "sitting") == 3

    def test_length_gap_short_circuits(self):
        """Test that a large length gap returns MAX_EDIT_DISTANCE + 1 without computing."""
        with patch("home_command.resolution.edit_distance.Levenshtein") as levenshtein:
            result = edit_distance("abc", "abcdefghij")

        assert result == MAX_EDIT_DISTANCE + 1
        levenshtein.distance.assert_not_called()

    def test_length_gap_at_limit_is_computed(self):
        """Test that a gap of exactly MAX_EDIT_DISTANCE is still measured."""
        assert edit_distance("light", "lights!") == 2
