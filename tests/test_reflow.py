"""Tests for live regrouping and cursor tracking."""

import pytest

from currency_input.models import EditEvent, Reflowed
from currency_input.reflow import reflow, regroup, split_number, strip_separators


class TestStripSeparators:
    """Tests for strip_separators."""

    def test_cursor_moves_left_past_separators(self):
        assert strip_separators("1 234 567", 7) == ("1234567", 5)

    def test_cursor_before_separator(self):
        assert strip_separators("1 234", 1) == ("1234", 1)

    def test_cursor_clamped_to_text(self):
        assert strip_separators("12", 10) == ("12", 2)


class TestSplitNumber:
    """Tests for split_number."""

    def test_no_point(self):
        assert split_number("123") == ("123", None)

    def test_bare_point(self):
        """A typed point with no digits is distinct from no point."""
        assert split_number("123.") == ("123", "")

    def test_fraction(self):
        assert split_number("1.25") == ("1", "25")


class TestRegroup:
    """Tests for regroup."""

    def test_short_number_unchanged(self):
        assert regroup("125", 3) == Reflowed("125", 3)

    def test_groups_from_the_right(self):
        assert regroup("1234567", 7) == Reflowed("1 234 567", 9)

    def test_fraction_not_grouped(self):
        assert regroup("1234.5678", 9) == Reflowed("1 234.5678", 10)

    def test_cursor_before_boundary_not_shifted(self):
        assert regroup("1234", 1) == Reflowed("1 234", 1)

    def test_negative_sign_outside_groups(self):
        assert regroup("-1234", 5) == Reflowed("-1 234", 6)

    @pytest.mark.parametrize("digits", ["1", "12", "123", "1234", "12345", "123456", "1234567890"])
    def test_groups_have_three_digits(self, digits):
        """Every group but the leftmost has exactly three digits."""
        groups = regroup(digits, 0).text.split(" ")
        assert all(groups)
        assert all(len(group) == 3 for group in groups[1:])
        assert 1 <= len(groups[0]) <= 3
        assert "".join(groups) == digits


class TestReflow:
    """Tests for reflow."""

    def test_placeholder_zero_replaced(self):
        """Typing into a field showing "0" replaces the zero."""
        assert reflow(EditEvent("4", "04", "0", 1)) == Reflowed("4", 1)

    def test_placeholder_zero_replaced_when_typed_before(self):
        assert reflow(EditEvent("4", "40", "0", 1)) == Reflowed("4", 1)

    def test_placeholder_zero_typed_zero(self):
        assert reflow(EditEvent("0", "00", "0", 1)) == Reflowed("0", 1)

    def test_append_digit_without_groups(self):
        assert reflow(EditEvent("5", "125", "12", 3)) == Reflowed("125", 3)

    def test_fourth_digit_shifts_cursor(self):
        """Typing inside "125" so it regroups keeps the cursor after the digit."""
        assert reflow(EditEvent("4", "1245", "125", 3)) == Reflowed("1 245", 4)

    def test_fourth_digit_at_end(self):
        assert reflow(EditEvent("4", "1254", "125", 4)) == Reflowed("1 254", 5)

    def test_stale_separators_are_regrouped(self):
        assert reflow(EditEvent("7", "1 2347", "1 234", 6)) == Reflowed("12 347", 6)

    def test_leading_zeros_stripped(self):
        assert reflow(EditEvent("", "0012", "0012", 4)) == Reflowed("12", 2)

    def test_leading_zero_cursor_not_negative(self):
        assert reflow(EditEvent("", "0012", "0012", 0)) == Reflowed("12", 0)

    def test_point_after_zero_kept(self):
        assert reflow(EditEvent(".", "0.", "0", 2)) == Reflowed("0.", 2)

    def test_point_typed_first(self):
        """A point on an empty integer part gets a zero before it."""
        assert reflow(EditEvent(".", ".", "", 1)) == Reflowed("0.", 2)

    def test_bare_point_preserved(self):
        assert reflow(EditEvent(".", "1234.", "1 234", 5)) == Reflowed("1 234.", 6)

    def test_deleting_everything_shows_zero(self):
        assert reflow(EditEvent("", "", "5", 0)) == Reflowed("0", 0)

    def test_backspace_regroups(self):
        assert reflow(EditEvent("", "1 23", "1 234", 4)) == Reflowed("123", 3)

    def test_deleting_integer_digits_before_point(self):
        assert reflow(EditEvent("", ".5", "1.5", 0)) == Reflowed("0.5", 0)

    @pytest.mark.parametrize("text", ["0", "12", "1 234", "12 345.67", "1 234 567.", "0.05"])
    def test_idempotent_on_canonical_text(self, text):
        """Reflowing canonical text without an edit changes nothing.

        A cursor sitting right after a separator is reported before it,
        which is the same place in the digits.
        """
        for cursor in range(len(text) + 1):
            result = reflow(EditEvent("", text, text, cursor))
            assert result.text == text
            expected = cursor - 1 if cursor and text[cursor - 1] == " " else cursor
            assert result.cursor == expected
