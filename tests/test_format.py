"""Tests for calendar text formatting."""

from datetime import date

from yearcal import DateRange, format_day, format_week, layout_month, month_title
from yearcal.format import MONTH_HEIGHT, MONTH_WIDTH


class TestFormatDay:
    """Test format_day."""

    def test_single_digit(self):
        """Single digit days are right aligned in three columns."""
        assert format_day(date(2015, 1, 1)) == "  1"

    def test_double_digit(self):
        """Double digit days keep one leading space."""
        assert format_day(date(2015, 2, 11)) == " 11"


class TestFormatWeek:
    """Test format_week."""

    def test_partial_first_week(self):
        """Days before the range are left blank."""
        week = DateRange(date(2015, 1, 1), date(2015, 1, 5))

        assert format_week(week) == "           1  2  3  4 "

    def test_full_week(self):
        """A full week has no padding besides the trailing space."""
        week = DateRange(date(2015, 1, 5), date(2015, 1, 12))

        assert format_week(week) == "  5  6  7  8  9 10 11 "

    def test_partial_last_week(self):
        """Days after the range are left blank."""
        week = DateRange(date(2015, 1, 26), date(2015, 2, 1))

        assert format_week(week) == " 26 27 28 29 30 31    "

    def test_width(self):
        """Every week line is one month wide."""
        week = DateRange(date(2015, 1, 7), date(2015, 1, 9))

        assert len(format_week(week)) == MONTH_WIDTH


class TestMonthTitle:
    """Test month_title."""

    def test_centered(self):
        """Month name is centered with the extra space on the right."""
        assert month_title(date(2015, 1, 1)) == "       January        "

    def test_even_length_name(self):
        """An even-length name is padded equally."""
        assert month_title(date(2010, 2, 1)) == "       February       "


class TestLayoutMonth:
    """Test layout_month."""

    def test_january_2015(self):
        """Five weeks plus one padding line."""
        month = DateRange(date(2015, 1, 1), date(2015, 2, 1))

        assert list(layout_month(month)) == [
            "       January        ",
            "           1  2  3  4 ",
            "  5  6  7  8  9 10 11 ",
            " 12 13 14 15 16 17 18 ",
            " 19 20 21 22 23 24 25 ",
            " 26 27 28 29 30 31    ",
            "                      ",
        ]

    def test_february_2010(self):
        """A four-week February gets two padding lines."""
        month = DateRange(date(2010, 2, 1), date(2010, 3, 1))

        assert list(layout_month(month)) == [
            "       February       ",
            "  1  2  3  4  5  6  7 ",
            "  8  9 10 11 12 13 14 ",
            " 15 16 17 18 19 20 21 ",
            " 22 23 24 25 26 27 28 ",
            "                      ",
            "                      ",
        ]

    def test_six_week_month(self):
        """A month spanning six weeks needs no padding."""
        # August 2015 starts on Saturday and ends on Monday
        month = DateRange(date(2015, 8, 1), date(2015, 9, 1))
        lines = list(layout_month(month))

        assert len(lines) == MONTH_HEIGHT
        assert lines[1] == "                 1  2 "
        assert lines[-1] == " 31                   "

    def test_fixed_block_size(self):
        """Every month of a year lays out to the same block size."""
        for month in DateRange(date(2015, 1, 1), date(2016, 1, 1)).by_month():
            lines = list(layout_month(month))
            assert len(lines) == MONTH_HEIGHT
            assert all(len(line) == MONTH_WIDTH for line in lines)
