"""Calendar text formatting.

A month is laid out as a block of fixed-width lines:

           January
               1  2  3  4
      5  6  7  8  9 10 11
     ...

Every line is MONTH_WIDTH characters wide and every month has exactly
MONTH_HEIGHT lines (title plus six week lines, padded with blanks),
so months can be placed side by side.
"""

from itertools import chain, repeat
from typing import Iterator

from yearcal.dates import ONE_DAY, Date, DateRange, weekday

DAY_WIDTH = 3
MONTH_WIDTH = 7 * DAY_WIDTH + 1
WEEKS_PER_MONTH = 6
MONTH_HEIGHT = WEEKS_PER_MONTH + 1


def format_day(dt: Date) -> str:
    """Day of the month, right aligned."""
    return f"{dt.day:>{DAY_WIDTH}}"


def format_week(week: DateRange) -> str:
    """Format a week as one line, leaving blanks for days outside the range.

    The range must lie within a single Monday-to-Sunday week.
    """
    pad_left = weekday(week.start) * DAY_WIDTH
    pad_right = (6 - weekday(week.end - ONE_DAY)) * DAY_WIDTH
    days = "".join(format_day(dt) for dt in week)
    return " " * pad_left + days + " " * pad_right + " "


def month_title(dt: Date) -> str:
    """Full month name, centered."""
    return f"{dt.strftime('%B'):^{MONTH_WIDTH}}"


def layout_month(month: DateRange) -> Iterator[str]:
    """Lines of a month block: title, one line per week, then padding.

    Args:
        month: Non-empty range within a single month.

    Returns:
        Iterator over exactly MONTH_HEIGHT lines of MONTH_WIDTH characters.
    """
    weeks = list(month.by_week())
    padding = repeat(" " * MONTH_WIDTH, WEEKS_PER_MONTH - len(weeks))
    return chain([month_title(month.start)], map(format_week, weeks), padding)
