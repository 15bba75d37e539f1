"""Year layout: months arranged in a grid of text lines."""

from typing import Iterator

from yearcal.config import get_default_months_per_line
from yearcal.dates import dates
from yearcal.format import layout_month
from yearcal.iterators import transpose
from yearcal.logging import get_logger, timed_block
from yearcal.validation import require_positive

_log = get_logger(__name__)


def calendar_lines(year: int, months_per_line: int | None = None) -> Iterator[str]:
    """Lazily produce the lines of a year calendar.

    Months are batched into rows of `months_per_line`; each row is
    transposed so the n-th line of every month in the row lands on the
    same output line.

    Args:
        year: Calendar year to render.
        months_per_line: Months side by side. Defaults to the configured
            value.

    Returns:
        Iterator of lines. Rows of a full width are MONTH_WIDTH times
        `months_per_line` characters wide; a trailing short row is
        narrower.

    Raises:
        PreconditionError: If months_per_line is not positive
    """
    if months_per_line is None:
        months_per_line = get_default_months_per_line()

    return (
        dates(year)
        .by_month()
        .map(layout_month)
        .chunk(months_per_line)
        .map(transpose)
        .chain_all()
        .map("".join)
    )


def render_calendar(year: int, months_per_line: int | None = None) -> str:
    """Render a year calendar as a single string.

    Example:
        print(render_calendar(2015, months_per_line=4))
    """
    if months_per_line is None:
        months_per_line = get_default_months_per_line()
    require_positive("months_per_line", months_per_line)

    with timed_block(
        _log, "calendar_rendered", year=year, months_per_line=months_per_line
    ):
        return calendar_lines(year, months_per_line).join("\n")
