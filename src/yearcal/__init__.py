"""yearcal - Plain-text year calendars built from lazy sequence combinators."""

from yearcal.backends import PandasBackend, PolarsBackend, get_backend
from yearcal.calendar import calendar_lines, render_calendar
from yearcal.config import (
    CalendarConfig,
    configure_calendar,
    get_calendar_config,
    reset_calendar_config,
)
from yearcal.dates import Date, DateRange, GroupBy, dates, week_number, weekday
from yearcal.format import format_day, format_week, layout_month, month_title
from yearcal.iterators import (
    ChainAll,
    Chunk,
    Interleave,
    Seq,
    chain_all,
    chunk,
    interleave,
    join,
    seq,
    transpose,
)
from yearcal.logging import configure_logging, get_logger
from yearcal.validation import PreconditionError

__all__ = [
    # Sequence combinators
    "Seq",
    "Chunk",
    "Interleave",
    "ChainAll",
    "seq",
    "chunk",
    "interleave",
    "transpose",
    "chain_all",
    "join",
    # Dates
    "Date",
    "DateRange",
    "GroupBy",
    "dates",
    "week_number",
    "weekday",
    # Formatting and layout
    "format_day",
    "format_week",
    "month_title",
    "layout_month",
    "calendar_lines",
    "render_calendar",
    # Backends
    "PandasBackend",
    "PolarsBackend",
    "get_backend",
    # Config
    "CalendarConfig",
    "configure_calendar",
    "get_calendar_config",
    "reset_calendar_config",
    # Logging
    "configure_logging",
    "get_logger",
    # Errors
    "PreconditionError",
]
__version__ = "0.1.0"
