"""Date ranges and grouping of consecutive dates."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING, Any, Callable, Hashable, Iterator, Literal

from yearcal.mixins import SequenceMixin

if TYPE_CHECKING:
    from yearcal.backends.base import Backend

Date = date
ONE_DAY = timedelta(days=1)


def week_number(dt: Date) -> int:
    """ISO week of the year the date belongs to, starting at zero."""
    return dt.isocalendar()[1] - 1


def weekday(dt: Date) -> int:
    """Days since Monday (Mon-Sun = 0-6)."""
    return dt.weekday()


def month_number(dt: Date) -> int:
    return dt.month


@dataclass(frozen=True)
class DateRange(SequenceMixin):
    """Half-open range of dates [start, end).

    Iterating yields every date from start up to, but excluding, end.
    Each iteration starts from the stored bounds, so a range can be
    walked any number of times. A range with start >= end is empty.
    """

    start: Date
    end: Date

    def empty(self) -> bool:
        return self.start >= self.end

    def __iter__(self) -> Iterator[Date]:
        current = self.start
        while current < self.end:
            yield current
            current += ONE_DAY

    def __len__(self) -> int:
        if self.empty():
            return 0
        return (self.end - self.start).days

    def __contains__(self, item: object) -> bool:
        return isinstance(item, date) and self.start <= item < self.end

    def group_by(self, key: Callable[[Date], Hashable]) -> "GroupBy":
        """Group consecutive dates that share the same key value."""
        return GroupBy(self, key)

    def by_month(self) -> "GroupBy":
        """Split the range into runs of dates in the same month."""
        return self.group_by(month_number)

    def by_week(self) -> "GroupBy":
        """Split the range into runs of dates in the same ISO week (Monday start)."""
        return self.group_by(week_number)

    def to_frame(self, backend: Literal["pandas", "polars"] | None = None) -> Any:
        """Tabulate the range, one row per date.

        Args:
            backend: DataFrame backend ("pandas" or "polars"). Defaults to
                the configured default backend.

        Returns:
            DataFrame with columns date, month, week, weekday.
        """
        from yearcal.backends import get_backend
        from yearcal.config import get_calendar_config

        impl: "Backend" = get_backend(backend or get_calendar_config().default_backend)
        days = list(self)
        return impl.from_columns({
            "date": days,
            "month": [month_number(d) for d in days],
            "week": [week_number(d) for d in days],
            "weekday": [weekday(d) for d in days],
        })

    def __repr__(self) -> str:
        return f"DateRange({self.start.isoformat()}, {self.end.isoformat()})"


class GroupBy(SequenceMixin):
    """Split a DateRange into maximal runs of dates with equal keys.

    A new group starts exactly where key(date) changes. Each pull scans
    forward from the start of the remaining range, then keeps only the
    part after the emitted group. The key function is a plain value and
    the source DateRange is never modified.
    """

    def __init__(self, dates: DateRange, key: Callable[[Date], Hashable]) -> None:
        self._dates = dates
        self._key = key

    def __iter__(self) -> "GroupBy":
        return self

    def __next__(self) -> DateRange:
        start, end = self._dates.start, self._dates.end
        if start >= end:
            raise StopIteration

        start_key = self._key(start)
        boundary = start + ONE_DAY
        while boundary < end and self._key(boundary) == start_key:
            boundary += ONE_DAY

        self._dates = DateRange(boundary, end)
        return DateRange(start, boundary)

    def __repr__(self) -> str:
        key_name = getattr(self._key, "__name__", repr(self._key))
        return f"GroupBy({self._dates!r}, key={key_name})"


def dates(year: int) -> DateRange:
    """Every date in the given year."""
    return DateRange(date(year, 1, 1), date(year + 1, 1, 1))
