"""Module-level configuration for calendar defaults."""

import threading
from dataclasses import dataclass
from typing import Literal

from yearcal.validation import require_positive

BackendName = Literal["pandas", "polars"]


@dataclass
class CalendarConfig:
    """Configuration for calendar defaults."""

    months_per_line: int = 3
    default_backend: BackendName = "pandas"


# Module-level singleton
_calendar_config: CalendarConfig | None = None
_config_lock = threading.Lock()


def get_calendar_config() -> CalendarConfig:
    """Get the global calendar configuration singleton."""
    global _calendar_config
    if _calendar_config is None:
        with _config_lock:
            if _calendar_config is None:
                _calendar_config = CalendarConfig()
    return _calendar_config


def configure_calendar(
    months_per_line: int | None = None,
    default_backend: BackendName | None = None,
) -> None:
    """Configure default calendar settings.

    Args:
        months_per_line: Default number of months laid out side by side.
            Must be positive.
        default_backend: Default DataFrame backend for DateRange.to_frame.

    Example:
        from yearcal import configure_calendar, render_calendar

        configure_calendar(months_per_line=4)
        print(render_calendar(2015))  # 3 rows of 4 months
    """
    if months_per_line is not None:
        require_positive("months_per_line", months_per_line)
    if default_backend is not None and default_backend not in ("pandas", "polars"):
        raise ValueError(f"Unknown backend: {default_backend}")

    config = get_calendar_config()
    with _config_lock:
        if months_per_line is not None:
            config.months_per_line = months_per_line
        if default_backend is not None:
            config.default_backend = default_backend


def get_default_months_per_line() -> int:
    """Get the default number of months per line."""
    return get_calendar_config().months_per_line


def reset_calendar_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _calendar_config
    with _config_lock:
        _calendar_config = CalendarConfig()
