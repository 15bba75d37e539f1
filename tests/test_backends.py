"""Tests for backend implementations."""

from datetime import date

import pandas as pd
import polars as pl
import pytest

from yearcal import DateRange, PandasBackend, PolarsBackend, configure_calendar, dates, get_backend


class TestGetBackend:
    """Test backend resolution by name."""

    def test_known_backends(self):
        """pandas and polars resolve to their backends."""
        assert isinstance(get_backend("pandas"), PandasBackend)
        assert isinstance(get_backend("polars"), PolarsBackend)

    def test_unknown_backend(self):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown backend: arrow"):
            get_backend("arrow")


class TestPandasBackend:
    """Test PandasBackend functionality."""

    def test_from_columns(self):
        """Column lists become DataFrame columns."""
        backend = PandasBackend()
        df = backend.from_columns({"a": [1, 2], "b": ["x", "y"]})

        assert list(df.columns) == ["a", "b"]
        assert len(df) == 2

    def test_dates_become_datetimes(self):
        """Date columns are stored as datetime64."""
        backend = PandasBackend()
        df = backend.from_columns({"date": [date(2015, 1, 1), date(2015, 1, 2)]})

        assert pd.api.types.is_datetime64_any_dtype(df["date"])

    def test_empty_columns(self):
        """Empty column lists keep their column names."""
        backend = PandasBackend()
        df = backend.from_columns({"date": [], "month": []})

        assert list(df.columns) == ["date", "month"]
        assert df.empty


class TestPolarsBackend:
    """Test PolarsBackend functionality."""

    def test_from_columns(self):
        """Column lists become DataFrame columns."""
        backend = PolarsBackend()
        df = backend.from_columns({"a": [1, 2], "b": ["x", "y"]})

        assert df.columns == ["a", "b"]
        assert df.height == 2

    def test_dates_keep_date_dtype(self):
        """Python dates map to pl.Date."""
        backend = PolarsBackend()
        df = backend.from_columns({"date": [date(2015, 1, 1)]})

        assert df.schema["date"] == pl.Date

    def test_empty_columns(self):
        """Empty column lists keep their column names."""
        backend = PolarsBackend()
        df = backend.from_columns({"date": [], "month": []})

        assert df.columns == ["date", "month"]
        assert df.is_empty()


class TestDateRangeToFrame:
    """Test DateRange.to_frame."""

    def test_pandas(self):
        """One row per date with grouping keys."""
        df = DateRange(date(2015, 1, 1), date(2015, 1, 6)).to_frame(backend="pandas")

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["date", "month", "week", "weekday"]
        assert len(df) == 5
        assert df["week"].tolist() == [0, 0, 0, 0, 1]
        assert df["weekday"].tolist() == [3, 4, 5, 6, 0]

    def test_polars(self):
        """Polars backend returns a polars DataFrame."""
        df = dates(2016).to_frame(backend="polars")

        assert isinstance(df, pl.DataFrame)
        assert df.height == 366
        assert df["month"].n_unique() == 12

    def test_default_backend_from_config(self):
        """Without a backend argument the configured default is used."""
        configure_calendar(default_backend="polars")
        df = DateRange(date(2015, 1, 1), date(2015, 1, 3)).to_frame()

        assert isinstance(df, pl.DataFrame)

    @pytest.mark.parametrize("backend", ["pandas", "polars"])
    def test_empty_range_keeps_columns(self, backend):
        """An empty or inverted range gives zero rows with the usual columns."""
        df = DateRange(date(2015, 1, 3), date(2015, 1, 1)).to_frame(backend=backend)

        assert list(df.columns) == ["date", "month", "week", "weekday"]
        assert len(df) == 0
