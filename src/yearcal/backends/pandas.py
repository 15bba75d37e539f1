"""Pandas backend implementation."""

from datetime import date
from typing import Any

import pandas as pd


class PandasBackend:
    """Backend implementation for pandas DataFrames."""

    def from_columns(self, columns: dict[str, list[Any]]) -> pd.DataFrame:
        """Build a DataFrame from column lists.

        Columns holding dates are stored as datetime64 so they can be
        filtered and resampled directly.
        """
        df = pd.DataFrame(columns)
        for name, values in columns.items():
            if values and isinstance(values[0], date):
                df[name] = pd.to_datetime(df[name])
        return df
