"""Polars backend implementation."""

from typing import Any

import polars as pl


class PolarsBackend:
    """Backend implementation for polars DataFrames."""

    def from_columns(self, columns: dict[str, list[Any]]) -> pl.DataFrame:
        """Build a DataFrame from column lists.

        Python dates map to the polars Date dtype.
        """
        return pl.DataFrame(columns)
