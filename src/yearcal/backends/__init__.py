"""Backend implementations for tabular export."""

from yearcal.backends.base import Backend
from yearcal.backends.pandas import PandasBackend
from yearcal.backends.polars import PolarsBackend

__all__ = ["Backend", "PandasBackend", "PolarsBackend", "get_backend"]


def get_backend(name: str) -> Backend:
    """Resolve a backend by name ("pandas" or "polars")."""
    if name == "pandas":
        return PandasBackend()
    elif name == "polars":
        return PolarsBackend()
    raise ValueError(f"Unknown backend: {name}")
