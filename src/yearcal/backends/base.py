"""Abstract backend protocol for DataFrame construction."""

from typing import Any, Protocol, TypeVar

DF = TypeVar("DF", covariant=True)


class Backend(Protocol[DF]):
    """Protocol defining the DataFrame operations a backend provides."""

    def from_columns(self, columns: dict[str, list[Any]]) -> DF:
        """Build a DataFrame from equally long column lists."""
        ...
