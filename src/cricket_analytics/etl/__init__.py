"""Dataset loading components."""

from .loaders import DatasetLoader, read_csv_rows

__all__ = ["DatasetLoader", "read_csv_rows"]
