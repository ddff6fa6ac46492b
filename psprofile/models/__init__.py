"""Data models for parsed process samples."""

from .errors import LogFormatError, ProfileError, StoreFormatError
from .row import Row, RowDecodeResult
from .table import Table

__all__ = ["LogFormatError", "ProfileError", "StoreFormatError", "Row", "RowDecodeResult", "Table"]
