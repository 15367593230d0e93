"""
models/result.py
----------------
Lookup result that carries either a value or the failure that explains its absence.
Callers branch on `ok` instead of relying on exceptions.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from models.exceptions import GalleryError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Attributes:
        value: The found value (None when `error` is set).
        error: The declared failure (None on success).
    """
    value: Optional[T] = None
    error: Optional[GalleryError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: GalleryError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value
