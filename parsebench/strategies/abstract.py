"""
Abstract conversion strategy interfaces for Parse Bench.

Concrete strategies (exception-guarded, status-return) implement the
ConversionStrategy protocol so the harness can time them interchangeably.
Both must return the same integer for the same input; they differ only in how
a malformed value is detected and replaced by the fallback.
"""

from __future__ import annotations

import abc
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ConversionStrategy(Protocol):
    """
    Common interface all conversion strategies must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the approach.
    fallback : int
        Value substituted for malformed or absent input.
    """

    name: str
    description: str
    fallback: int

    def convert(self, text: Optional[str]) -> int:
        """
        Convert `text` to an integer, never propagating a parse failure.

        Parameters
        ----------
        text : str | None
            Raw field value. None stands for an absent field.

        Returns
        -------
        int
            The parsed value, or `fallback` when `text` is malformed or None.
        """
        ...


class AbstractConversionStrategy(abc.ABC):
    """
    ABC helper for class-based implementations.

    Subclasses set `name` and `description` and implement `convert`.
    """

    name: str
    description: str

    def __init__(self, fallback: int) -> None:
        self.fallback = fallback

    @abc.abstractmethod
    def convert(self, text: Optional[str]) -> int:  # pragma: no cover - interface only
        """Convert text to int or return the fallback."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fallback={self.fallback})"


__all__ = [
    "ConversionStrategy",
    "AbstractConversionStrategy",
]
