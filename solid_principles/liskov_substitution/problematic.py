"""
LSP violations, once with an abstract base class and once with an interface.

Both compile and type-check, but substituting an ostrich for a bird breaks
callers at runtime.
"""

from abc import ABC
from typing import Protocol

from solid_principles.core.exceptions import UnsupportedOperationError


class BirdAbstract(ABC):
    """Abstract base bird that assumes every bird flies."""

    def fly(self) -> None:
        print("Flying")


class OstrichAbstract(BirdAbstract):
    def fly(self) -> None:
        raise UnsupportedOperationError("Ostriches can't fly")


class IBird(Protocol):
    def fly(self) -> None: ...


class OstrichInterface:
    """Satisfies IBird structurally, but cannot honour it."""

    def fly(self) -> None:
        raise UnsupportedOperationError("Ostriches can't fly")
