"""
Capability interfaces following the Interface Segregation Principle.

Each contract names exactly one operation. Concrete variants implement only
the capabilities they genuinely support, and dispatchers depend on these
abstractions instead of on concrete classes.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


class IDevice(ABC):
    """Interface for anything a switch can turn on - Dependency Inversion."""

    @abstractmethod
    def turn_on(self) -> None:
        """Turn the device on."""
        pass


class IPayment(ABC):
    """Interface for a payment type - Open/Closed Principle."""

    @abstractmethod
    def process_payment(self) -> None:
        """Process this payment."""
        pass


class IWorkable(ABC):
    """Interface for workers that can work - Interface Segregation Principle."""

    @abstractmethod
    def work(self) -> None:
        """Do some work."""
        pass


class IFeedable(ABC):
    """Interface for workers that need to eat - Interface Segregation Principle."""

    @abstractmethod
    def eat(self) -> None:
        """Take a meal break."""
        pass


class BirdAbstract(ABC):
    """Abstract base bird - Liskov Substitution Principle.

    Every bird can move; how it moves is up to the subclass.
    """

    @abstractmethod
    def move(self) -> None:
        """Move the way this bird moves."""
        pass


@runtime_checkable
class IBird(Protocol):
    """Structural bird interface - any object with ``move()`` qualifies."""

    def move(self) -> None: ...
