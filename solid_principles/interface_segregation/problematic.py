"""
ISP violation: one fat worker interface.

Robot must implement eat() even though robots don't eat.
"""

from abc import ABC, abstractmethod


class IWorker(ABC):
    @abstractmethod
    def work(self) -> None:
        pass

    @abstractmethod
    def eat(self) -> None:
        pass


class Robot(IWorker):
    def work(self) -> None:
        print("Robot is working.")

    def eat(self) -> None:
        # Robots don't eat!
        pass
