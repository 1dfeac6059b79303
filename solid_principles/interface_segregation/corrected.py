"""
ISP applied: working and eating are separate capabilities.

Each worker implements only the contracts it actually supports.
"""

from solid_principles.domain.interfaces import IFeedable, IWorkable


class HumanWorker(IWorkable, IFeedable):
    def work(self) -> None:
        print("HumanWorker is working.")

    def eat(self) -> None:
        print("HumanWorker is eating.")


class Robot(IWorkable):
    def work(self) -> None:
        print("Robot is working.")
