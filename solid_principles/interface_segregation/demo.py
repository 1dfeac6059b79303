from typing import List

from solid_principles.domain.interfaces import IFeedable, IWorkable
from solid_principles.interface_segregation import corrected, problematic


def run_problematic() -> None:
    print("Problematic Code with a Fat Interface:")

    robot: problematic.IWorker = problematic.Robot()
    robot.work()
    robot.eat()  # forced no-op


def run_corrected() -> None:
    print()
    print("Corrected Code with Segregated Interfaces:")

    human = corrected.HumanWorker()
    workers: List[IWorkable] = [human, corrected.Robot()]
    for worker in workers:
        worker.work()

    eaters: List[IFeedable] = [human]
    for eater in eaters:
        eater.eat()


def run() -> None:
    run_problematic()
    run_corrected()
