"""
Unit tests for the Interface Segregation examples.
"""

import pytest

from solid_principles.domain.interfaces import IFeedable, IWorkable
from solid_principles.interface_segregation import corrected, problematic

pytestmark = pytest.mark.unit


class TestProblematicWorker:
    def test_robot_works(self, capsys):
        problematic.Robot().work()

        assert capsys.readouterr().out == "Robot is working.\n"

    def test_robot_is_forced_to_implement_eat(self, capsys):
        robot = problematic.Robot()

        assert isinstance(robot, problematic.IWorker)
        robot.eat()

        assert capsys.readouterr().out == ""


class TestCorrectedWorkers:
    def test_human_worker_works_and_eats(self, capsys):
        human = corrected.HumanWorker()

        human.work()
        human.eat()

        assert capsys.readouterr().out == "HumanWorker is working.\nHumanWorker is eating.\n"

    def test_human_worker_implements_both_capabilities(self):
        human = corrected.HumanWorker()

        assert isinstance(human, IWorkable)
        assert isinstance(human, IFeedable)

    def test_robot_implements_only_workable(self, capsys):
        robot = corrected.Robot()

        assert isinstance(robot, IWorkable)
        assert not isinstance(robot, IFeedable)
        assert not hasattr(robot, "eat")

        robot.work()
        assert capsys.readouterr().out == "Robot is working.\n"
