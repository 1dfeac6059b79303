"""
Registry of runnable demos, one per SOLID principle, in acronym order.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List

from solid_principles.core.exceptions import DemoNotFoundError
from solid_principles.dependency_inversion import demo as dip_demo
from solid_principles.interface_segregation import demo as isp_demo
from solid_principles.liskov_substitution import demo as lsp_demo
from solid_principles.open_closed import demo as ocp_demo
from solid_principles.single_responsibility import demo as srp_demo


@dataclass(frozen=True)
class Demo:
    """A named demo and the callable that prints its output."""

    name: str
    title: str
    run: Callable[[], None]


DEMOS: Dict[str, Demo] = {
    demo.name: demo
    for demo in (
        Demo("srp", "Single Responsibility Principle", srp_demo.run),
        Demo("ocp", "Open/Closed Principle", ocp_demo.run),
        Demo("lsp", "Liskov Substitution Principle", lsp_demo.run),
        Demo("isp", "Interface Segregation Principle", isp_demo.run),
        Demo("dip", "Dependency Inversion Principle", dip_demo.run),
    )
}


def get_demo(name: str) -> Demo:
    demo = DEMOS.get(name.strip().lower())
    if demo is None:
        raise DemoNotFoundError(name)
    return demo


def list_demos() -> List[str]:
    return list(DEMOS)
