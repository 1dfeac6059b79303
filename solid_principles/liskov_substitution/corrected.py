"""
LSP applied: birds expose a generic ``move()`` every subtype can honour.

Flying is no longer part of the shared contract, so no subtype has an
operation it must refuse.
"""

from solid_principles.domain.interfaces import BirdAbstract


class FlyingBirdAbstract(BirdAbstract):
    """Bird that moves by flying."""

    def move(self) -> None:
        print("Flying")


class OstrichCorrectedAbstract(BirdAbstract):
    """Bird that moves by running."""

    def move(self) -> None:
        print("Running")


# Interface flavour: no shared base class, IBird is matched structurally


class FlyingBirdInterface:
    def move(self) -> None:
        print("Flying")


class OstrichCorrectedInterface:
    def move(self) -> None:
        print("Running")
