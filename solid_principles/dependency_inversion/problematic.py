"""
DIP violation: the Switch builds and controls a concrete LightBulb.

Controlling a Fan instead means editing Switch itself, and Switch cannot be
exercised with a test double.
"""


class LightBulb:
    """A light bulb that can be turned on."""

    def turn_on(self) -> None:
        print("LightBulb is turned on.")


class Switch:
    """Switch hard-wired to a LightBulb."""

    def __init__(self) -> None:
        # The switch creates its own dependency
        self._light_bulb = LightBulb()

    def operate(self) -> None:
        self._light_bulb.turn_on()
