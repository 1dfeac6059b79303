"""
DIP applied: the Switch depends on the IDevice abstraction.

The concrete device is created by the caller and injected through the
constructor, so new devices need no change to Switch.
"""

import logging

from solid_principles.domain.interfaces import IDevice

logger = logging.getLogger(__name__)


class LightBulb(IDevice):
    """Light bulb implementing the IDevice capability."""

    def turn_on(self) -> None:
        print("LightBulb is turned on.")


class Fan(IDevice):
    """Fan implementing the IDevice capability."""

    def turn_on(self) -> None:
        print("Fan is turned on.")


class Switch:
    """Capability dispatcher for devices.

    This class:
    - Receives its device from outside (Dependency Inversion)
    - Works with any IDevice without modification (Open/Closed)
    - Holds the reference only; it never changes the device
    """

    def __init__(self, device: IDevice) -> None:
        self._device = device

    def operate(self) -> None:
        """Turn on whatever device this switch was given."""
        logger.debug("Switch operating its device")
        self._device.turn_on()
