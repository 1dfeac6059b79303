"""
Custom exceptions for the SOLID demos.
Following SOLID principles - centralized error handling.
"""


class UnsupportedOperationError(Exception):
    """
    Exception raised when a variant is asked to perform an operation
    it nominally exposes but cannot actually carry out.
    Used by the flawed Liskov examples (an ostrich asked to fly).
    """

    pass


class DemoNotFoundError(LookupError):
    """Exception raised when a demo name is not present in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown demo: {name}")
        self.name = name
