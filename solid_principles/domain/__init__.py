"""
Domain package - capability contracts shared by the corrected designs.

This package contains:
- interfaces.py: one-operation capability contracts

Following SOLID principles:
- Interface Segregation: Each contract names a single operation
- Dependency Inversion: Dispatchers depend on these, not on variants
"""

from .interfaces import BirdAbstract, IBird, IDevice, IFeedable, IPayment, IWorkable

__all__ = [
    "BirdAbstract",
    "IBird",
    "IDevice",
    "IFeedable",
    "IPayment",
    "IWorkable",
]
