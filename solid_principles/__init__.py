"""
SOLID principles, each shown as a problematic design next to a corrected one.

Packages:
- single_responsibility, open_closed, liskov_substitution,
  interface_segregation, dependency_inversion: one per principle, each with
  problematic.py, corrected.py and demo.py
- domain: capability contracts used by the corrected designs
- core: configuration, logging and exceptions
"""

__version__ = "1.0.0"
