"""
Dependency Inversion Principle.

High-level modules should not depend on low-level modules. Both should
depend on abstractions.
"""
