"""
Single Responsibility Principle.

A class should have only one reason to change.
"""
