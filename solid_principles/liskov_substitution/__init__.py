"""
Liskov Substitution Principle.

Subtypes should be substitutable for their base types without altering the
correctness of the program.
"""
