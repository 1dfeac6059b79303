"""
SRP applied: user storage and email delivery live in separate services.

This module:
- Gives UserService a single job, managing users
- Moves email delivery to EmailService, so mail changes never touch users
"""


class UserService:
    """Application service for user-related use-cases."""

    def add_user(self, user: str) -> None:
        print(f"User '{user}' added to the database.")


class EmailService:
    """Application service that sends emails."""

    def send_email(self, message: str) -> None:
        print(f"Email sent: {message}")
