"""
SRP violation: UserService both stores users and sends emails.
"""


class UserService:
    def add_user(self, user: str) -> None:
        print(f"User '{user}' added to the database.")

    def send_email(self, message: str) -> None:
        print(f"Email sent: {message}")
