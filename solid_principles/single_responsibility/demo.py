from solid_principles.single_responsibility import corrected, problematic

DEMO_USER = "alice"
DEMO_MESSAGE = f"Welcome, {DEMO_USER}!"


def run_problematic() -> None:
    print("Problematic Code with Multiple Responsibilities:")

    service = problematic.UserService()
    service.add_user(DEMO_USER)
    service.send_email(DEMO_MESSAGE)


def run_corrected() -> None:
    print()
    print("Corrected Code with Single Responsibility:")

    user_service = corrected.UserService()
    email_service = corrected.EmailService()
    user_service.add_user(DEMO_USER)
    email_service.send_email(DEMO_MESSAGE)


def run() -> None:
    run_problematic()
    run_corrected()
