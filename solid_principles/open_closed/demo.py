from solid_principles.open_closed import corrected, problematic


def run_problematic() -> None:
    print("Problematic Code with Type Switching:")

    service = problematic.PaymentService()
    service.process_payment("CreditCard")
    service.process_payment("PayPal")


def run_corrected() -> None:
    print()
    print("Corrected Code with Payment Abstraction:")

    service = corrected.PaymentService()
    for payment in (corrected.CreditCardPayment(), corrected.PayPalPayment()):
        service.process_payment(payment)


def run() -> None:
    run_problematic()
    run_corrected()
