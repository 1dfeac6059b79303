"""
OCP applied: new payment types extend IPayment; PaymentService never changes.
"""

from solid_principles.domain.interfaces import IPayment


class CreditCardPayment(IPayment):
    def process_payment(self) -> None:
        print("Processing credit card payment.")


class PayPalPayment(IPayment):
    def process_payment(self) -> None:
        print("Processing PayPal payment.")


class PaymentService:
    """Capability dispatcher for payments.

    The payment is supplied per call; the service only knows the IPayment
    contract.
    """

    def process_payment(self, payment: IPayment) -> None:
        payment.process_payment()
