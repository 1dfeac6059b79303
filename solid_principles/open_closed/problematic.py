"""
OCP violation: PaymentService switches on a type name.

Every new payment type means another branch in process_payment.
"""

import logging

logger = logging.getLogger(__name__)


class PaymentService:
    def process_payment(self, payment_type: str) -> None:
        if payment_type == "CreditCard":
            print("Processing credit card payment.")
        elif payment_type == "PayPal":
            print("Processing PayPal payment.")
        else:
            logger.warning(
                f"Unsupported payment type: {payment_type}",
                extra={"context": {"payment_type": payment_type}},
            )
