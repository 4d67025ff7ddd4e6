"""Payment bounded context."""

from .payment_actions import GooglePay, PaymentAction, PayPal

__all__ = ["PaymentAction", "PayPal", "GooglePay"]
