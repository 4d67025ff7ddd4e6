"""Payment actions - payment capability and provider variants."""

from abc import ABC, abstractmethod

from solid_principles.domain.core.common_types import Number
from solid_principles.domain.core.exceptions import (
    NotImplementedOperationError,
    ValidationError,
)


class PaymentAction(ABC):
    """Capability contract for a payment provider holding an amount."""

    def __init__(self, amount: Number):
        """
        Initialize payment action.

        Args:
            amount: Non-negative amount this action operates on

        Raises:
            ValidationError: If amount is negative
        """
        if amount < 0:
            raise ValidationError(
                f"Payment amount must be non-negative, got {amount}",
                {"amount": amount},
            )
        self.amount = amount

    @abstractmethod
    def pay(self) -> Number:
        """Collect the amount from the payer."""

    @abstractmethod
    def deduct(self) -> Number:
        """Deduct the amount from the payer's balance."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(amount={self.amount!r})"


class PayPal(PaymentAction):
    """PayPal payment, kept as a fallback in case another provider breaks."""

    def pay(self) -> Number:
        raise NotImplementedOperationError("PayPal.pay")

    def deduct(self) -> Number:
        raise NotImplementedOperationError("PayPal.deduct")


class GooglePay(PaymentAction):
    """Google Pay payment."""

    def pay(self) -> Number:
        raise NotImplementedOperationError("GooglePay.pay")

    def deduct(self) -> Number:
        raise NotImplementedOperationError("GooglePay.deduct")
