"""Store checkout."""

from solid_principles.domain.core.common_types import Number
from solid_principles.domain.payment.payment_actions import PaymentAction
from solid_principles.infrastructure.logging.logger import get_logger


class Store:
    """Store that checks out through an injected payment action."""

    def __init__(self, amount: Number, actions: PaymentAction):
        """
        Initialize store.

        Args:
            amount: Amount recorded on the store
            actions: Payment action used at checkout
        """
        self.amount = amount
        self.actions = actions
        self.logger = get_logger(__name__)

    def checkout(self) -> Number:
        """
        Emit and return the amount held by the payment action.

        No payment is executed and the store's own ``amount`` is not used.
        """
        amount = self.actions.amount
        self.logger.info("checkout", amount=amount)
        return amount
