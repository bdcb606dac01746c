"""Payment strategies.

Every strategy reads the order total and returns a confirmation line.
None of them checks funds, fails, or touches the order.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum

from shopdemo.domain.exceptions import ValidationError
from shopdemo.domain.model.order import Order
from shopdemo.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class PaymentMethod(ABC):

    def pay(self, order: Order) -> str:
        total = order.total
        logger.info("Order %s paid via %s: %s", order.id, type(self).__name__, total)
        return self.confirmation(total)

    @abstractmethod
    def confirmation(self, total: Money) -> str:
        """Return the confirmation line for a payment of *total*."""


class CreditCardPayment(PaymentMethod):

    def confirmation(self, total: Money) -> str:
        return f"Thanh toán bằng Credit Card: {total}"


class PaypalPayment(PaymentMethod):

    def confirmation(self, total: Money) -> str:
        return f"Thanh toán bằng PayPal: {total}"


class CashPayment(PaymentMethod):

    def confirmation(self, total: Money) -> str:
        return f"Thanh toán tiền mặt: {total}"


class MoMoPayment(PaymentMethod):
    """MoMo mobile wallet."""

    def confirmation(self, total: Money) -> str:
        return f"Thanh toán MoMo: {total}"


class PaymentKind(Enum):
    CREDIT_CARD = "credit-card"
    PAYPAL = "paypal"
    CASH = "cash"
    MOMO = "momo"


_METHODS: dict[PaymentKind, type[PaymentMethod]] = {
    PaymentKind.CREDIT_CARD: CreditCardPayment,
    PaymentKind.PAYPAL: PaypalPayment,
    PaymentKind.CASH: CashPayment,
    PaymentKind.MOMO: MoMoPayment,
}


def payment_method_for(kind: PaymentKind) -> PaymentMethod:
    try:
        return _METHODS[kind]()
    except KeyError:
        raise ValidationError(f"Unknown payment method: {kind!r}") from None
