"""Capabilities a catalog item may offer.

Callers work against these abstractions and never need the concrete
product variant to deliver or refund it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Deliverable(ABC):

    @abstractmethod
    def deliver(self) -> str:
        """Return the delivery notice for this item."""


class Refundable(ABC):

    @abstractmethod
    def refund(self) -> str:
        """Return the refund notice for this item.

        Raises NonRefundableError when the item can never be refunded.
        """
