"""Unit tests for the payment strategies."""

import logging

import pytest

from shopdemo.domain.exceptions import ValidationError
from shopdemo.domain.model.customer import Customer
from shopdemo.domain.model.order import Order
from shopdemo.domain.model.product import Book, Phone
from shopdemo.domain.service.payment import (
    CashPayment,
    CreditCardPayment,
    MoMoPayment,
    PaymentKind,
    PaymentMethod,
    PaypalPayment,
    payment_method_for,
)


def _make_order() -> Order:
    order = Order(id="O1", customer=Customer("C1", "Nguyễn Văn A"))
    order.add_product(Book("B1", "Java Programming", 100, "James Gosling"))
    order.add_product(Phone("P1", "iPhone 13", 2000, "Apple"))
    return order


class TestPaymentConfirmations:

    @pytest.mark.parametrize(
        "method, expected",
        [
            (CreditCardPayment(), "Thanh toán bằng Credit Card: $2100.00"),
            (PaypalPayment(), "Thanh toán bằng PayPal: $2100.00"),
            (CashPayment(), "Thanh toán tiền mặt: $2100.00"),
            (MoMoPayment(), "Thanh toán MoMo: $2100.00"),
        ],
    )
    def test_confirmation_shows_total(self, method, expected):
        assert method.pay(_make_order()) == expected

    def test_payment_does_not_mutate_order(self):
        order = _make_order()
        items_before = list(order.items)
        CreditCardPayment().pay(order)
        assert order.items == items_before

    def test_empty_order_can_be_paid(self):
        order = Order(id="O2", customer=Customer("C1", "A"))
        assert CashPayment().pay(order) == "Thanh toán tiền mặt: $0.00"

    def test_payment_is_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="shopdemo.domain.service.payment"):
            MoMoPayment().pay(_make_order())
        assert "O1" in caplog.text
        assert "MoMoPayment" in caplog.text


class TestPaymentLookup:

    def test_every_kind_has_a_method(self):
        methods = [payment_method_for(kind) for kind in PaymentKind]
        assert len(methods) == 4
        assert all(isinstance(m, PaymentMethod) for m in methods)

    def test_kind_maps_to_variant(self):
        assert isinstance(payment_method_for(PaymentKind.MOMO), MoMoPayment)
        assert isinstance(payment_method_for(PaymentKind.PAYPAL), PaypalPayment)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError, match="Unknown payment method"):
            payment_method_for("bitcoin")  # type: ignore[arg-type]
