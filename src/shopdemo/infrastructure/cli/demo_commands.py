"""CLI command that walks through the whole shop model once."""

from __future__ import annotations

import logging
from typing import TypeVar

import click

from shopdemo.application.add_product import AddProductHandler
from shopdemo.application.deliver_product import DeliverProductHandler
from shopdemo.application.dto import ProductSpec
from shopdemo.application.list_products import ListProductsHandler
from shopdemo.application.pay_order import PayOrderHandler
from shopdemo.application.place_order import PlaceOrderHandler
from shopdemo.application.refund_product import RefundProductHandler
from shopdemo.application.register_customer import RegisterCustomerHandler
from shopdemo.application.result import Failure, Result
from shopdemo.domain.exceptions import ErrorKind
from shopdemo.domain.model.product import ProductKind
from shopdemo.domain.service.payment import PaymentKind, payment_method_for
from shopdemo.infrastructure.bootstrap import (
    customer_repository,
    order_repository,
    product_repository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

SAMPLE_PRODUCTS = [
    ProductSpec(ProductKind.BOOK, "B1", "Java Programming", 100, "James Gosling"),
    ProductSpec(ProductKind.PHONE, "P1", "iPhone 13", 2000, "Apple"),
    ProductSpec(ProductKind.LAPTOP, "L1", "Macbook Pro", 3000, "Apple"),
]
INVALID_PRODUCT = ProductSpec(ProductKind.BOOK, "B2", "Sách lỗi", -10, "Tác giả ẩn danh")


class UnexpectedFailure(Exception):
    """A use case failed where the walkthrough expected it to succeed."""

    def __init__(self, failure: Failure) -> None:
        super().__init__(failure.message)
        self.failure = failure


def _expect(result: Result[T]) -> T:
    if result.failure is not None:
        raise UnexpectedFailure(result.failure)
    return result.value  # type: ignore[return-value]


def _heading(title: str) -> None:
    click.echo()
    click.echo(f"=== {title} ===")


def _run_demo() -> None:
    product_repo = product_repository()
    customer_repo = customer_repository()
    order_repo = order_repository()

    add_product = AddProductHandler(product_repo)
    for spec in SAMPLE_PRODUCTS:
        _expect(add_product.handle(spec))

    _heading("DANH SÁCH SẢN PHẨM")
    click.echo(f"{'ID':<6} {'Loại':<12} {'Tên':<20} {'Chi tiết':<24} {'Giá':>10}")
    click.echo("-" * 76)
    for p in ListProductsHandler(product_repo).handle():
        click.echo(f"{p.id:<6} {p.kind:<12} {p.name:<20} {p.details:<24} {p.price:>10}")

    _heading("GIAO HÀNG")
    deliver = DeliverProductHandler(product_repo)
    for spec in SAMPLE_PRODUCTS:
        click.echo(_expect(deliver.handle(spec.id)))

    _heading("HOÀN TIỀN")
    refund = RefundProductHandler(product_repo)
    for spec in SAMPLE_PRODUCTS:
        result = refund.handle(spec.id)
        if result.ok:
            click.echo(result.value)
        elif result.failure.kind is ErrorKind.NON_REFUNDABLE:
            click.echo(f"Lỗi hoàn tiền: {result.failure.message}")
        else:
            raise UnexpectedFailure(result.failure)

    customer = _expect(RegisterCustomerHandler(customer_repo).handle("C1", "Nguyễn Văn A"))
    order = _expect(
        PlaceOrderHandler(order_repo, customer_repo, product_repo).handle(
            "O1", customer.id, ["B1", "P1"]
        )
    )

    _heading("THANH TOÁN")
    click.echo(
        f"Đơn hàng {order.id} của {order.customer_name}: "
        f"{', '.join(order.product_names)} - tổng {order.total}"
    )
    pay = PayOrderHandler(order_repo)
    for kind in PaymentKind:
        click.echo(_expect(pay.handle(order.id, payment_method_for(kind))))

    _heading("KIỂM TRA LỖI TRÙNG ID")
    result = add_product.handle(SAMPLE_PRODUCTS[0])
    if result.ok or result.failure.kind is not ErrorKind.DUPLICATE_ID:
        raise UnexpectedFailure(
            result.failure or Failure(ErrorKind.VALIDATION, "Thêm trùng ID nhưng không bị từ chối")
        )
    click.echo(result.failure.message)

    _heading("KIỂM TRA LỖI GIÁ KHÔNG HỢP LỆ")
    result = add_product.handle(INVALID_PRODUCT)
    if result.ok or result.failure.kind is not ErrorKind.INVALID_PRICE:
        raise UnexpectedFailure(
            result.failure or Failure(ErrorKind.VALIDATION, "Giá âm nhưng không bị từ chối")
        )
    click.echo(result.failure.message)


@click.command("demo")
def demo() -> None:
    """Run the shop walkthrough: catalog, delivery, refunds, payments, errors."""
    try:
        _run_demo()
    except Exception as exc:
        logger.exception("Demo aborted")
        click.echo(f"Lỗi ngoài dự kiến: {exc}")
