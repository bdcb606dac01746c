"""Unit tests for the Order aggregate."""

from decimal import Decimal

from shopdemo.domain.model.customer import Customer
from shopdemo.domain.model.order import Order
from shopdemo.domain.model.product import Book, Phone
from shopdemo.domain.model.value_objects import Money


def _make_order(order_id: str = "O1") -> Order:
    return Order(id=order_id, customer=Customer("C1", "Nguyễn Văn A"))


class TestOrderTotal:

    def test_empty_order_total_is_zero(self):
        order = _make_order()
        assert order.total == Money.zero()

    def test_total_is_sum_of_prices(self):
        order = _make_order()
        order.add_product(Book("B1", "Java Programming", 100, "James Gosling"))
        order.add_product(Phone("P1", "iPhone 13", 2000, "Apple"))
        assert order.total == Money.of(2100)
        assert str(order.total) == "$2100.00"

    def test_adding_product_increases_total_by_its_price(self):
        order = _make_order()
        order.add_product(Book("B1", "Java Programming", 100, "James Gosling"))
        before = order.total
        order.add_product(Phone("P1", "iPhone 13", "19.99", "Apple"))
        assert order.total.amount - before.amount == Decimal("19.99")

    def test_same_product_may_appear_twice(self):
        book = Book("B1", "Java Programming", 100, "James Gosling")
        order = _make_order()
        order.add_product(book)
        order.add_product(book)
        assert order.items == [book, book]
        assert order.total == Money.of(200)


class TestOrderItems:

    def test_insertion_order_preserved(self):
        book = Book("B1", "Java Programming", 100, "James Gosling")
        phone = Phone("P1", "iPhone 13", 2000, "Apple")
        order = _make_order()
        order.add_product(phone)
        order.add_product(book)
        assert [p.id for p in order.items] == ["P1", "B1"]

    def test_products_held_by_reference(self):
        book = Book("B1", "Java Programming", 100, "James Gosling")
        order = _make_order()
        order.add_product(book)
        assert order.items[0] is book

    def test_initial_items_list_is_copied(self):
        book = Book("B1", "Java Programming", 100, "James Gosling")
        initial = [book]
        order = Order(id="O1", customer=Customer("C1", "A"), items=initial)
        order.add_product(book)
        assert len(initial) == 1

    def test_customer_is_shared_reference(self):
        customer = Customer("C1", "Nguyễn Văn A")
        order = Order(id="O1", customer=customer)
        assert order.customer is customer
