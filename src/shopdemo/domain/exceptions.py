"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException.
Each one carries an ``ErrorKind`` so the application layer can turn it into
an explicit ``Result`` failure and callers can branch on the kind.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    VALIDATION = "VALIDATION"
    INVALID_PRICE = "INVALID_PRICE"
    DUPLICATE_ID = "DUPLICATE_ID"
    NOT_FOUND = "NOT_FOUND"
    NON_REFUNDABLE = "NON_REFUNDABLE"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = ErrorKind.VALIDATION


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidPriceError(ValidationError):
    """A price (or any money amount) was negative."""

    kind = ErrorKind.INVALID_PRICE

    def __init__(self, price: object) -> None:
        super().__init__(f"Giá sản phẩm không hợp lệ: {price}")
        self.price = price


class DuplicateIdError(DomainException):
    """An entity with the same identifier is already stored."""

    kind = ErrorKind.DUPLICATE_ID

    def __init__(self, entity_id: str) -> None:
        super().__init__(f"ID đã tồn tại: {entity_id}")
        self.entity_id = entity_id


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_id: str) -> None:
        super().__init__(f"Không tìm thấy ID: {entity_id}")
        self.entity_id = entity_id


class NonRefundableError(DomainException):
    """The product belongs to a category that can never be refunded."""

    kind = ErrorKind.NON_REFUNDABLE

    def __init__(self, product_name: str, category: str) -> None:
        super().__init__(f"{category} không hỗ trợ hoàn tiền: {product_name}")
        self.product_name = product_name
        self.category = category
