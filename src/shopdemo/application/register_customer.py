"""Application service: Register Customer use case."""

from __future__ import annotations

import logging

from shopdemo.application.result import Result
from shopdemo.domain.exceptions import DomainException
from shopdemo.domain.model.customer import Customer
from shopdemo.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class RegisterCustomerHandler:

    def __init__(self, customer_repo: Repository[Customer]) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str, name: str) -> Result[Customer]:
        customer = Customer(id=customer_id, name=name)
        try:
            self._customer_repo.add(customer)
        except DomainException as exc:
            logger.info("Customer %s rejected: %s", customer_id, exc)
            return Result.fail(exc)

        logger.info("Customer %s registered", customer_id)
        return Result.success(customer)
