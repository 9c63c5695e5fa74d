"""
Order Service

Orders reference a customer and a book. Both references are resolved when
an order is placed, and again for whichever of them an update changes.
"""
import logging
from typing import Any, Dict, List

from psycopg2 import errors as pg_errors
from pydantic import BaseModel

from bookstore.core.exceptions import ValidationError
from bookstore.domain.order import Order
from bookstore.repositories.base import CrudRepository
from bookstore.repositories.order_repository import OrderRepository
from bookstore.services.resource_service import ResourceService

logger = logging.getLogger(__name__)


def invalid_reference(field: str) -> str:
    return f"The selected {field.replace('_', ' ')} is invalid."


class OrderService(ResourceService[Order]):
    """CRUD for orders with reference checks on write"""

    entity_name = "Order"

    def __init__(
        self,
        repository: OrderRepository,
        customers: CrudRepository,
        books: CrudRepository,
    ):
        super().__init__(repository)
        self._references = {
            'customer_id': customers,
            'book_id': books,
        }

    def _check_references(self, values: Dict[str, Any]) -> None:
        errors: Dict[str, List[str]] = {}

        for field, repository in self._references.items():
            if field not in values:
                continue
            if not repository.exists(values[field]):
                errors[field] = [invalid_reference(field)]

        if errors:
            logger.warning(f"Rejected order write, unresolved references: {sorted(errors)}")
            raise ValidationError(errors)

    def create(self, payload: BaseModel) -> Order:
        try:
            return super().create(payload)
        except pg_errors.ForeignKeyViolation as e:
            raise self._reference_violation(e, payload.model_dump())

    def update(self, entity_id: int, payload) -> Order:
        try:
            return super().update(entity_id, payload)
        except pg_errors.ForeignKeyViolation as e:
            raise self._reference_violation(e, payload.changes())

    def _reference_violation(self, error: pg_errors.ForeignKeyViolation, values: Dict[str, Any]) -> ValidationError:
        """
        A reference was deleted between the existence check and the write

        The failing field is read from the constraint name (orders_<field>_fkey);
        when it is not available every supplied reference is reported.
        """
        diag = getattr(error, 'diag', None)
        constraint = getattr(diag, 'constraint_name', None) or ''
        supplied = [field for field in self._references if field in values]
        fields = [field for field in supplied if field in constraint] or supplied

        logger.warning(f"Order write hit a foreign key violation on {fields}: {error}")
        return ValidationError({
            field: [invalid_reference(field)] for field in fields
        })
