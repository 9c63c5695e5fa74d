"""
Resource Service - CRUD over one entity

Wraps a repository and turns "no row" results into NotFoundError. Entity
specific rules (customer starting points, order references) live in the
subclasses.
"""
import logging
from typing import Any, Dict, Generic, List, TypeVar

from pydantic import BaseModel

from bookstore.core.exceptions import NotFoundError
from bookstore.repositories.base import CrudRepository

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResourceService(Generic[ModelT]):
    """
    Service for one entity

    Handles:
    - List / Get / Delete straight through the repository
    - Create from a validated create model
    - Partial update from a validated PartialUpdate model
    """

    entity_name: str = "Resource"

    def __init__(self, repository: CrudRepository):
        self.repository = repository

    def list(self) -> List[ModelT]:
        return self.repository.find_all()

    def get(self, entity_id: int) -> ModelT:
        entity = self.repository.find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id)
        return entity

    def create(self, payload: BaseModel) -> ModelT:
        values = self._values_for_create(payload)
        self._check_references(values)
        return self.repository.insert(values)

    def update(self, entity_id: int, payload) -> ModelT:
        """
        Apply only the supplied fields over the existing row

        Raises:
            NotFoundError: No row with this id (checked first)
            ValidationError: A supplied reference does not resolve
        """
        self.get(entity_id)

        values = payload.changes()
        self._check_references(values)

        updated = self.repository.update(entity_id, values)
        if updated is None:
            # Deleted between the lookup and the write
            raise NotFoundError(self.entity_name, entity_id)
        return updated

    def delete(self, entity_id: int) -> None:
        if not self.repository.delete(entity_id):
            raise NotFoundError(self.entity_name, entity_id)

    def _values_for_create(self, payload: BaseModel) -> Dict[str, Any]:
        return payload.model_dump()

    def _check_references(self, values: Dict[str, Any]) -> None:
        """Hook for cross-entity checks on the values about to be written"""
