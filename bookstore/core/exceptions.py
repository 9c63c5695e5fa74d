"""
Domain errors raised by the service layer.

Routes translate these into HTTP responses:
- NotFoundError   -> 404
- ValidationError -> 422 (field-level messages)
"""
from typing import Any, Dict, List


class BookstoreError(Exception):
    """Base class for bookstore domain errors"""


class NotFoundError(BookstoreError):
    """No row exists for the requested id"""

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ValidationError(BookstoreError):
    """
    One or more fields failed validation.

    Args:
        errors: Mapping of field name -> list of messages for that field
    """

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        super().__init__("The given data was invalid.")

    def to_detail(self) -> List[Dict[str, Any]]:
        """Render errors in the same shape FastAPI uses for request validation"""
        return [
            {"loc": ["body", field], "msg": message, "type": "value_error"}
            for field, messages in self.errors.items()
            for message in messages
        ]
