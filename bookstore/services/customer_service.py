"""
Customer Service
"""
from typing import Any, Dict

from bookstore.domain.customer import Customer, CustomerCreate, NEW_CUSTOMER_POINTS
from bookstore.services.resource_service import ResourceService


class CustomerService(ResourceService[Customer]):
    """CRUD for customers"""

    entity_name = "Customer"

    def _values_for_create(self, payload: CustomerCreate) -> Dict[str, Any]:
        # Starting points are always written here, never taken from the request
        return {
            'name': payload.name,
            'points': NEW_CUSTOMER_POINTS,
        }
