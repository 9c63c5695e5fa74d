"""
Customers API Endpoints

New customers always start with 100 points; a points value in the create
request is ignored.
"""
from fastapi import APIRouter, Depends

from bookstore.api.dependencies import get_customer_service
from bookstore.api.errors import service_errors
from bookstore.domain.customer import CustomerCreate, CustomerUpdate
from bookstore.services.customer_service import CustomerService

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("")
def list_customers(service: CustomerService = Depends(get_customer_service)):
    with service_errors("fetching customers"):
        return [customer.to_dict() for customer in service.list()]


@router.post("", status_code=201)
def create_customer(payload: CustomerCreate, service: CustomerService = Depends(get_customer_service)):
    with service_errors("creating customer"):
        customer = service.create(payload)
        return {"message": "Customer created successfully", "customer": customer.to_dict()}


@router.get("/{customer_id}")
def get_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    with service_errors("fetching customer"):
        return service.get(customer_id).to_dict()


@router.put("/{customer_id}")
def update_customer(
    customer_id: int,
    payload: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service)
):
    with service_errors("updating customer"):
        customer = service.update(customer_id, payload)
        return {"message": "Customer updated successfully", "customer": customer.to_dict()}


@router.delete("/{customer_id}")
def delete_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    with service_errors("deleting customer"):
        service.delete(customer_id)
        return {"message": "Customer deleted successfully"}
