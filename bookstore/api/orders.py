"""
Orders API Endpoints

Placing or updating an order requires the referenced customer and book to
exist at that moment; otherwise the request fails with 422.
"""
from fastapi import APIRouter, Depends

from bookstore.api.dependencies import get_order_service
from bookstore.api.errors import service_errors
from bookstore.domain.order import OrderCreate, OrderUpdate
from bookstore.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get("")
def list_orders(service: OrderService = Depends(get_order_service)):
    with service_errors("fetching orders"):
        return [order.to_dict() for order in service.list()]


@router.post("", status_code=201)
def create_order(payload: OrderCreate, service: OrderService = Depends(get_order_service)):
    with service_errors("placing order"):
        order = service.create(payload)
        return {"message": "Order placed successfully", "order": order.to_dict()}


@router.get("/{order_id}")
def get_order(order_id: int, service: OrderService = Depends(get_order_service)):
    with service_errors("fetching order"):
        return service.get(order_id).to_dict()


@router.put("/{order_id}")
def update_order(
    order_id: int,
    payload: OrderUpdate,
    service: OrderService = Depends(get_order_service)
):
    with service_errors("updating order"):
        order = service.update(order_id, payload)
        return {"message": "Order updated successfully", "order": order.to_dict()}


@router.delete("/{order_id}")
def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    with service_errors("deleting order"):
        service.delete(order_id)
        return {"message": "Order deleted successfully"}
