"""Order lifecycle example: an entity driven through a shared transition table."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional, Protocol

from easy_fsm.state_machine import TransitionTable

logger = logging.getLogger("easy_fsm.examples.orders")


class OrderEvent(str, Enum):
    PLACED = "Order.Placed"
    SHIPPED = "Order.Shipped"
    CANCELLED = "Order.Cancelled"
    DELIVERED = "Order.Delivered"
    RETURN_REQUESTED = "Order.ReturnRequested"
    CARGO_RETURNED = "Order.CargoReturned"
    REFUND_REQUESTED = "Order.RefundRequested"
    REFUNDED = "Order.Refunded"


class OrderState(str, Enum):
    AWAITING_PAYMENT = "AwaitingPayment"  # created, payment not received yet
    CONFIRMED = "Confirmed"  # paid and reserved, waiting for shipment
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"
    RETURN_IN_PROGRESS = "ReturnInProgress"
    RETURNED = "Returned"  # goods received back
    REFUND_IN_PROGRESS = "RefundInProgress"
    REFUNDED = "Refunded"


ORDER_STATE_TABLE: TransitionTable[OrderEvent, OrderState] = (
    TransitionTable(OrderState.AWAITING_PAYMENT)
    .declare(OrderEvent.PLACED, OrderState.AWAITING_PAYMENT, OrderState.CONFIRMED)
    .declare(OrderEvent.SHIPPED, OrderState.CONFIRMED, OrderState.SHIPPED)
    .declare(OrderEvent.DELIVERED, OrderState.SHIPPED, OrderState.DELIVERED)
    .declare(OrderEvent.CANCELLED, OrderState.CONFIRMED, OrderState.CANCELLED)
    .declare(OrderEvent.RETURN_REQUESTED, OrderState.SHIPPED, OrderState.RETURN_IN_PROGRESS)
    .declare(OrderEvent.CARGO_RETURNED, OrderState.RETURN_IN_PROGRESS, OrderState.RETURNED)
    .declare(OrderEvent.REFUND_REQUESTED, OrderState.RETURN_IN_PROGRESS, OrderState.REFUND_IN_PROGRESS)
    .declare(OrderEvent.REFUNDED, OrderState.REFUND_IN_PROGRESS, OrderState.REFUNDED)
    .declare(OrderEvent.REFUNDED, OrderState.RETURNED, OrderState.REFUND_IN_PROGRESS)
    .declare(OrderEvent.RETURN_REQUESTED, OrderState.DELIVERED, OrderState.RETURN_IN_PROGRESS)
)


@dataclass
class Order:
    id: str
    state: OrderState

    def return_request(self) -> None:
        """Move the order into ReturnInProgress, raising TransitionError if not allowed."""
        machine = ORDER_STATE_TABLE.machine().derive_at(self.state)

        def _apply(next_state: OrderState) -> None:
            self.state = next_state
            logger.info("Return requested for order %s", self.id)

        machine.act(OrderEvent.RETURN_REQUESTED, _apply)


class OrderRepository(Protocol):
    def lock_order_by_id(self, order_id: str) -> Order:
        """Fetch an order for update, holding whatever lock the store needs."""


class MemoryOrderRepository:
    """In-memory stand-in for a database-backed repository."""

    def __init__(self, orders: Optional[Dict[str, Order]] = None) -> None:
        if orders is None:
            orders = {
                "action_success": Order(id="action_success", state=OrderState.DELIVERED),
                "action_fail": Order(id="action_fail", state=OrderState.CANCELLED),
            }
        self._orders = orders

    def lock_order_by_id(self, order_id: str) -> Order:
        try:
            stored = self._orders[order_id]
        except KeyError:
            raise KeyError(f"Order {order_id!r} not found") from None
        # Callers get a detached row, like a fresh database read.
        return replace(stored)


def order_use_case_success(repo: OrderRepository) -> Order:
    order = repo.lock_order_by_id("action_success")
    order.return_request()
    return order


def order_use_case_fail(repo: OrderRepository) -> Order:
    order = repo.lock_order_by_id("action_fail")
    order.return_request()
    return order
