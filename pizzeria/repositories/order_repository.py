"""
Order Repository - Data Access Layer
"""
import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import insert, literal_column

from pizzeria.exceptions import NotFound
from pizzeria.models.order import OrderModel, OrderLineModel
from pizzeria.repositories.base import Repository
from pizzeria.repositories.customer_repository import CustomerRepository
from pizzeria.repositories.pizza_repository import PizzaRepository
from pizzeria.schemas.ingredient import Size
from pizzeria.schemas.order import Order, OrderLine

logger = logging.getLogger(__name__)


class OrderRepository(Repository):
    """Repository for orders and their lines"""

    def __init__(self, db, customers: CustomerRepository = None, pizzas: PizzaRepository = None):
        super().__init__(db)
        self.customers = customers or CustomerRepository(db)
        self.pizzas = pizzas or PizzaRepository(db)

    def get_by_id(self, order_id: int) -> Order:
        """Get order by ID with customer, address, card and lines resolved"""
        row = self.db.get(OrderModel, order_id)
        if row is None:
            raise NotFound("Order", order_id)
        return self._read(row)

    def get_by_customer(self, customer_id: int) -> List[Order]:
        """Get all orders placed by a customer"""
        rows = self.db.query(OrderModel).filter(
            OrderModel.customer_id == customer_id
        ).order_by(OrderModel.id).all()
        return [self._read(row) for row in rows]

    def insert(self, order: Order) -> Order:
        """
        Insert an order and one row per order line

        Customer, address, card and every line's pizza must already be
        persisted. On success the order gets its ID, a missing timestamp is
        set to the current UTC time and each line's unit cost is fixed to the
        price that was stored.

        Raises:
            ConstraintViolation: Unpersisted reference, bad size or quantity,
                or the same pizza and size on two lines
        """
        if order.id:
            logger.debug(f"Order {order.id} already persisted. Skipping.")
            return order

        timestamp = order.timestamp or datetime.now(timezone.utc).replace(microsecond=0)
        unit_costs = [line.effective_unit_cost for line in order.lines]

        row = OrderModel(
            customer_id=order.customer.id,
            address_id=order.address.id,
            card_id=order.card.id,
            datetime=timestamp.isoformat()
        )
        with self._writing("orders"):
            self.db.add(row)
            self.db.flush()

        if order.lines:
            with self._writing("order_line"):
                self.db.execute(
                    insert(OrderLineModel),
                    [
                        {
                            'order_id': row.id,
                            'pizza_id': line.pizza.id,
                            'size': Size(line.size).value,
                            'qty': line.quantity,
                            'cost': cost
                        }
                        for line, cost in zip(order.lines, unit_costs)
                    ]
                )
        self._commit()

        order.id = row.id
        order.timestamp = timestamp
        for line, cost in zip(order.lines, unit_costs):
            line.unit_cost = cost

        logger.info(f"✓ Order {order.id} stored with {len(order.lines)} line(s)")
        return order

    def _read_lines(self, order_id: int) -> List[OrderLine]:
        # Storage scan order, not a guaranteed line order
        rows = self.db.query(OrderLineModel).filter(
            OrderLineModel.order_id == order_id
        ).order_by(literal_column("order_line.rowid")).all()

        return [
            OrderLine(
                pizza=self.pizzas.get_by_id(line.pizza_id),
                size=Size(line.size),
                quantity=line.qty,
                unit_cost=line.cost
            )
            for line in rows
        ]

    def _read(self, row: OrderModel) -> Order:
        return Order(
            id=row.id,
            customer=self.customers.get_by_id(row.customer_id),
            address=self.customers.addresses.get_by_id(row.address_id),
            card=self.customers.cards.get_by_id(row.card_id),
            timestamp=datetime.fromisoformat(row.datetime),
            lines=self._read_lines(row.id)
        )
