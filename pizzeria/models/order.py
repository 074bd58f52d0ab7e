"""
SQLAlchemy order and order line models
"""
from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, Integer, String

from pizzeria.database import Base


class OrderModel(Base):
    """Order database model"""
    
    __tablename__ = "orders"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customer.id"), nullable=False, index=True)
    address_id = Column(Integer, ForeignKey("address.id"), nullable=False)
    card_id = Column(Integer, ForeignKey("card.id"), nullable=False)
    datetime = Column(String, nullable=False)  # ISO-8601 text
    
    # Constraints
    __table_args__ = (
        CheckConstraint("datetime LIKE '____-__-__T__:__:__%'", name='datetime_format'),
    )
    
    def __repr__(self):
        return f"<Order(id={self.id}, customer_id={self.customer_id}, datetime='{self.datetime}')>"


class OrderLineModel(Base):
    """Order line database model"""
    
    __tablename__ = "order_line"
    
    order_id = Column(Integer, ForeignKey("orders.id"), primary_key=True)
    pizza_id = Column(Integer, ForeignKey("pizza.id"), primary_key=True)
    size = Column(String, primary_key=True)
    qty = Column(Integer, nullable=False)
    cost = Column(Float, nullable=False)
    
    # Constraints
    __table_args__ = (
        CheckConstraint("size IN ('small', 'medium', 'large')", name='size_valid'),
        CheckConstraint('qty > 0', name='qty_positive'),
    )
    
    def __repr__(self):
        return f"<OrderLine(order_id={self.order_id}, pizza_id={self.pizza_id}, size='{self.size}', qty={self.qty})>"
