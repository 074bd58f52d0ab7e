"""
Services package
"""
from pizzeria.services.order_service import OrderService

__all__ = ["OrderService"]
