"""
Pizzeria persistence layer
"""
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from pizzeria.exceptions import (  # noqa: E402
    PizzeriaError,
    NotFound,
    ConstraintViolation,
    InvalidLogin,
    InvalidOperation,
    Fatal
)
from pizzeria.storage import Storage  # noqa: E402

__all__ = [
    "Storage",
    "PizzeriaError",
    "NotFound",
    "ConstraintViolation",
    "InvalidLogin",
    "InvalidOperation",
    "Fatal"
]
