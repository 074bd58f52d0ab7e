"""
Errors raised by the pizzeria stores
"""
from typing import Optional


class PizzeriaError(Exception):
    """Base exception for pizzeria persistence errors"""
    pass


class NotFound(PizzeriaError):
    """A lookup returned no row"""

    def __init__(self, entity: str, key):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key!r} not found")


class ConstraintViolation(PizzeriaError):
    """Uniqueness, check or foreign key failure reported by the engine"""

    def __init__(self, table: str, detail: Optional[str] = None):
        self.table = table
        self.detail = detail
        message = f"Constraint violated on table '{table}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidLogin(PizzeriaError):
    """Unknown email or wrong password"""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Invalid username or password.")


class InvalidOperation(PizzeriaError):
    """The caller broke a method contract"""
    pass


class Fatal(PizzeriaError):
    """The storage handle could not be opened or the schema could not be created"""
    pass
