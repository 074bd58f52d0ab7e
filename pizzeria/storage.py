"""
Storage handle - one engine and one session shared by every store
"""
import logging
from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pizzeria.config import settings
from pizzeria.database import atomic, create_db_engine, create_session_factory, init_db
from pizzeria.exceptions import Fatal, InvalidOperation
from pizzeria.models.meta import SchemaInfo
from pizzeria.repositories import (
    IngredientRepository,
    CrustRepository,
    SauceRepository,
    CheeseRepository,
    ToppingRepository,
    AddressRepository,
    CardRepository,
    CustomerRepository,
    PizzaRepository,
    OrderRepository
)
from pizzeria.schemas.order import Order
from pizzeria.services.order_service import OrderService

logger = logging.getLogger(__name__)

# Attributes that only exist while the handle is open
_REPOSITORIES = (
    "ingredients", "crusts", "sauces", "cheeses", "toppings",
    "addresses", "cards", "customers", "pizzas", "orders", "order_service"
)


class Storage:
    """
    Explicit handle on the pizzeria database

    Opened once and closed once. While open it exposes one repository per
    table family, all sharing the same session, plus save() for whole order
    graphs. Access must be serialised by the caller if used from several
    threads.

    Usage:
        with Storage("sqlite:///pizzeria.db") as storage:
            storage.save(order)
            customer = storage.customers.login(email, password)
    """

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None):
        self.url = url or settings.DATABASE_URL
        self.echo = echo
        self.engine = None
        self.session: Optional[Session] = None

    def open(self) -> "Storage":
        """
        Connect, create the schema on first use and build the repositories

        Raises:
            InvalidOperation: The handle is already open
            Fatal: The database cannot be reached or the schema cannot be created
        """
        if self.session is not None:
            raise InvalidOperation("Storage is already open")

        logger.info(f"Starting {settings.SERVICE_NAME} storage...")
        try:
            self.engine = create_db_engine(self.url, self.echo)
            self.session = create_session_factory(self.engine)()
            if not self.is_initialized():
                init_db(self.engine)
                self.mark_initialized()
                logger.info("✓ Database schema created")
        except SQLAlchemyError as e:
            self._dispose()
            logger.critical(f"✗ Cannot open database {self.url}: {e}")
            raise Fatal(f"Cannot open database {self.url}: {e}") from e

        self._build_repositories()
        logger.info("✓ Database initialized")
        return self

    def close(self) -> None:
        """Close the session and release the engine"""
        if self.session is None:
            return
        self._dispose()
        logger.info(f"Shutting down {settings.SERVICE_NAME} storage...")

    def is_initialized(self) -> bool:
        """True once the schema has been created in this database"""
        self._require_open()
        if not inspect(self.engine).has_table(SchemaInfo.__tablename__):
            return False
        row = self.session.get(SchemaInfo, 1)
        return bool(row is not None and row.initialized)

    def mark_initialized(self) -> None:
        """Record that the schema has been created"""
        self._require_open()
        row = self.session.get(SchemaInfo, 1)
        if row is None:
            self.session.add(SchemaInfo(id=1, initialized=1))
        else:
            row.initialized = 1
        self.session.commit()

    def atomic(self):
        """Context manager running the enclosed store calls in one transaction"""
        self._require_open()
        return atomic(self.session)

    def save(self, order: Order) -> Order:
        """Persist the unsaved parts of an order graph"""
        return self.order_service.save(order)

    def _build_repositories(self) -> None:
        db = self.session

        self.ingredients = IngredientRepository(db)
        self.crusts = CrustRepository(db)
        self.sauces = SauceRepository(db)
        self.cheeses = CheeseRepository(db)
        self.toppings = ToppingRepository(db)

        self.addresses = AddressRepository(db)
        self.cards = CardRepository(db, self.addresses)
        self.customers = CustomerRepository(db, self.addresses, self.cards)
        self.pizzas = PizzaRepository(db, self.crusts, self.sauces, self.cheeses, self.toppings)
        self.orders = OrderRepository(db, self.customers, self.pizzas)

        self.order_service = OrderService(db, self.orders, self.ingredients)

    def _require_open(self) -> None:
        if self.session is None:
            raise InvalidOperation("Storage is not open")

    def _dispose(self) -> None:
        for name in _REPOSITORIES:
            self.__dict__.pop(name, None)
        if self.session is not None:
            self.session.close()
            self.session = None
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None

    def __getattr__(self, name):
        if name in _REPOSITORIES:
            raise InvalidOperation("Storage is not open")
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __enter__(self) -> "Storage":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
