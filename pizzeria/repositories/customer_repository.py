"""
Customer Repository - Data Access Layer
"""
import logging

from pizzeria.exceptions import InvalidLogin, InvalidOperation, NotFound
from pizzeria.models.customer import CustomerModel
from pizzeria.repositories.address_repository import AddressRepository
from pizzeria.repositories.base import Repository
from pizzeria.repositories.card_repository import CardRepository
from pizzeria.schemas.customer import Customer

logger = logging.getLogger(__name__)


class CustomerRepository(Repository):
    """Repository for customers"""

    def __init__(self, db, addresses: AddressRepository = None, cards: CardRepository = None):
        super().__init__(db)
        self.addresses = addresses or AddressRepository(db)
        self.cards = cards or CardRepository(db, self.addresses)

    def get_by_id(self, customer_id: int) -> Customer:
        """Get customer by ID with address and active card resolved"""
        row = self.db.get(CustomerModel, customer_id)
        if row is None:
            raise NotFound("Customer", customer_id)
        return self._read(row)

    def get_by_email(self, email: str) -> Customer:
        """Get customer by unique email with address and active card resolved"""
        row = self.db.query(CustomerModel).filter(CustomerModel.email == email).first()
        if row is None:
            raise NotFound("Customer", email)
        return self._read(row)

    def login(self, email: str, password: str) -> Customer:
        """
        Authenticate a customer by email and password

        The stored password is compared in plaintext. This is a known
        weakness of the stored data, not a secure credential check.

        Raises:
            InvalidLogin: Unknown email or wrong password (not distinguished)
        """
        try:
            customer = self.get_by_email(email)
        except NotFound:
            logger.info(f"✗ Login refused for {email}")
            raise InvalidLogin(email) from None

        if customer.password != password:
            logger.info(f"✗ Login refused for {email}")
            raise InvalidLogin(email)

        logger.info(f"✓ Customer {customer.id} logged in")
        return customer

    def insert(self, customer: Customer) -> Customer:
        """
        Insert a new customer and assign its ID

        The address and the active card, when there is one, must already be
        persisted.

        Raises:
            ConstraintViolation: Duplicate email, bad email/phone format or
                unpersisted address/card
        """
        if customer.id:
            logger.debug(f"Customer {customer.id} already persisted. Skipping.")
            return customer

        row = CustomerModel(**self._columns(customer))
        with self._writing("customer"):
            self.db.add(row)
            self._commit()

        customer.id = row.id
        logger.debug(f"✓ Customer '{customer.email}' inserted (ID: {customer.id})")
        return customer

    def update(self, customer: Customer) -> Customer:
        """
        Rewrite every field of an existing customer

        Raises:
            InvalidOperation: The customer was never inserted
            NotFound: No customer with this ID
            ConstraintViolation: Same conditions as insert
        """
        if not customer.id:
            raise InvalidOperation("Cannot update a customer that has not been inserted")

        row = self.db.get(CustomerModel, customer.id)
        if row is None:
            raise NotFound("Customer", customer.id)

        with self._writing("customer"):
            for field, value in self._columns(customer).items():
                setattr(row, field, value)
            self._commit()

        return customer

    def _columns(self, customer: Customer) -> dict:
        return {
            'name': customer.name,
            'email': customer.email,
            'password': customer.password,
            'phone': customer.phone,
            'notes': customer.notes,
            'address_id': customer.address.id,
            'card_id': customer.active_card.id if customer.active_card is not None else None
        }

    def _read(self, row: CustomerModel) -> Customer:
        active_card = self.cards.get_by_id(row.card_id) if row.card_id is not None else None
        return Customer(
            id=row.id,
            name=row.name,
            email=row.email,
            password=row.password,
            phone=row.phone,
            notes=row.notes,
            address=self.addresses.get_by_id(row.address_id),
            active_card=active_card
        )
