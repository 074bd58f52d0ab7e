"""
Card Repository - Data Access Layer
"""
import logging

from pizzeria.exceptions import NotFound
from pizzeria.models.customer import CardModel
from pizzeria.repositories.address_repository import AddressRepository
from pizzeria.repositories.base import Repository
from pizzeria.schemas.customer import Card, CardType

logger = logging.getLogger(__name__)


class CardRepository(Repository):
    """Repository for payment cards"""
    
    def __init__(self, db, addresses: AddressRepository = None):
        super().__init__(db)
        self.addresses = addresses or AddressRepository(db)
    
    def get_by_id(self, card_id: int) -> Card:
        """
        Get card by ID with its billing address resolved
        
        Raises:
            NotFound: No card with this ID, or its address is missing
        """
        row = self.db.get(CardModel, card_id)
        if row is None:
            raise NotFound("Card", card_id)
        
        return Card(
            id=row.id,
            number=row.number,
            name=row.name,
            type=CardType(row.type),
            expiration=row.expiration,
            address=self.addresses.get_by_id(row.address_id)
        )
    
    def insert(self, card: Card) -> Card:
        """
        Insert a new card and assign its ID
        
        The card's address must already be persisted. A card still typed
        UNKNOWN is refused by the table's check constraint.
        
        Raises:
            ConstraintViolation: Bad format, unknown type, duplicate number or
                unpersisted address
        """
        if card.id:
            logger.debug(f"Card {card.id} already persisted. Skipping.")
            return card
        
        row = CardModel(
            number=card.number,
            name=card.name,
            type=CardType(card.type).value,
            expiration=card.expiration,
            address_id=card.address.id
        )
        with self._writing("card"):
            self.db.add(row)
            self._commit()
        
        card.id = row.id
        logger.debug(f"✓ Card inserted (ID: {card.id})")
        return card
