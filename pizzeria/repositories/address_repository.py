"""
Address Repository - Data Access Layer
"""
import logging

from pizzeria.exceptions import NotFound
from pizzeria.models.customer import AddressModel
from pizzeria.repositories.base import Repository
from pizzeria.schemas.customer import Address

logger = logging.getLogger(__name__)


class AddressRepository(Repository):
    """Repository for addresses"""
    
    def get_by_id(self, address_id: int) -> Address:
        """
        Get address by ID
        
        Raises:
            NotFound: No address with this ID
        """
        row = self.db.get(AddressModel, address_id)
        if row is None:
            raise NotFound("Address", address_id)
        return Address.model_validate(row)
    
    def insert(self, address: Address) -> Address:
        """
        Insert a new address and assign its ID
        
        Args:
            address: Address to persist; skipped if it already has an ID
        
        Returns:
            The same address with its ID set
        
        Raises:
            ConstraintViolation: Bad state/zip format or duplicate address
        """
        if address.id:
            logger.debug(f"Address {address.id} already persisted. Skipping.")
            return address
        
        row = AddressModel(
            line1=address.line1,
            line2=address.line2,
            city=address.city,
            state=address.state,
            zip=address.zip
        )
        with self._writing("address"):
            self.db.add(row)
            self._commit()
        
        address.id = row.id
        logger.debug(f"✓ Address inserted (ID: {address.id})")
        return address
