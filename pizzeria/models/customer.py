"""
SQLAlchemy address, card and customer models
"""
from sqlalchemy import CheckConstraint, Column, ForeignKey, Index, Integer, String, func

from pizzeria.database import Base


class AddressModel(Base):
    """Address database model"""
    
    __tablename__ = "address"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    line1 = Column(String, nullable=False)
    line2 = Column(String, nullable=True)
    city = Column(String, nullable=False)
    state = Column(String, nullable=False)
    zip = Column(String, nullable=False)
    
    # Constraints
    __table_args__ = (
        CheckConstraint("state LIKE '__'", name='state_format'),
        CheckConstraint("zip LIKE '_____'", name='zip_format'),
        # NULL and empty line2 count as the same address
        Index('address_unique', line1, func.coalesce(line2, ''), city, state, zip, unique=True),
    )
    
    def __repr__(self):
        return f"<Address(id={self.id}, line1='{self.line1}', city='{self.city}', state='{self.state}')>"


class CardModel(Base):
    """Payment card database model"""
    
    __tablename__ = "card"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    number = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    expiration = Column(String, nullable=False)
    address_id = Column(Integer, ForeignKey("address.id"), nullable=False)
    
    # Constraints
    __table_args__ = (
        CheckConstraint("number LIKE '____-____-____-____'", name='number_format'),
        CheckConstraint("type IN ('credit', 'debit')", name='type_valid'),
        CheckConstraint("expiration LIKE '__/__'", name='expiration_format'),
    )
    
    def __repr__(self):
        return f"<Card(id={self.id}, type='{self.type}', address_id={self.address_id})>"


class CustomerModel(Base):
    """Customer database model"""
    
    __tablename__ = "customer"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    password = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    notes = Column(String, nullable=False, default='')
    address_id = Column(Integer, ForeignKey("address.id"), nullable=False)
    card_id = Column(Integer, ForeignKey("card.id"), nullable=True)
    
    # Constraints
    __table_args__ = (
        CheckConstraint("email LIKE '%@%.%'", name='email_format'),
        CheckConstraint("phone LIKE '(___) ___-____'", name='phone_format'),
    )
    
    def __repr__(self):
        return f"<Customer(id={self.id}, email='{self.email}')>"
