"""
Pydantic schemas for addresses, cards and customers

Formats (state, zip, card number, phone, ...) are enforced by the database
check constraints, not here, so an uninitialised entity is still constructible
and gets rejected on insert.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class Address(BaseModel):
    """Postal address"""
    id: int = Field(0, ge=0, description="Address ID, 0 until inserted")
    line1: str = Field("", description="Street line")
    line2: Optional[str] = Field(None, description="Second street line")
    city: str = Field("", description="City")
    state: str = Field("", description="Two-letter state code")
    zip: str = Field("", description="Five-digit zip code")
    
    model_config = ConfigDict(from_attributes=True)


class CardType(str, Enum):
    """Card type; UNKNOWN is refused by the card table"""
    UNKNOWN = "unknown"
    CREDIT = "credit"
    DEBIT = "debit"


class Card(BaseModel):
    """Payment card"""
    id: int = Field(0, ge=0, description="Card ID, 0 until inserted")
    number: str = Field("", description="Card number, ####-####-####-####")
    name: str = Field("", description="Card holder name")
    type: CardType = Field(CardType.UNKNOWN, description="Credit or debit")
    expiration: str = Field("", description="Expiration date, MM/YY")
    address: Address = Field(..., description="Billing address")


class Customer(BaseModel):
    """Customer account"""
    id: int = Field(0, ge=0, description="Customer ID, 0 until inserted")
    name: str = Field("", description="Customer name")
    email: str = Field("", description="Unique login email")
    password: str = Field("", description="Plaintext password")
    phone: str = Field("", description="Phone, (###) ###-####")
    notes: str = Field("", description="Free-form notes")
    address: Address = Field(..., description="Home address")
    active_card: Optional[Card] = Field(None, description="Card used by default")
