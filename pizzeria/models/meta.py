"""
SQLAlchemy schema marker model
"""
from sqlalchemy import Column, Integer

from pizzeria.database import Base


class SchemaInfo(Base):
    """Single-row table recording that the schema has been created"""
    
    __tablename__ = "schema_info"
    
    id = Column(Integer, primary_key=True, autoincrement=False)
    initialized = Column(Integer, nullable=False, default=0)
