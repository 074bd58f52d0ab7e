"""
Shared repository plumbing
"""
import logging
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pizzeria.database import commit, in_atomic_block
from pizzeria.exceptions import ConstraintViolation

logger = logging.getLogger(__name__)


class Repository:
    """Base class for repositories working over one shared session"""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self) -> None:
        commit(self.db)

    @contextmanager
    def _writing(self, table: str):
        """
        Translate engine integrity errors raised while writing to a table

        Outside an atomic block the session is rolled back so that it stays
        usable; inside one the enclosing block does the rollback.
        """
        try:
            yield
        except IntegrityError as e:
            if not in_atomic_block(self.db):
                self.db.rollback()
            logger.warning(f"✗ Write to '{table}' rejected: {e.orig}")
            raise ConstraintViolation(table, str(e.orig)) from e
