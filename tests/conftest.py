"""
Shared pytest fixtures
"""
import pytest
from sqlalchemy import func, select

from pizzeria.storage import Storage


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'pizzeria.db'}"


@pytest.fixture
def storage(database_url):
    """Open storage on a fresh file-backed database"""
    with Storage(database_url) as handle:
        yield handle


@pytest.fixture
def count(storage):
    """Count rows of a model or table"""
    def _count(table) -> int:
        target = getattr(table, "__table__", table)
        return storage.session.execute(select(func.count()).select_from(target)).scalar_one()

    return _count
