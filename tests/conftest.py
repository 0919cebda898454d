"""
Pytest configuration and shared fixtures.
"""
import pytest
import pytest_asyncio

from app.db.connection import Database
from app.domain.unit_of_work import SQLAlchemyUnitOfWork


VALID_EMPLOYEE_DATA = {
    "name": "John Doe",
    "job_role": "Software Engineer",
    "salary": 5000,
    "employee_registration": 123456,
}


@pytest.fixture
def employee_data():
    """Fresh copy of a valid create payload"""
    return dict(VALID_EMPLOYEE_DATA)


@pytest_asyncio.fixture
async def database():
    """
    In-memory SQLite database, created fresh for each test.
    """
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.create_tables()

    yield db

    await db.dispose()


@pytest.fixture
def uow_factory(database):
    """Build a new Unit of Work bound to the test database"""
    def factory():
        return SQLAlchemyUnitOfWork(database.session_maker)
    return factory


@pytest_asyncio.fixture
async def file_database(tmp_path):
    """
    File-backed SQLite database: every session gets its own connection,
    so concurrent units of work run in separate transactions.
    """
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'employees.db'}")
    await db.create_tables()

    yield db

    await db.dispose()
