"""
Pytest configuration and fixtures for Modcase tests.
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add src directory to path so imports work
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from modcase.database.database import Database  # noqa: E402
from modcase.services.audit_log_service import AuditLogService  # noqa: E402
from modcase.services.note_store_service import NoteStoreService  # noqa: E402


@pytest_asyncio.fixture
async def database(tmp_path):
    """A freshly initialized SQLite database in a temporary directory."""
    db = Database(tmp_path / "modcase-test.db")
    assert await db.initialize()
    yield db
    await db.shutdown()


@pytest.fixture
def audit_log(database) -> AuditLogService:
    return AuditLogService(database.connection_manager)


@pytest.fixture
def note_store(database) -> NoteStoreService:
    return NoteStoreService(database.connection_manager)
