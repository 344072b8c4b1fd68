"""Fixtures for persistence and API integration tests.

Database fixtures are shared from tests.shared.fixtures.database.
"""

from tests.shared.fixtures.database import (  # noqa: F401
    db_engine,
    db_session,
    pg_session,
    postgres_container,
)
