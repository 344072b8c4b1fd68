"""Fixtures for task persistence integration tests.

Database fixtures are shared from tests.shared.fixtures.database.
"""

from tests.shared.fixtures.database import db_engine, db_session  # noqa: F401
