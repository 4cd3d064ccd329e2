import unittest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from app.database import build_engine, check_db_connection, init_db


class TestDatabaseConnection(unittest.TestCase):
    def setUp(self):
        self.engine = build_engine("sqlite://", poolclass=StaticPool)

    def tearDown(self):
        self.engine.dispose()

    def test_database_connection_success(self):
        """Test that the application can reach the SQLite store."""
        try:
            with self.engine.connect() as connection:
                result = connection.execute(text("SELECT 1"))
                self.assertEqual(result.scalar(), 1)
        except SQLAlchemyError as e:
            self.fail(f"Database connection failed: {str(e)}")

        self.assertTrue(check_db_connection(self.engine))

    def test_foreign_keys_are_enforced(self):
        with self.engine.connect() as connection:
            self.assertEqual(connection.execute(text("PRAGMA foreign_keys")).scalar(), 1)

    def test_init_db_creates_all_tables(self):
        init_db(self.engine)
        with self.engine.connect() as connection:
            rows = connection.execute(text("SELECT name FROM sqlite_master WHERE type='table'"))
            tables = {r[0] for r in rows}
        self.assertTrue({"drivers", "vehicles", "engineers", "missions"} <= tables)


if __name__ == '__main__':
    unittest.main()
