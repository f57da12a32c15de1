import sqlite3
import unittest

from userrecord.common import User, UserRole
from userrecord.rows import UserRow

CREATE_USER_TABLE = """
    CREATE TABLE users (
        name TEXT,
        uid INTEGER PRIMARY KEY,
        password TEXT,
        google_id TEXT,
        role TEXT
    );
    """

INSERT_USER = """
    INSERT INTO users (name, uid, password, google_id, role) VALUES (?, ?, ?, ?, ?)
    """

SELECT_USER = """
    SELECT name, uid, password, google_id, role FROM users WHERE uid = ?
    """


class TestUserRow(unittest.TestCase):
    def test_columns_in_table_order(self):
        self.assertEqual(
            UserRow.COLUMNS,
            ("name", "uid", "password", "google_id", "role"),
        )

    def test_to_params_encodes_role(self):
        user = User("alice", 7, None, "g-123", UserRole.ADMIN)
        row = user.copy_into(UserRow())

        self.assertEqual(row.to_params(), ("alice", 7, None, "g-123", "ADMIN"))

    def test_to_params_without_role(self):
        self.assertEqual(UserRow().to_params(), (None, None, None, None, None))

    def test_to_params_rejects_uid_out_of_range(self):
        for uid in (-1, 2**32):
            with self.subTest(uid=uid):
                with self.assertRaises(ValueError):
                    UserRow(uid=uid).to_params()

    def test_to_params_accepts_uid_bounds(self):
        self.assertEqual(UserRow(uid=0).to_params()[1], 0)
        self.assertEqual(UserRow(uid=2**32 - 1).to_params()[1], 2**32 - 1)

    def test_from_mapping_fills_missing_columns(self):
        row = UserRow.from_mapping({"name": "bob", "role": "REGULAR"})

        self.assertEqual(row, UserRow(name="bob", role=UserRole.REGULAR))

    def test_from_mapping_rejects_unknown_role(self):
        with self.assertRaises(ValueError):
            UserRow.from_mapping({"role": "SUPERUSER"})

    def test_from_mapping_keeps_stored_uid(self):
        row = UserRow.from_mapping({"uid": 2**32})

        self.assertEqual(row.uid, 2**32)
        with self.assertRaises(ValueError):
            row.to_params()


class TestUserRowSQLite(unittest.TestCase):
    """Round trips through an in-memory SQLite table."""

    def setUp(self) -> None:
        self.db = sqlite3.connect(":memory:")
        self.db.row_factory = sqlite3.Row
        self.db.execute(CREATE_USER_TABLE)
        return super().setUp()

    def tearDown(self) -> None:
        self.db.close()
        return super().tearDown()

    def test_write_and_read_back(self):
        user = User("alice", 7, "hashed-secret", None, UserRole.RESTRICTED)
        self.db.execute(INSERT_USER, user.copy_into(UserRow()).to_params())

        stored = self.db.execute(SELECT_USER, (7,)).fetchone()
        loaded = UserRow.from_mapping(stored).copy_into(User())

        self.assertEqual(loaded, user)

    def test_federated_account_without_password(self):
        user = User("carol", 9, None, "g-999", UserRole.REGULAR)
        self.db.execute(INSERT_USER, user.copy_into(UserRow()).to_params())

        stored = self.db.execute(SELECT_USER, (9,)).fetchone()
        loaded = User.from_user(UserRow.from_mapping(stored))

        self.assertIsNone(loaded.password)
        self.assertEqual(loaded.google_id, "g-999")
