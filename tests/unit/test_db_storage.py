import pytest
import psycopg.rows

from basic_auth_platform.models.user import User
from basic_auth_platform.storage.db_storage import DBUserStore, SCHEMA_SQL


class DummyCursor:
    def __init__(self, results=None, rowcount=1):
        self._results = results or []
        self.rowcount = rowcount
        self._index = 0
        self.executed = []

    def execute(self, query, params=None):
        self.executed.append((query, params))
        return True

    def fetchone(self):
        if self._results and self._index < len(self._results):
            row = self._results[self._index]
            self._index += 1
            return row
        return None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


class DummyConnection:
    def __init__(self, results=None, rowcount=1):
        self.results = results
        self.rowcount = rowcount
        self.autocommit = False
        self.closed = False
        self.row_factories = []
        self.cursors = []

    def cursor(self, row_factory=None):
        self.row_factories.append(row_factory)
        cur = DummyCursor(results=self.results, rowcount=self.rowcount)
        self.cursors.append(cur)
        return cur

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


def make_user(username="admin"):
    return User(first_name="Admin", last_name="User", username=username, password="$2b$04$x")


# ---------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------

def test_find_by_username(monkeypatch):
    row = {"id": 7, "first_name": "Admin", "last_name": "User", "username": "admin", "password": "$2b$04$x"}
    conn = DummyConnection(results=[row])
    monkeypatch.setattr("psycopg.connect", lambda dsn: conn)

    store = DBUserStore("fake")
    user = store.find_by_username("admin")
    assert user.id == 7
    assert user.full_name == "Admin User"
    assert conn.row_factories == [psycopg.rows.dict_row]
    assert conn.cursors[0].executed[0][1] == ("admin",)
    assert conn.closed is True


def test_find_by_username_missing(monkeypatch):
    conn = DummyConnection(results=[])
    monkeypatch.setattr("psycopg.connect", lambda dsn: conn)
    assert DBUserStore("fake").find_by_username("ghost") is None


def test_find_by_empty_username_skips_query(monkeypatch):
    def fail(dsn):
        raise AssertionError("no connection expected")

    monkeypatch.setattr("psycopg.connect", fail)
    store = DBUserStore("fake")
    assert store.find_by_username("") is None
    assert store.find_by_username(None) is None


def test_save_user_returns_generated_id(monkeypatch):
    conn = DummyConnection(results=[(42,)])
    monkeypatch.setattr("psycopg.connect", lambda dsn: conn)

    stored = DBUserStore("fake").save_user(make_user())
    assert stored.id == 42
    assert stored.username == "admin"
    query, params = conn.cursors[0].executed[0]
    assert "ON CONFLICT (username) DO NOTHING" in query
    assert params == ("Admin", "User", "admin", "$2b$04$x")


def test_save_user_duplicate_returns_none(monkeypatch):
    conn = DummyConnection(results=[])
    monkeypatch.setattr("psycopg.connect", lambda dsn: conn)
    assert DBUserStore("fake").save_user(make_user()) is None


def test_ensure_schema_runs_ddl(monkeypatch):
    conn = DummyConnection()
    monkeypatch.setattr("psycopg.connect", lambda dsn: conn)
    DBUserStore("fake").ensure_schema()
    assert conn.cursors[0].executed[0][0] == SCHEMA_SQL
    assert conn.autocommit is True


def test_connection_errors_propagate(monkeypatch):
    def down(dsn):
        raise psycopg.OperationalError("connection refused")

    monkeypatch.setattr("psycopg.connect", down)
    with pytest.raises(psycopg.OperationalError):
        DBUserStore("fake").find_by_username("admin")
