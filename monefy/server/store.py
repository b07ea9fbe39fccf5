"""Persistent storage for users, banks, buckets and line items."""

import sqlite3
import threading
from contextlib import contextmanager
from dataclasses import replace
from typing import Iterator, Optional

from monefy.models import BankAccount, Bucket, LineItem, UserAccount

_SCHEMA = """
CREATE TABLE IF NOT EXISTS useraccount (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT NOT NULL UNIQUE,
    name TEXT NOT NULL,
    pin INTEGER NOT NULL
);
CREATE TABLE IF NOT EXISTS bankaccount (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    ownerid INTEGER NOT NULL
);
CREATE TABLE IF NOT EXISTS bucket (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    ownerid INTEGER NOT NULL
);
CREATE TABLE IF NOT EXISTS lineitem (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT NOT NULL,
    amount REAL NOT NULL,
    bucket INTEGER,
    bank INTEGER,
    ownerid INTEGER NOT NULL
);
"""

_USER_COLUMNS = "id, username, name, pin"
_ACCOUNT_COLUMNS = "id, name, ownerid"
_ITEM_COLUMNS = "id, title, description, amount, bucket, bank, ownerid"


class StoreError(Exception):
    """A storage operation failed."""


class DuplicateUsernameError(StoreError):
    """The username is already taken by another account."""


class RecordNotFoundError(StoreError):
    """No record exists with the requested id."""


def _user(row: sqlite3.Row) -> UserAccount:
    return UserAccount(id=row["id"], username=row["username"], name=row["name"], pin=row["pin"])


def _bank(row: sqlite3.Row) -> BankAccount:
    return BankAccount(id=row["id"], name=row["name"], owner=row["ownerid"])


def _bucket(row: sqlite3.Row) -> Bucket:
    return Bucket(id=row["id"], name=row["name"], owner=row["ownerid"])


def _line_item(row: sqlite3.Row) -> LineItem:
    return LineItem(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        amount=row["amount"],
        bucket=row["bucket"] or 0,
        bank=row["bank"] or 0,
        owner=row["ownerid"],
    )


class Store:
    """An SQLite database holding the budgeting records.

    A path of ":memory:" keeps everything in memory.
    """

    def __init__(self, path: str) -> None:
        self._lock = threading.Lock()
        try:
            self._conn = sqlite3.connect(path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            with self._conn:
                self._conn.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def __enter__(self) -> "Store":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        with self._lock:
            try:
                with self._conn:
                    yield self._conn
            except sqlite3.Error as exc:
                raise StoreError(str(exc)) from exc

    def _select(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        with self._transaction() as conn:
            return conn.execute(sql, params).fetchall()

    def _delete(self, table: str, columns: str, record_id: int) -> sqlite3.Row:
        with self._transaction() as conn:
            row = conn.execute(
                f"SELECT {columns} FROM {table} WHERE id = ?", (record_id,)
            ).fetchone()
            if row is None:
                raise RecordNotFoundError(f"no {table} record with id {record_id}")
            conn.execute(f"DELETE FROM {table} WHERE id = ?", (record_id,))
            return row

    def _update(self, sql: str, params: tuple, table: str, record_id: int) -> None:
        with self._transaction() as conn:
            if conn.execute(sql, params).rowcount == 0:
                raise RecordNotFoundError(f"no {table} record with id {record_id}")

    # Users

    def create_user(self, user: UserAccount) -> UserAccount:
        """Insert a user and return it with its new id."""
        with self._transaction() as conn:
            try:
                cursor = conn.execute(
                    "INSERT INTO useraccount (username, name, pin) VALUES (?, ?, ?)",
                    (user.username, user.name, user.pin),
                )
            except sqlite3.IntegrityError as exc:
                raise DuplicateUsernameError("Username already in use.") from exc
            return replace(user, id=cursor.lastrowid)

    def list_users(self) -> list[UserAccount]:
        return [_user(row) for row in self._select(f"SELECT {_USER_COLUMNS} FROM useraccount")]

    def find_users(self, user_id: int) -> list[UserAccount]:
        """Return the users with the given id: one, or none."""
        rows = self._select(f"SELECT {_USER_COLUMNS} FROM useraccount WHERE id = ?", (user_id,))
        return [_user(row) for row in rows]

    def update_user(self, user_id: int, user: UserAccount) -> UserAccount:
        """Overwrite a user's username, name and PIN; return the user with that id."""
        with self._transaction() as conn:
            try:
                cursor = conn.execute(
                    "UPDATE useraccount SET username = ?, name = ?, pin = ? WHERE id = ?",
                    (user.username, user.name, user.pin, user_id),
                )
            except sqlite3.IntegrityError as exc:
                raise DuplicateUsernameError("Username already in use.") from exc
            if cursor.rowcount == 0:
                raise RecordNotFoundError(f"no useraccount record with id {user_id}")
        return replace(user, id=user_id)

    def delete_user(self, user_id: int) -> UserAccount:
        """Delete a user and return what was removed."""
        return _user(self._delete("useraccount", _USER_COLUMNS, user_id))

    def authenticate(self, username: str, pin: int) -> Optional[UserAccount]:
        """Return the user with this username and PIN, or None."""
        rows = self._select(
            f"SELECT {_USER_COLUMNS} FROM useraccount WHERE username = ? AND pin = ? LIMIT 1",
            (username, pin),
        )
        return _user(rows[0]) if rows else None

    # Banks

    def create_bank(self, bank: BankAccount) -> BankAccount:
        with self._transaction() as conn:
            cursor = conn.execute(
                "INSERT INTO bankaccount (name, ownerid) VALUES (?, ?)", (bank.name, bank.owner)
            )
            return replace(bank, id=cursor.lastrowid)

    def list_banks(self) -> list[BankAccount]:
        return [_bank(row) for row in self._select(f"SELECT {_ACCOUNT_COLUMNS} FROM bankaccount")]

    def find_banks(self, bank_id: int) -> list[BankAccount]:
        rows = self._select(f"SELECT {_ACCOUNT_COLUMNS} FROM bankaccount WHERE id = ?", (bank_id,))
        return [_bank(row) for row in rows]

    def update_bank(self, bank_id: int, bank: BankAccount) -> BankAccount:
        """Rename a bank; the owner is left unchanged."""
        self._update(
            "UPDATE bankaccount SET name = ? WHERE id = ?", (bank.name, bank_id), "bankaccount", bank_id
        )
        return replace(bank, id=bank_id)

    def delete_bank(self, bank_id: int) -> BankAccount:
        return _bank(self._delete("bankaccount", _ACCOUNT_COLUMNS, bank_id))

    # Buckets

    def create_bucket(self, bucket: Bucket) -> Bucket:
        with self._transaction() as conn:
            cursor = conn.execute(
                "INSERT INTO bucket (name, ownerid) VALUES (?, ?)", (bucket.name, bucket.owner)
            )
            return replace(bucket, id=cursor.lastrowid)

    def list_buckets(self) -> list[Bucket]:
        return [_bucket(row) for row in self._select(f"SELECT {_ACCOUNT_COLUMNS} FROM bucket")]

    def find_buckets(self, bucket_id: int) -> list[Bucket]:
        rows = self._select(f"SELECT {_ACCOUNT_COLUMNS} FROM bucket WHERE id = ?", (bucket_id,))
        return [_bucket(row) for row in rows]

    def update_bucket(self, bucket_id: int, bucket: Bucket) -> Bucket:
        """Rename a bucket; the owner is left unchanged."""
        self._update(
            "UPDATE bucket SET name = ? WHERE id = ?", (bucket.name, bucket_id), "bucket", bucket_id
        )
        return replace(bucket, id=bucket_id)

    def delete_bucket(self, bucket_id: int) -> Bucket:
        return _bucket(self._delete("bucket", _ACCOUNT_COLUMNS, bucket_id))

    # Line items

    def create_line_item(self, item: LineItem) -> LineItem:
        """Insert a line item; a bucket or bank of 0 means none."""
        with self._transaction() as conn:
            cursor = conn.execute(
                "INSERT INTO lineitem (title, description, amount, bucket, bank, ownerid) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (item.title, item.description, item.amount,
                 item.bucket or None, item.bank or None, item.owner),
            )
            return replace(item, id=cursor.lastrowid)

    def list_line_items(self) -> list[LineItem]:
        return [_line_item(row) for row in self._select(f"SELECT {_ITEM_COLUMNS} FROM lineitem")]

    def find_line_items(self, item_id: int) -> list[LineItem]:
        rows = self._select(f"SELECT {_ITEM_COLUMNS} FROM lineitem WHERE id = ?", (item_id,))
        return [_line_item(row) for row in rows]

    def update_line_item(self, item_id: int, item: LineItem) -> LineItem:
        """Overwrite a line item's fields except its owner."""
        self._update(
            "UPDATE lineitem SET title = ?, description = ?, amount = ?, bucket = ?, bank = ? "
            "WHERE id = ?",
            (item.title, item.description, item.amount,
             item.bucket or None, item.bank or None, item_id),
            "lineitem",
            item_id,
        )
        return replace(item, id=item_id)

    def delete_line_item(self, item_id: int) -> LineItem:
        return _line_item(self._delete("lineitem", _ITEM_COLUMNS, item_id))