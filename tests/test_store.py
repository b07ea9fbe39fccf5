import pytest

from monefy.models import BankAccount, Bucket, LineItem, UserAccount
from monefy.server.store import (
    DuplicateUsernameError,
    RecordNotFoundError,
    Store,
    StoreError,
)


@pytest.fixture
def store():
    with Store(":memory:") as db:
        yield db


def test_create_user_assigns_id_and_lists(store):
    created = store.create_user(UserAccount(username="alice", name="Alice", pin=1234))
    assert created.username == "alice"
    assert store.list_users() == [created]
    assert store.find_users(created.id) == [created]


def test_create_users_get_distinct_ids(store):
    first = store.create_user(UserAccount(username="a", name="A", pin=1))
    second = store.create_user(UserAccount(username="b", name="B", pin=2))
    assert first.id != second.id
    assert len(store.list_users()) == 2


def test_duplicate_username_rejected(store):
    store.create_user(UserAccount(username="alice", name="Alice", pin=1))
    with pytest.raises(DuplicateUsernameError):
        store.create_user(UserAccount(username="alice", name="Other", pin=2))
    assert len(store.list_users()) == 1


def test_store_errors_share_base_class(store):
    store.create_user(UserAccount(username="alice", name="Alice", pin=1))
    with pytest.raises(StoreError):
        store.create_user(UserAccount(username="alice", name="Other", pin=2))
    with pytest.raises(StoreError):
        store.delete_user(999)


def test_find_missing_user_is_empty(store):
    assert store.find_users(42) == []


def test_update_user(store):
    created = store.create_user(UserAccount(username="alice", name="Alice", pin=1))
    updated = store.update_user(created.id, UserAccount(username="al", name="Al", pin=9))
    assert updated == UserAccount(id=created.id, username="al", name="Al", pin=9)
    assert store.find_users(created.id) == [updated]


def test_update_missing_user_raises(store):
    with pytest.raises(RecordNotFoundError):
        store.update_user(42, UserAccount(username="x", name="X", pin=1))


def test_delete_user_returns_record(store):
    created = store.create_user(UserAccount(username="alice", name="Alice", pin=1))
    assert store.delete_user(created.id) == created
    assert store.list_users() == []
    with pytest.raises(RecordNotFoundError):
        store.delete_user(created.id)


def test_authenticate(store):
    created = store.create_user(UserAccount(username="alice", name="Alice", pin=1234))
    assert store.authenticate("alice", 1234) == created
    assert store.authenticate("alice", 4321) is None
    assert store.authenticate("bob", 1234) is None


def test_bank_crud(store):
    bank = store.create_bank(BankAccount(name="Savings", owner=7))
    assert store.list_banks() == [bank]
    renamed = store.update_bank(bank.id, BankAccount(name="Checking", owner=7))
    assert store.find_banks(bank.id) == [BankAccount(id=bank.id, name="Checking", owner=7)]
    assert renamed.id == bank.id
    assert store.delete_bank(bank.id).name == "Checking"
    assert store.find_banks(bank.id) == []


def test_update_bank_keeps_owner(store):
    bank = store.create_bank(BankAccount(name="Savings", owner=7))
    store.update_bank(bank.id, BankAccount(name="New", owner=99))
    assert store.find_banks(bank.id)[0].owner == 7


def test_bank_missing_raises(store):
    with pytest.raises(RecordNotFoundError):
        store.update_bank(5, BankAccount(name="x"))
    with pytest.raises(RecordNotFoundError):
        store.delete_bank(5)


def test_bucket_crud(store):
    bucket = store.create_bucket(Bucket(name="Food", owner=3))
    assert store.list_buckets() == [bucket]
    store.update_bucket(bucket.id, Bucket(name="Groceries", owner=3))
    assert store.find_buckets(bucket.id)[0].name == "Groceries"
    assert store.delete_bucket(bucket.id) == Bucket(id=bucket.id, name="Groceries", owner=3)
    assert store.list_buckets() == []


def test_bucket_missing_raises(store):
    with pytest.raises(RecordNotFoundError):
        store.delete_bucket(8)


def test_line_item_round_trip(store):
    item = store.create_line_item(
        LineItem(title="Lunch", description="Noodles", amount=12.5, bucket=2, bank=3, owner=1)
    )
    assert store.find_line_items(item.id) == [item]
    assert store.list_line_items() == [item]


def test_line_item_without_bucket_or_bank(store):
    item = store.create_line_item(LineItem(title="Cash", description="", amount=3.0, owner=1))
    fetched = store.find_line_items(item.id)[0]
    assert (fetched.bucket, fetched.bank) == (0, 0)


def test_update_line_item_keeps_owner(store):
    item = store.create_line_item(LineItem(title="A", description="d", amount=1.0, owner=4))
    store.update_line_item(
        item.id, LineItem(title="B", description="e", amount=2.0, bucket=1, bank=1, owner=99)
    )
    fetched = store.find_line_items(item.id)[0]
    assert fetched.title == "B"
    assert fetched.amount == 2.0
    assert fetched.owner == 4


def test_delete_line_item(store):
    item = store.create_line_item(LineItem(title="A", description="d", amount=1.0, owner=4))
    assert store.delete_line_item(item.id) == item
    with pytest.raises(RecordNotFoundError):
        store.delete_line_item(item.id)
    with pytest.raises(RecordNotFoundError):
        store.update_line_item(item.id, item)


def test_file_store_persists(tmp_path):
    path = str(tmp_path / "budget.db")
    with Store(path) as db:
        created = db.create_user(UserAccount(username="alice", name="Alice", pin=1))
    with Store(path) as db:
        assert db.list_users() == [created]


def test_closed_store_raises_store_error():
    db = Store(":memory:")
    db.close()
    with pytest.raises(StoreError):
        db.list_users()