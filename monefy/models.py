"""Records shared by the budgeting server and its client, with their JSON forms."""

from dataclasses import dataclass
from typing import Any, Mapping


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _float(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number")
    return float(value)


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass
class UserAccount:
    """A person who signs in with a username and PIN."""

    id: int = 0
    username: str = ""
    name: str = ""
    pin: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "username": self.username, "name": self.name, "pin": self.pin}

    @classmethod
    def from_dict(cls, data: Any) -> "UserAccount":
        data = _mapping(data)
        return cls(
            id=_int(data, "id"),
            username=_str(data, "username"),
            name=_str(data, "name"),
            pin=_int(data, "pin"),
        )


@dataclass
class BankAccount:
    """A bank account belonging to a user."""

    id: int = 0
    name: str = ""
    owner: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "ownerid": self.owner}

    @classmethod
    def from_dict(cls, data: Any) -> "BankAccount":
        data = _mapping(data)
        return cls(id=_int(data, "id"), name=_str(data, "name"), owner=_int(data, "ownerid"))


@dataclass
class Bucket:
    """A spending category belonging to a user."""

    id: int = 0
    name: str = ""
    owner: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "ownerid": self.owner}

    @classmethod
    def from_dict(cls, data: Any) -> "Bucket":
        data = _mapping(data)
        return cls(id=_int(data, "id"), name=_str(data, "name"), owner=_int(data, "ownerid"))


@dataclass
class LineItem:
    """An expense entry, optionally tied to a bucket and a bank (0 for none)."""

    id: int = 0
    title: str = ""
    description: str = ""
    amount: float = 0.0
    bucket: int = 0
    bank: int = 0
    owner: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "amount": self.amount,
            "bucket": self.bucket,
            "bank": self.bank,
            "ownerid": self.owner,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "LineItem":
        data = _mapping(data)
        return cls(
            id=_int(data, "id"),
            title=_str(data, "title"),
            description=_str(data, "description"),
            amount=_float(data, "amount"),
            bucket=_int(data, "bucket"),
            bank=_int(data, "bank"),
            owner=_int(data, "ownerid"),
        )


@dataclass
class Login:
    """Credentials sent to sign in."""

    username: str = ""
    pin: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "Login":
        data = _mapping(data)
        return cls(username=_str(data, "username"), pin=_int(data, "pin"))