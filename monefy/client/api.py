"""HTTP client for the budgeting server's JSON API."""

import json
from typing import Any, Optional, TypeVar
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from monefy.models import BankAccount, Bucket, LineItem, UserAccount

DEFAULT_BASE_URL = "http://localhost:9000"
DEFAULT_TIMEOUT = 1.0

_Record = TypeVar("_Record", BankAccount, Bucket, LineItem)


class ApiClient:
    """Talks to the budgeting server over HTTP.

    Network failures raise ConnectionError; replies that cannot be decoded
    raise ValueError.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _send(self, method: str, path: str, payload: Optional[dict[str, Any]] = None) -> tuple[int, bytes]:
        data = None if payload is None else json.dumps(payload).encode("utf-8")
        headers = {"Content-Type": "application/json"} if data is not None else {}
        request = Request(self.base_url + path, data=data, method=method, headers=headers)
        try:
            with urlopen(request, timeout=self.timeout) as response:
                return response.status, response.read()
        except HTTPError as exc:
            try:
                return exc.code, exc.read()
            finally:
                exc.close()
        except (URLError, OSError) as exc:
            raise ConnectionError(f"cannot reach {self.base_url}: {exc}") from exc

    def _succeeds(self, method: str, path: str, payload: dict[str, Any]) -> bool:
        status, _ = self._send(method, path, payload)
        return status < 400

    def _owned(self, path: str, model: type, owner_id: int) -> list:
        _, body = self._send("GET", path)
        try:
            records = json.loads(body)
        except json.JSONDecodeError as exc:
            raise ValueError(f"undecodable reply from {path}: {exc}") from exc
        if records is None:
            return []
        if not isinstance(records, list):
            raise ValueError(f"expected a list from {path}")
        return [record for record in map(model.from_dict, records) if record.owner == owner_id]

    # Users

    def authorize(self, username: str, pin: int) -> bool:
        """Return whether the username and PIN belong to an account."""
        return self._succeeds("POST", "/authorize", {"username": username, "pin": pin})

    def get_user(self, username: str, pin: int) -> UserAccount:
        """Return the account signed in with the username and PIN."""
        status, body = self._send("POST", "/authorize", {"username": username, "pin": pin})
        if status >= 400:
            raise ValueError(f"authorization failed with status {status}")
        try:
            return UserAccount.from_dict(json.loads(body))
        except json.JSONDecodeError as exc:
            raise ValueError(f"undecodable user record: {exc}") from exc

    def create_user(self, username: str, name: str, pin: int) -> bool:
        """Register an account; False if the server refuses it."""
        return self._succeeds("POST", "/users", {"username": username, "name": name, "pin": pin})

    # Listing

    def get_banks(self, owner_id: int) -> list[BankAccount]:
        """Return the banks belonging to the owner."""
        return self._owned("/banks", BankAccount, owner_id)

    def get_buckets(self, owner_id: int) -> list[Bucket]:
        """Return the buckets belonging to the owner."""
        return self._owned("/buckets", Bucket, owner_id)

    def get_line_items(self, owner_id: int) -> list[LineItem]:
        """Return the line items belonging to the owner."""
        return self._owned("/lineitems", LineItem, owner_id)

    # Creating

    def create_bank(self, name: str, owner_id: int) -> bool:
        return self._succeeds("POST", "/banks", {"name": name, "ownerid": owner_id})

    def create_bucket(self, name: str, owner_id: int) -> bool:
        return self._succeeds("POST", "/buckets", {"name": name, "ownerid": owner_id})

    def create_line_item(
        self,
        title: str,
        description: str,
        amount: float,
        bucket: int,
        bank: int,
        owner_id: int,
    ) -> bool:
        """Record an expense; a bucket or bank of 0 is sent as none."""
        payload = {
            "title": title,
            "description": description,
            "amount": float(amount),
            "bucket": bucket or None,
            "bank": bank or None,
            "ownerid": owner_id,
        }
        return self._succeeds("POST", "/lineitems", payload)

    # Updating

    def update_bank(self, bank_id: int, name: str, owner_id: int) -> bool:
        return self._succeeds("PUT", f"/bank/{bank_id}", {"name": name, "ownerid": owner_id})

    def update_bucket(self, bucket_id: int, name: str, owner_id: int) -> bool:
        return self._succeeds("PUT", f"/bucket/{bucket_id}", {"name": name, "ownerid": owner_id})

    # Deleting: True once the server has answered, whatever its status.

    def delete_bank(self, bank_id: int) -> bool:
        self._send("DELETE", f"/bank/{bank_id}")
        return True

    def delete_bucket(self, bucket_id: int) -> bool:
        self._send("DELETE", f"/bucket/{bucket_id}")
        return True

    def delete_line_item(self, item_id: int) -> bool:
        self._send("DELETE", f"/lineitem/{item_id}")
        return True