"""Interactive terminal front end for the budgeting server."""

import argparse
import sys
from dataclasses import fields
from typing import Any, Callable, Optional, TextIO

from monefy.client.api import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ApiClient
from monefy.models import BankAccount, Bucket, LineItem, UserAccount

METHODS = ("CREATE", "VIEW", "UPDATE", "DELETE")
ENTITIES = ("BANK", "BUCKET", "LINEITEM")

_RULE = "-----------------------"
_UNEXPECTED = "Unexpected error occured. Try again!"


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    return str(value)


def _show(value: Any) -> str:
    """Render a record, or a list of records, as {field field ...} groups."""
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_show(item) for item in value) + "]"
    if hasattr(value, "__dataclass_fields__"):
        return "{" + " ".join(_format_value(getattr(value, f.name)) for f in fields(value)) + "}"
    return _format_value(value)


def _to_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        return 0


def _to_float(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        return 0.0


class Console:
    """Prompts for sign-in and record operations and carries them out through a client.

    Reading past the end of the input ends the session.
    """

    def __init__(self, client: ApiClient, stdin: TextIO, stdout: TextIO) -> None:
        self.client = client
        self._in = stdin
        self._out = stdout
        self._pending = ""
        self.banks: list[BankAccount] = []
        self.buckets: list[Bucket] = []
        self.line_items: list[LineItem] = []
        self._handlers: dict[tuple[str, str], Callable[[int], None]] = {
            ("CREATE", "BANK"): self._create_bank,
            ("CREATE", "BUCKET"): self._create_bucket,
            ("CREATE", "LINEITEM"): self._create_line_item,
            ("VIEW", "BANK"): self._view_banks,
            ("VIEW", "BUCKET"): self._view_buckets,
            ("VIEW", "LINEITEM"): self._view_line_items,
            ("UPDATE", "BANK"): self._update_bank,
            ("UPDATE", "BUCKET"): self._update_bucket,
            ("UPDATE", "LINEITEM"): self._update_line_item,
            ("DELETE", "BANK"): self._delete_bank,
            ("DELETE", "BUCKET"): self._delete_bucket,
            ("DELETE", "LINEITEM"): self._delete_line_item,
        }

    # Input and output

    def _say(self, text: str = "") -> None:
        self._out.write(text + "\n")
        self._out.flush()

    def _ask(self, prompt: str) -> None:
        self._out.write(prompt)
        self._out.flush()

    def _token(self) -> str:
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                parts = stripped.split(maxsplit=1)
                self._pending = parts[1] if len(parts) > 1 else ""
                return parts[0]
            line = self._in.readline()
            if not line:
                raise EOFError
            self._pending = line

    def _line(self) -> str:
        rest, self._pending = self._pending, ""
        if rest.strip():
            return rest.rstrip("\r\n")
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _choose(self, prompt: str, options: tuple[str, ...], error: str) -> str:
        while True:
            self._ask(prompt)
            self._say(_show(list(options)))
            choice = self._token()
            if choice in options:
                return choice
            self._say(error)

    # Session

    def run(self) -> None:
        """Serve users one after another until the input runs out."""
        try:
            while True:
                self._say(_RULE)
                self._say("Welcome to Monefy\t")
                self._say(_RULE)
                if self._offer_account():
                    continue
                user = self.sign_in()
                if user is None:
                    continue
                self._say(_show(user))
                self.banks = self.client.get_banks(user.id)
                self.buckets = self.client.get_buckets(user.id)
                self.line_items = self.client.get_line_items(user.id)
                while True:
                    self._say(_RULE)
                    self.process(user.id)
                    self._say(_RULE)
        except EOFError:
            return

    def _offer_account(self) -> bool:
        """Offer to register; True if an account was created."""
        self._ask("Would you like to create an account? (Y/N) ")
        if self._token() != "Y":
            return False
        self._ask("What's your name: ")
        name = self._line()
        self._ask("What's your desired username: ")
        username = self._line()
        self._ask("What's your desired pin: ")
        pin = _to_int(self._token())
        if self.client.create_user(username, name, pin):
            self._say("User Account Created!")
            return True
        self._say("Invalid Request! Make sure to use an unused username and valid PIN.")
        return False

    def sign_in(self) -> Optional[UserAccount]:
        """Ask for credentials; return the signed-in user, or None if refused."""
        self._ask("Enter your username: ")
        username = self._token()
        self._ask("Enter your PIN: ")
        pin = _to_int(self._token())
        if not self.client.authorize(username, pin):
            self._say("---------------------------")
            self._say("Unauthorized. Try Again\t")
            self._say("---------------------------")
            return None
        return self.client.get_user(username, pin)

    def process(self, owner_id: int) -> None:
        """Ask for one operation on one kind of record and carry it out."""
        method = self._choose("What would you like to do? ", METHODS, "Invalid Method, Try Again!")
        entity = self._choose(
            "What record would you like to see? ", ENTITIES, "Invalid Record Type, Try Again!"
        )
        self._handlers[(method, entity)](owner_id)

    # Listing helpers

    def _refresh_banks(self, owner_id: int) -> None:
        self.banks = self.client.get_banks(owner_id)
        self._say(_show(self.banks))

    def _refresh_buckets(self, owner_id: int) -> None:
        self.buckets = self.client.get_buckets(owner_id)
        self._say(_show(self.buckets))

    def _refresh_line_items(self, owner_id: int) -> None:
        self.line_items = self.client.get_line_items(owner_id)
        self._say(_show(self.line_items))

    # Create

    def _create_bank(self, owner_id: int) -> None:
        self._ask("Creating Bank. \nName: ")
        name = self._token()
        if self.client.create_bank(name, owner_id):
            self._say("Bank created!")
            self._say("[Bank Id, Bank Name, Bank Owner Id]")
            self._say("Your Banks: ")
            self._refresh_banks(owner_id)
        else:
            self._say(_UNEXPECTED)

    def _create_bucket(self, owner_id: int) -> None:
        self._ask("Creating Bucket. \nName: ")
        name = self._token()
        if self.client.create_bucket(name, owner_id):
            self._say("Bucket created!")
            self._say("[Bucket Id, Bucket Name, Bucket Owner Id]")
            self._say("Your Buckets: ")
            self._refresh_buckets(owner_id)
        else:
            self._say(_UNEXPECTED)

    def _pick_id(self, label: str, records: list, prompt: str, error: str) -> int:
        valid = {record.id for record in records} | {0}
        while True:
            self._ask(f"Available {label}: ")
            self._say(_show(records))
            self._ask(prompt)
            choice = _to_int(self._token())
            if choice in valid:
                return choice
            self._say(error)

    def _create_line_item(self, owner_id: int) -> None:
        self._say("Creating Line Item Entry.")
        self._ask("Title: ")
        title = self._line()
        self._ask("Description: ")
        description = self._line()
        self._ask("Amount: ")
        amount = _to_float(self._token())
        bucket = self._pick_id(
            "Buckets", self.buckets, "Choose the Bucket Id: (0 for no bucket) ",
            "Invalid Bucket. Try again!",
        )
        bank = self._pick_id(
            "Banks", self.banks, "Choose the Bank Id: (0 for no bank) ",
            "Invalid Bank. Try again!",
        )
        if self.client.create_line_item(title, description, amount, bucket, bank, owner_id):
            self._say("Line Item created!")
            self._say("[Line Item Id, Title, Description, Amount, Bucket, Bank, Owner Id]")
            self._say("Your Line Items: ")
            self._refresh_line_items(owner_id)
        else:
            self._say(_UNEXPECTED)

    # View

    def _view_banks(self, owner_id: int) -> None:
        self._say("Your current banks: [Bank Id, Bank Name, Your ID]")
        self._refresh_banks(owner_id)

    def _view_buckets(self, owner_id: int) -> None:
        self._say("Your current buckets: [Bucket Id, Bucket Name, Your ID]")
        self._refresh_buckets(owner_id)

    def _view_line_items(self, owner_id: int) -> None:
        self._say(
            "Your current items: [Line Item Id, Name, Description, Amount, Bucket, Bank, Your ID]"
        )
        self._refresh_line_items(owner_id)

    # Update

    def _rename(self, records: list, kind: str) -> Optional[tuple[int, str]]:
        self._ask(f"Enter the {kind} Id for update: ")
        record_id = _to_int(self._token())
        record = next((r for r in records if r.id == record_id), None)
        if record is None:
            self._say("Invalid ID. Returning to main menu.")
            return None
        self._say(f"Your {kind} Name is {record.name}, change to: ")
        return record_id, self._line()

    def _update_bank(self, owner_id: int) -> None:
        self._view_banks(owner_id)
        choice = self._rename(self.banks, "Bank")
        if choice is None:
            return
        bank_id, name = choice
        if self.client.update_bank(bank_id, name, owner_id):
            self._say("Bank updated!")
            self._say("[Bank Id, Bank Name, Bank Owner Id]")
            self._say("Your Banks: ")
            self._refresh_banks(owner_id)
        else:
            self._say(_UNEXPECTED)

    def _update_bucket(self, owner_id: int) -> None:
        self._view_buckets(owner_id)
        choice = self._rename(self.buckets, "Bucket")
        if choice is None:
            return
        bucket_id, name = choice
        if self.client.update_bucket(bucket_id, name, owner_id):
            self._say("Bucket updated!")
            self._say("[Bucket Id, Bucket Name, Your ID]")
            self._say("Your Buckets: ")
            self._refresh_buckets(owner_id)
        else:
            self._say(_UNEXPECTED)

    def _update_line_item(self, owner_id: int) -> None:
        self._say("Not supported! Please perform delete then add operation instead.")
        self._say("Returning to main menu...")

    # Delete

    def _delete_bank(self, owner_id: int) -> None:
        self._view_banks(owner_id)
        self._ask("Enter the Bank Id for deletion: ")
        if self.client.delete_bank(_to_int(self._token())):
            self._say("Bank deleted!")
            self._say("[Bank Id, Bank Name, Bank Owner Id]")
            self._say("Your Banks: ")
            self._refresh_banks(owner_id)
        else:
            self._say(_UNEXPECTED)

    def _delete_bucket(self, owner_id: int) -> None:
        self._view_buckets(owner_id)
        self._ask("Enter the Bucket Id for deletion: ")
        if self.client.delete_bucket(_to_int(self._token())):
            self._say("Bucket deleted!")
            self._say("[Bucket Id, Bucket Name, Bucket Owner Id]")
            self._say("Your Buckets: ")
            self._refresh_buckets(owner_id)
        else:
            self._say(_UNEXPECTED)

    def _delete_line_item(self, owner_id: int) -> None:
        self._view_line_items(owner_id)
        self._ask("Enter the Line Item Id for deletion: ")
        if self.client.delete_line_item(_to_int(self._token())):
            self._say("LineItem deleted!")
            self._say("[LineItem Id, LineItem Name, LineItem Owner Id]")
            self._say("Your LineItems: ")
            self._refresh_line_items(owner_id)
        else:
            self._say(_UNEXPECTED)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive client against a budgeting server."""
    parser = argparse.ArgumentParser(description="Manage your budget interactively.")
    parser.add_argument("--url", default=DEFAULT_BASE_URL)
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    args = parser.parse_args(argv)

    console = Console(ApiClient(args.url, args.timeout), sys.stdin, sys.stdout)
    try:
        console.run()
    except (ConnectionError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())