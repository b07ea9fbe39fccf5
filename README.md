# monefy

A small personal expense tracker. It keeps user accounts, bank accounts,
buckets (spending categories) and line items (expense entries) in an SQLite
database behind a JSON-over-HTTP server, and comes with an interactive
console client for working with them. It has no dependencies beyond the
Python standard library (Python 3.10 or later).

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
monefy-server
```

Options:

| Option       | Default      | Meaning                                   |
|--------------|--------------|-------------------------------------------|
| `--host`     | all addresses | address to listen on                     |
| `--port`     | `9000`       | port to listen on                         |
| `--database` | `monefy.db`  | SQLite database file (created if missing) |
| `--log`      | `logs.txt`   | file that log records are appended to     |

The server answers JSON requests on these paths:

| Path               | Methods                  |
|--------------------|--------------------------|
| `/users`           | `GET`, `POST`            |
| `/user/<id>`       | `GET`, `PUT`, `DELETE`   |
| `/banks`           | `GET`, `POST`            |
| `/bank/<id>`       | `GET`, `PUT`, `DELETE`   |
| `/buckets`         | `GET`, `POST`            |
| `/bucket/<id>`     | `GET`, `PUT`, `DELETE`   |
| `/lineitems`       | `GET`, `POST`            |
| `/lineitem/<id>`   | `GET`, `PUT`, `DELETE`   |
| `/authorize`       | `POST`                   |

- `PUT` and `DELETE` on a collection path, `POST` on a single-record path,
  and anything but `POST` on `/authorize` are refused with
  `405 Method Not Allowed`. Other methods, and paths that match no route,
  get an empty `200`.
- A body that is empty or not a valid JSON record gives `400 Bad Request`.
- Creating a user with a username that is already taken gives
  `403 Forbidden`.
- `GET` on a single-record path returns a JSON list holding that record, or
  `404 Not Found` if there is none. `/authorize` returns the matching user,
  or `404 Not Found`.
- `PUT` on a bank or bucket changes only its name; on a line item it
  changes everything but the owner. `DELETE` returns the removed record.

Records travel as JSON objects: users as `id`, `username`, `name`, `pin`;
banks and buckets as `id`, `name`, `ownerid`; line items as `id`, `title`,
`description`, `amount`, `bucket`, `bank`, `ownerid`, where a `bucket` or
`bank` of `0` means none.

## Running the client

With the server running:

```
monefy-client
```

Options are `--url` (default `http://localhost:9000`) and `--timeout` in
seconds (default `1.0`).

The client offers to create an account, then asks for a username and PIN.
Once signed in it loops over the operations `CREATE`, `VIEW`, `UPDATE` and
`DELETE` on the record types `BANK`, `BUCKET` and `LINEITEM`, showing only
your own records. A line item can be attached to one of your buckets and
one of your banks, or to neither by choosing `0`. The client does not
update line items: delete one and create it again instead. The session ends
when the input runs out.

## Using the pieces from Python

`monefy.client.api.ApiClient` wraps the HTTP API:

```python
from monefy.client.api import ApiClient

client = ApiClient("http://localhost:9000", 1.0)
if client.authorize("alice", 1234):
    user = client.get_user("alice", 1234)
    print(client.get_banks(user.id))
```

Network failures raise `ConnectionError`; replies that cannot be decoded
raise `ValueError`.

`monefy.server.store.Store` is the database itself and can be used
directly (pass `":memory:"` for a throwaway one); `monefy.server.app`
provides `Application`, whose `handle(method, path, body)` answers one
request without any network, and `make_server` to serve it over HTTP. The
record types (`UserAccount`, `BankAccount`, `Bucket`, `LineItem`, `Login`)
live in `monefy.models`.

## What it does not do

PINs are stored and compared as plain numbers, and the server has no
sessions or access control: any caller can list, change or delete any
record. It is meant for a single trusted machine, not for exposure to a
network.

## Practice exercises

`monefy.exercises` holds small, self-contained modules that are independent
of the tracker: `annalyn`, `birdwatcher`, `blackjack`, `booking`, `cards`,
`cars`, `gross`, `greeting`, `interest`, `lasagna`, `lasagna_master`,
`partyrobot`, `purchase`, `speed`, `techpalace` and `weather`. Each has its
own tests.