"""HTTP front end for the budgeting store: routes requests to records as JSON."""

import argparse
import json
import logging
import re
from dataclasses import dataclass, field, replace
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Callable, Optional
from urllib.parse import unquote, urlsplit

from monefy.models import BankAccount, Bucket, LineItem, Login, UserAccount
from monefy.server.store import DuplicateUsernameError, Store, StoreError

logger = logging.getLogger("monefy.server")

DEFAULT_PORT = 9000

_ITEM_PATH = re.compile(r"^/(user|bank|bucket|lineitem)/([+-]?\d+)")
_JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass
class Response:
    """The status, headers and body sent back for one request."""

    status: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")

    def json(self) -> Any:
        return json.loads(self.body)


class _HttpError(Exception):
    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


@dataclass(frozen=True)
class _Resource:
    label: str
    model: type
    create: Callable[[Any], Any]
    list_all: Callable[[], list]
    find: Callable[[int], list]
    update: Callable[[int, Any], Any]
    delete: Callable[[int], Any]
    strict_create: bool = False


def _number(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


def _plain(value: Any) -> Any:
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return {key: _number(item) for key, item in value.to_dict().items()}


def _encode(value: Any) -> bytes:
    text = json.dumps(_plain(value), separators=(",", ":"), ensure_ascii=False)
    for char, escape in (
        ("<", "\\u003c"),
        (">", "\\u003e"),
        ("&", "\\u0026"),
        ("\u2028", "\\u2028"),
        ("\u2029", "\\u2029"),
    ):
        text = text.replace(char, escape)
    return (text + "\n").encode("utf-8")


def _json_response(value: Any) -> Response:
    return Response(200, _encode(value), dict(_JSON_HEADERS))


def _error_response(status: int, message: str) -> Response:
    return Response(
        status,
        (message + "\n").encode("utf-8"),
        {"Content-Type": "text/plain; charset=utf-8", "X-Content-Type-Options": "nosniff"},
    )


def _decode(model: type, body: bytes) -> Any:
    if not body.strip():
        raise _HttpError(400, "EOF")
    try:
        return model.from_dict(json.loads(body))
    except ValueError as exc:
        logger.error("Internal Error Occured. %s", exc)
        raise _HttpError(400, str(exc)) from exc


def _not_allowed() -> _HttpError:
    logger.warning("Invalid Operation Requested. Ignoring request...")
    return _HttpError(405, "Not allowed!")


class Application:
    """Routes requests on /users, /banks, /buckets, /lineitems and /authorize to a store."""

    def __init__(self, store: Store) -> None:
        self._store = store
        users = _Resource("user", UserAccount, store.create_user, store.list_users,
                          store.find_users, store.update_user, store.delete_user,
                          strict_create=True)
        banks = _Resource("bank", BankAccount, store.create_bank, store.list_banks,
                          store.find_banks, store.update_bank, store.delete_bank)
        buckets = _Resource("bucket", Bucket, store.create_bucket, store.list_buckets,
                            store.find_buckets, store.update_bucket, store.delete_bucket)
        items = _Resource("line item", LineItem, store.create_line_item, store.list_line_items,
                          store.find_line_items, store.update_line_item, store.delete_line_item)
        self._collections = {
            "/users": users, "/banks": banks, "/buckets": buckets, "/lineitems": items,
        }
        self._items = {"user": users, "bank": banks, "bucket": buckets, "lineitem": items}

    def handle(self, method: str, path: str, body: bytes = b"") -> Response:
        """Answer one request; paths that match no route get an empty 200."""
        try:
            if path == "/authorize":
                return self._authorize(method, body)
            resource = self._collections.get(path)
            if resource is not None:
                return self._collection(resource, method, body)
            match = _ITEM_PATH.match(path)
            if match is not None:
                return self._item(self._items[match[1]], int(match[2]), method, body)
            return Response(200)
        except _HttpError as exc:
            return _error_response(exc.status, exc.message)

    def _collection(self, resource: _Resource, method: str, body: bytes) -> Response:
        if method == "POST":
            return self._create(resource, body)
        if method == "GET":
            try:
                records = resource.list_all()
            except StoreError as exc:
                logger.error("Internal Error Occured. %s", exc)
                raise _HttpError(500, str(exc)) from exc
            logger.info("Retrieved %s list.", resource.label)
            return _json_response(records)
        if method in ("PUT", "DELETE"):
            raise _not_allowed()
        return Response(200, b"", dict(_JSON_HEADERS))

    def _create(self, resource: _Resource, body: bytes) -> Response:
        record = _decode(resource.model, body)
        try:
            created = resource.create(record)
        except DuplicateUsernameError as exc:
            logger.error("Failed to create new user. Username in use.")
            raise _HttpError(403, "Username already in use.") from exc
        except StoreError as exc:
            logger.error("Internal Error Occured. %s", exc)
            if resource.strict_create:
                raise _HttpError(500, str(exc)) from exc
            created = replace(record, id=0)
        else:
            logger.info("New %s created.", resource.label)
        return _json_response(created)

    def _item(self, resource: _Resource, record_id: int, method: str, body: bytes) -> Response:
        if method == "GET":
            try:
                records = resource.find(record_id)
            except StoreError as exc:
                logger.error("Internal Error Occured. %s", exc)
                raise _HttpError(500, str(exc)) from exc
            if not records:
                logger.error("Requested %s not found.", resource.label)
                raise _HttpError(404, "Not Found!")
            logger.info("Retrieved information on a specific %s.", resource.label)
            return _json_response(records)
        if method == "POST":
            raise _not_allowed()
        if method == "PUT":
            record = _decode(resource.model, body)
            try:
                updated = resource.update(record_id, record)
            except StoreError as exc:
                logger.error("Internal Error Occured. %s", exc)
                updated = replace(record, id=record_id)
            else:
                logger.info("Updated information of a specific %s.", resource.label)
            return _json_response(updated)
        if method == "DELETE":
            try:
                removed = resource.delete(record_id)
            except StoreError as exc:
                logger.error("Internal Error Occured. %s", exc)
                raise _HttpError(500, str(exc)) from exc
            logger.info("Deleted a %s.", resource.label)
            return _json_response(removed)
        return Response(200, b"", dict(_JSON_HEADERS))

    def _authorize(self, method: str, body: bytes) -> Response:
        if method != "POST":
            raise _not_allowed()
        login = _decode(Login, body)
        try:
            user = self._store.authenticate(login.username, login.pin)
        except StoreError as exc:
            logger.error("Internal Error Occured. %s", exc)
            raise _HttpError(500, str(exc)) from exc
        logger.info("Authorization request received.")
        if user is None:
            logger.error("No user matches the credentials.")
            raise _HttpError(404, "Not Found")
        return _json_response(user)


def configure_logging(path: str) -> logging.Logger:
    """Append the server's log records to the file at path."""
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(
        "%(levelname)s: %(asctime)s %(filename)s:%(lineno)d: %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    ))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return logger


def make_server(app: Application, host: str = "", port: int = DEFAULT_PORT) -> ThreadingHTTPServer:
    """Return an HTTP server that passes every request to app."""

    class _Handler(BaseHTTPRequestHandler):
        def _dispatch(self) -> None:
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length > 0 else b""
            path = unquote(urlsplit(self.path).path)
            response = app.handle(self.command, path, body)
            self.send_response(response.status)
            for name, value in response.headers.items():
                self.send_header(name, value)
            self.send_header("Content-Length", str(len(response.body)))
            self.end_headers()
            if self.command != "HEAD":
                self.wfile.write(response.body)

        do_GET = do_POST = do_PUT = do_DELETE = _dispatch
        do_PATCH = do_HEAD = do_OPTIONS = _dispatch

        def log_message(self, format: str, *args: Any) -> None:
            logger.debug(format, *args)

    return ThreadingHTTPServer((host, port), _Handler)


def main(argv: Optional[list[str]] = None) -> int:
    """Serve the budgeting API until interrupted."""
    parser = argparse.ArgumentParser(description="Serve the budgeting API.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--database", default="monefy.db")
    parser.add_argument("--log", default="logs.txt")
    args = parser.parse_args(argv)

    configure_logging(args.log)
    logger.info("Starting the application...")
    with Store(args.database) as store:
        server = make_server(Application(store), args.host, args.port)
        logger.info("Handler Listening at :%d ...", args.port)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
        finally:
            server.server_close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())