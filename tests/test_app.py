import json
import logging
import threading
import urllib.error
import urllib.request

import pytest

from monefy.server.app import Application, Response, configure_logging, make_server
from monefy.server.store import Store


@pytest.fixture
def store():
    with Store(":memory:") as s:
        yield s


@pytest.fixture
def app(store):
    return Application(store)


def _body(value):
    return json.dumps(value).encode()


def _create_user(app, username="ana", name="Ana", pin=1234):
    return app.handle("POST", "/users", _body({"username": username, "name": name, "pin": pin}))


def test_create_user_returns_user_with_id(app):
    response = _create_user(app)
    assert response.status == 200
    assert response.headers["Content-Type"] == "application/json"
    data = response.json()
    assert data["username"] == "ana"
    assert data["name"] == "Ana"
    assert data["pin"] == 1234
    assert data["id"] > 0


def test_duplicate_username_is_forbidden(app):
    _create_user(app)
    response = _create_user(app, name="Other")
    assert response.status == 403
    assert response.text == "Username already in use.\n"


def test_bad_json_is_bad_request(app):
    response = app.handle("POST", "/users", b"{not json")
    assert response.status == 400
    assert response.headers["Content-Type"].startswith("text/plain")


def test_empty_body_is_bad_request(app):
    response = app.handle("POST", "/banks", b"")
    assert response.status == 400
    assert response.text == "EOF\n"


@pytest.mark.parametrize("path", ["/users", "/banks", "/buckets", "/lineitems"])
@pytest.mark.parametrize("method", ["PUT", "DELETE"])
def test_collection_writes_not_allowed(app, path, method):
    response = app.handle(method, path, b"")
    assert response.status == 405
    assert response.text == "Not allowed!\n"


def test_post_on_item_not_allowed(app):
    response = app.handle("POST", "/bank/1", _body({"name": "x"}))
    assert response.status == 405


def test_list_users_round_trip(app):
    created = _create_user(app).json()
    response = app.handle("GET", "/users")
    assert response.status == 200
    assert response.json() == [created]


def test_get_missing_user_is_not_found(app):
    response = app.handle("GET", "/user/42")
    assert response.status == 404
    assert response.text == "Not Found!\n"


def test_get_user_by_id_returns_list(app):
    created = _create_user(app).json()
    response = app.handle("GET", f"/user/{created['id']}")
    assert response.json() == [created]


def test_item_route_ignores_trailing_text(app):
    created = _create_user(app).json()
    response = app.handle("GET", f"/user/{created['id']}extra")
    assert response.json() == [created]


def test_bank_create_update_delete(app):
    bank = app.handle("POST", "/banks", _body({"name": "Savings", "ownerid": 7})).json()
    assert bank["name"] == "Savings"
    assert bank["ownerid"] == 7

    updated = app.handle("PUT", f"/bank/{bank['id']}", _body({"name": "Checking", "ownerid": 7}))
    assert updated.json()["id"] == bank["id"]
    assert app.handle("GET", f"/bank/{bank['id']}").json()[0]["name"] == "Checking"

    removed = app.handle("DELETE", f"/bank/{bank['id']}").json()
    assert removed["name"] == "Checking"
    assert app.handle("GET", f"/bank/{bank['id']}").status == 404


def test_update_keeps_owner(app):
    bucket = app.handle("POST", "/buckets", _body({"name": "Food", "ownerid": 3})).json()
    app.handle("PUT", f"/bucket/{bucket['id']}", _body({"name": "Groceries", "ownerid": 9}))
    stored = app.handle("GET", f"/bucket/{bucket['id']}").json()[0]
    assert stored["ownerid"] == 3
    assert stored["name"] == "Groceries"


def test_delete_missing_record_is_server_error(app):
    response = app.handle("DELETE", "/bucket/99")
    assert response.status == 500


def test_line_item_without_bucket_or_bank(app):
    payload = {"title": "Lunch", "description": "Noodles", "amount": 12.5,
               "bucket": None, "bank": None, "ownerid": 1}
    created = app.handle("POST", "/lineitems", _body(payload)).json()
    listed = app.handle("GET", "/lineitems").json()
    assert listed == [created]
    assert created["bucket"] == 0
    assert created["bank"] == 0
    assert created["amount"] == 12.5


def test_integral_amount_is_encoded_without_fraction(app):
    payload = {"title": "Rent", "description": "", "amount": 100.0, "ownerid": 1}
    response = app.handle("POST", "/lineitems", _body(payload))
    assert '"amount":100,' in response.text


def test_html_characters_are_escaped(app):
    response = app.handle("POST", "/banks", _body({"name": "A&B <co>", "ownerid": 1}))
    assert "&" not in response.text
    assert "<" not in response.text
    assert response.json()["name"] == "A&B <co>"


def test_authorize_success_and_failure(app):
    created = _create_user(app).json()
    ok = app.handle("POST", "/authorize", _body({"username": "ana", "pin": 1234}))
    assert ok.status == 200
    assert ok.json() == created

    bad = app.handle("POST", "/authorize", _body({"username": "ana", "pin": 1}))
    assert bad.status == 404
    assert bad.text == "Not Found\n"


def test_authorize_only_accepts_post(app):
    assert app.handle("GET", "/authorize").status == 405


def test_unknown_path_is_empty_ok(app):
    response = app.handle("GET", "/nowhere")
    assert response == Response(200)


def test_configure_logging_writes_file(tmp_path):
    path = tmp_path / "log.txt"
    log = configure_logging(str(path))
    try:
        log.info("hello there")
        for handler in log.handlers:
            handler.flush()
    finally:
        for handler in list(log.handlers):
            log.removeHandler(handler)
            handler.close()
        log.setLevel(logging.NOTSET)
    text = path.read_text()
    assert "INFO: " in text
    assert "hello there" in text


def test_http_server_round_trip(app):
    server = make_server(app, "127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    base = f"http://127.0.0.1:{server.server_address[1]}"
    try:
        request = urllib.request.Request(
            base + "/banks",
            data=_body({"name": "Savings", "ownerid": 2}),
            method="POST",
            headers={"Content-Type": "application/json"},
        )
        with urllib.request.urlopen(request, timeout=5) as resp:
            created = json.loads(resp.read())
        with urllib.request.urlopen(base + "/banks?x=1", timeout=5) as resp:
            listed = json.loads(resp.read())
        assert listed == [created]

        with pytest.raises(urllib.error.HTTPError) as info:
            urllib.request.urlopen(base + "/bank/999", timeout=5)
        assert info.value.code == 404
        info.value.close()
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)