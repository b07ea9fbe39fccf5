import pytest

from monefy.exercises.techpalace import add_border, cleanup_message, welcome_message


@pytest.mark.parametrize(
    "customer, expected",
    [
        ("Judy", "Welcome to the Tech Palace, JUDY"),
        ("lars", "Welcome to the Tech Palace, LARS"),
        ("Peter-James", "Welcome to the Tech Palace, PETER-JAMES"),
        ("MJ", "Welcome to the Tech Palace, MJ"),
    ],
)
def test_welcome_message(customer, expected):
    assert welcome_message(customer) == expected


@pytest.mark.parametrize(
    "message, stars, expected",
    [
        ("Welcome!", 10, "**********\nWelcome!\n**********"),
        ("Hi", 2, "**\nHi\n**"),
    ],
)
def test_add_border(message, stars, expected):
    assert add_border(message, stars) == expected


@pytest.mark.parametrize(
    "old, expected",
    [
        (
            "**************************\n*    BUY NOW, SAVE 10%   *\n**************************",
            "BUY NOW, SAVE 10%",
        ),
        ("**********\n*DISCOUNT*\n**********", "DISCOUNT"),
        ("*****\n SALE\n*****", "SALE"),
    ],
)
def test_cleanup_message(old, expected):
    assert cleanup_message(old) == expected