"""Interest rates and balance growth for a savings account."""

import struct


def _single(value: float) -> float:
    """Round a float to single precision, as the rates are stored."""
    return struct.unpack("f", struct.pack("f", value))[0]


_RATE_HIGH = _single(2.475)
_RATE_MEDIUM = _single(1.621)
_RATE_LOW = _single(0.5)
_RATE_NEGATIVE = _single(3.213)


def interest_rate(balance: float) -> float:
    """Return the yearly interest rate, in percent, for a balance."""
    if balance >= 5000:
        return _RATE_HIGH
    if balance >= 1000:
        return _RATE_MEDIUM
    if balance >= 0:
        return _RATE_LOW
    return _RATE_NEGATIVE


def interest(balance: float) -> float:
    """Return the interest earned on a balance in one year."""
    return interest_rate(balance) / 100.0 * balance


def annual_balance_update(balance: float) -> float:
    """Return the balance after one year of interest."""
    return balance + interest(balance)


def years_before_desired_balance(balance: float, target_balance: float) -> int:
    """Return how many whole years it takes to reach the target balance.

    Raises ValueError if a non-positive balance would never reach the target.
    """
    if balance <= 0 and balance < target_balance:
        raise ValueError("a non-positive balance never grows to the target")
    years = 0
    while balance < target_balance:
        balance = annual_balance_update(balance)
        years += 1
    return years