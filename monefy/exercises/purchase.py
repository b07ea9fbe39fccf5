"""Advice for buying and reselling vehicles."""

LICENSED_KINDS = frozenset({"car", "truck"})


def needs_license(kind: str) -> bool:
    """Return whether driving this kind of vehicle needs a license."""
    return kind in LICENSED_KINDS


def choose_vehicle(option1: str, option2: str) -> str:
    """Recommend the option that comes first in dictionary order."""
    return f"{min(option1, option2)} is clearly the better choice."


def calculate_resell_price(original_price: float, age: float) -> float:
    """Return the resell price of a vehicle of the given age in years."""
    if age < 3:
        return original_price * 0.8
    if age < 10:
        return original_price * 0.7
    return original_price * 0.5