"""A grocery bill counted in the units of the gross store."""

from typing import Optional


def units() -> dict[str, int]:
    """Return the store's units of measure and how many items each holds."""
    return {
        "quarter_of_a_dozen": 3,
        "half_of_a_dozen": 6,
        "dozen": 12,
        "small_gross": 120,
        "gross": 144,
        "great_gross": 1728,
    }


def new_bill() -> dict[str, int]:
    """Return an empty bill."""
    return {}


def add_item(bill: dict[str, int], units: dict[str, int], item: str, unit: str) -> bool:
    """Add one unit of item to the bill; False if the unit is unknown."""
    size = units.get(unit, 0)
    if size == 0:
        return False
    bill[item] = bill.get(item, 0) + size
    return True


def remove_item(bill: dict[str, int], units: dict[str, int], item: str, unit: str) -> bool:
    """Remove one unit of item from the bill, dropping it when it reaches zero.

    Returns False if the item is absent, the unit unknown, or the bill too small.
    """
    quantity = bill.get(item, 0)
    size = units.get(unit, 0)
    if quantity == 0 or size == 0 or quantity < size:
        return False
    remaining = quantity - size
    if remaining:
        bill[item] = remaining
    else:
        del bill[item]
    return True


def get_item(bill: dict[str, int], item: str) -> Optional[int]:
    """Return the quantity of item on the bill, or None if there is none."""
    return bill.get(item) or None