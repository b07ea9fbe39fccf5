"""Small list manipulations for a card trick."""

from typing import Optional


def _in_range(items: list[int], index: int) -> bool:
    return 0 <= index < len(items)


def get_item(items: list[int], index: int) -> Optional[int]:
    """Return the card at a non-negative index, or None if there is none."""
    return items[index] if _in_range(items, index) else None


def set_item(items: list[int], index: int, value: int) -> list[int]:
    """Overwrite the card at index, or append it if the index is out of range."""
    if _in_range(items, index):
        items[index] = value
    else:
        items.append(value)
    return items


def prefilled_slice(value: int, length: int) -> list[int]:
    """Return a list of the given length filled with value; empty for length <= 0."""
    return [value] * max(length, 0)


def remove_item(items: list[int], index: int) -> list[int]:
    """Remove the card at index in place; out-of-range indices leave the list as is."""
    if _in_range(items, index):
        del items[index]
    return items