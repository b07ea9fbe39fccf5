"""Cooking times for a basic lasagna."""

OVEN_TIME = 40
MINUTES_PER_LAYER = 2


def remaining_oven_time(actual_minutes: int) -> int:
    """Return the minutes left in the oven after actual_minutes have passed."""
    return OVEN_TIME - actual_minutes


def preparation_time(number_of_layers: int) -> int:
    """Return the minutes needed to prepare the given number of layers."""
    return MINUTES_PER_LAYER * number_of_layers


def elapsed_time(number_of_layers: int, actual_minutes_in_oven: int) -> int:
    """Return the total minutes spent preparing and baking so far."""
    return preparation_time(number_of_layers) + actual_minutes_in_oven