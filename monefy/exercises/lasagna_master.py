"""Timing and quantities for a layered lasagna recipe."""

DEFAULT_MINUTES_PER_LAYER = 2
NOODLES_PER_LAYER = 50
SAUCE_PER_LAYER = 0.2


def preparation_time(layers: list[str], preparation_time: int = 0) -> int:
    """Return the preparation time for the layers.

    A per-layer time of 0 means the default of two minutes per layer.
    """
    minutes_per_layer = preparation_time or DEFAULT_MINUTES_PER_LAYER
    return len(layers) * minutes_per_layer


def quantities(layers: list[str]) -> tuple[int, float]:
    """Return the grams of noodles and litres of sauce the layers need."""
    noodles = sum(NOODLES_PER_LAYER for layer in layers if layer == "noodles")
    sauce = sum((SAUCE_PER_LAYER for layer in layers if layer == "sauce"), 0.0)
    return noodles, sauce


def add_secret_ingredient(friend_list: list[str], my_list: list[str]) -> None:
    """Replace the last item of my_list with the last item of friend_list, in place."""
    my_list[-1] = friend_list[-1]


def scale_recipe(amounts: list[float], portion: int) -> list[float]:
    """Return the amounts of a two-portion recipe scaled to the given portions."""
    return [amount * portion / 2 for amount in amounts]