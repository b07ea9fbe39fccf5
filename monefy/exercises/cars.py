"""Production figures for a car assembly line."""

COST_PER_CAR = 10_000
COST_PER_TEN_CARS = 95_000


def _valid_rate(success_rate: float) -> bool:
    return 0 <= success_rate <= 100


def calculate_working_cars_per_hour(production_rate: int, success_rate: float) -> float:
    """Return working cars per hour; 0 if the success rate is outside 0-100."""
    if not _valid_rate(success_rate):
        return 0.0
    return float(production_rate) * (success_rate / 100)


def calculate_working_cars_per_minute(production_rate: int, success_rate: float) -> int:
    """Return whole working cars per minute; 0 if the success rate is outside 0-100."""
    if not _valid_rate(success_rate):
        return 0
    return int(float(production_rate) * (success_rate / 100) / 60)


def calculate_cost(cars_count: int) -> int:
    """Return the cost of producing cars, with groups of ten at a discount."""
    batches, remainder = divmod(cars_count, 10)
    return batches * COST_PER_TEN_CARS + remainder * COST_PER_CAR