"""Counting birds from a log of daily sightings."""

DAYS_PER_WEEK = 7


def total_bird_count(birds_per_day: list[int]) -> int:
    """Return the sum of all daily counts."""
    return sum(birds_per_day)


def birds_in_week(birds_per_day: list[int], week: int) -> int:
    """Return the total count for the given 1-based week.

    Raises IndexError if the log does not hold that whole week.
    """
    start = (week - 1) * DAYS_PER_WEEK
    days = birds_per_day[start:start + DAYS_PER_WEEK] if start >= 0 else []
    if len(days) < DAYS_PER_WEEK:
        raise IndexError(f"week {week} is not fully present in the log")
    return sum(days)


def fix_bird_count_log(birds_per_day: list[int]) -> list[int]:
    """Add one bird to every other day, starting with the first, in place."""
    birds_per_day[::2] = [count + 1 for count in birds_per_day[::2]]
    return birds_per_day