"""Messages spoken by a party robot."""


def welcome(name: str) -> str:
    """Greet a guest by name."""
    return f"Welcome to my party, {name}!"


def happy_birthday(name: str, age: int) -> str:
    """Wish the birthday guest a happy birthday and announce their age."""
    return f"Happy birthday {name}! You are now {age} years old!"


def assign_table(name: str, table: int, neighbor: str, direction: str, distance: float) -> str:
    """Greet a guest and direct them to their table and neighbour."""
    return (
        f"{welcome(name)}\n"
        f"You have been assigned to table {table:03d}. Your table is {direction},"
        f" exactly {distance:.1f} meters from here.\n"
        f"You will be sitting next to {neighbor}."
    )