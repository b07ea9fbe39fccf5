"""Messages shown on the Tech Palace display."""


def welcome_message(customer: str) -> str:
    """Return a welcome message with the customer's name in capitals."""
    return f"Welcome to the Tech Palace, {customer.upper()}"


def add_border(welcome_msg: str, num_stars_per_line: int) -> str:
    """Frame a message between two lines of stars."""
    stars = "*" * num_stars_per_line
    return f"{stars}\n{welcome_msg}\n{stars}"


def cleanup_message(old_msg: str) -> str:
    """Strip the stars and surrounding whitespace from an old message."""
    return old_msg.replace("*", "").strip()