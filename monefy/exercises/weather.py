"""Package weather reports the current weather condition at a location."""

# The condition most recently reported.
current_condition = ""

# The location most recently reported.
current_location = ""


def forecast(city: str, condition: str) -> str:
    """Record and describe the weather condition at a city."""
    global current_condition, current_location
    current_location, current_condition = city, condition
    return f"{current_location} - current weather condition: {current_condition}"