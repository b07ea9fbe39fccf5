"""The classic greeting."""


def hello_world() -> str:
    """Return the greeting "Hello, World!"."""
    return "Hello, World!"