"""Decisions for Annalyn's rescue mission, based on who is awake."""


def can_fast_attack(knight_is_awake: bool) -> bool:
    """A fast attack works only while the knight is asleep."""
    return not knight_is_awake


def can_spy(knight_is_awake: bool, archer_is_awake: bool, prisoner_is_awake: bool) -> bool:
    """Spying works if at least one of the characters is awake."""
    return knight_is_awake or archer_is_awake or prisoner_is_awake


def can_signal_prisoner(archer_is_awake: bool, prisoner_is_awake: bool) -> bool:
    """The prisoner can be signalled if awake while the archer sleeps."""
    return prisoner_is_awake and not archer_is_awake


def can_free_prisoner(
    knight_is_awake: bool,
    archer_is_awake: bool,
    prisoner_is_awake: bool,
    pet_dog_is_present: bool,
) -> bool:
    """The prisoner can be freed with the dog while the archer sleeps,
    or without it if only the prisoner is awake."""
    if archer_is_awake:
        return False
    return pet_dog_is_present or (prisoner_is_awake and not knight_is_awake)