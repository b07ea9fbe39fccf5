"""First-turn decisions for a simplified game of blackjack."""

CARD_VALUES = {
    "ace": 11,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "jack": 10,
    "queen": 10,
    "king": 10,
}

STAND = "S"
HIT = "H"
SPLIT = "P"
WIN = "W"


def parse_card(card: str) -> int:
    """Return the value of a named card; unknown cards are worth 0."""
    return CARD_VALUES.get(card, 0)


def is_blackjack(card1: str, card2: str) -> bool:
    """Return True if the two cards add up to 21."""
    return parse_card(card1) + parse_card(card2) == 21


def large_hand(is_blackjack: bool, dealer_score: int) -> str:
    """Decide for hands worth more than 20 points."""
    if not is_blackjack:
        return SPLIT
    return STAND if dealer_score in (10, 11) else WIN


def small_hand(hand_score: int, dealer_score: int) -> str:
    """Decide for hands worth 20 points or less."""
    if hand_score >= 17:
        return STAND
    if hand_score <= 11:
        return HIT
    return HIT if dealer_score >= 7 else STAND


def first_turn(card1: str, card2: str, dealer_card: str) -> str:
    """Return the decision for the first turn given the player's and dealer's cards."""
    hand_score = parse_card(card1) + parse_card(card2)
    dealer_score = parse_card(dealer_card)
    if hand_score > 20:
        return large_hand(is_blackjack(card1, card2), dealer_score)
    return small_hand(hand_score, dealer_score)