from __future__ import annotations

from collections.abc import Iterator

from bitdeck.engine.errors import InvalidCard
from bitdeck.engine.models import DECK_SIZE, CardView, Suit, Value


NUM_SUITS = len(Suit)
NUM_VALUES = len(Value)
FULL_DECK_MASK = (1 << DECK_SIZE) - 1


def is_valid_card(card: int) -> bool:
    return 0 < card <= FULL_DECK_MASK and card & (card - 1) == 0


def _require_card(card: int) -> None:
    if not is_valid_card(card):
        raise InvalidCard(card)


def encode_card(suit: Suit, value: Value) -> int:
    return 1 << (int(suit) * NUM_VALUES + int(value))


def card_index(card: int) -> int:
    _require_card(card)
    return card.bit_length() - 1


def get_suit(card: int) -> Suit:
    """Suit of a card, taken from the 13-bit band its bit falls in."""
    _require_card(card)
    for suit in Suit:
        if card < 1 << (NUM_VALUES * (int(suit) + 1)):
            return suit
    raise InvalidCard(card)


def get_value(card: int) -> Value:
    """Value of a card, taken from its bit offset within the suit band.

    The card is shifted down a band at a time until it lands in the lowest
    band, then the offset is counted from the Ace bit.
    """
    _require_card(card)
    while card >= 1 << NUM_VALUES:
        card >>= NUM_VALUES

    offset = 0
    probe = 1
    while probe != card:
        probe <<= 1
        offset += 1
    return Value(offset)


def suit_str(card: int) -> str:
    return get_suit(card).label


def value_str(card: int) -> str:
    return get_value(card).label


def format_card(card: int) -> str:
    return f"{suit_str(card)}, {value_str(card)}"


def card_view(card: int) -> CardView:
    return CardView(
        index=card_index(card),
        suit=get_suit(card),
        value=get_value(card),
        label=format_card(card),
    )


def all_cards() -> list[int]:
    return [1 << index for index in range(DECK_SIZE)]


def iter_hand(hand: int) -> Iterator[int]:
    """Yield the cards of a hand mask in ascending bit order (Hearts Ace first)."""
    card = 1
    for _ in range(DECK_SIZE):
        if card & hand:
            yield card
        card <<= 1
