from __future__ import annotations

from bitdeck.engine.deck import Deck
from bitdeck.engine.models import DealConfig, DealResult, HandView
from bitdeck.utils.cards import card_view, iter_hand
from bitdeck.utils.log import get_logger


log = get_logger("bitdeck.dealer")


def deal(deck: Deck, config: DealConfig | None = None) -> DealResult:
    """Peek ahead, then deal one card per hand per round in seat order."""
    config = config or DealConfig()

    peeked = deck.peek_cards(config.peek_count)
    hands = [0] * config.num_hands
    drawn: list[int] = []
    for _ in range(config.cards_per_hand):
        for seat in range(config.num_hands):
            card = deck.draw_card()
            drawn.append(card)
            hands[seat] |= card

    log.info(
        "dealt %d hands of %d cards after peeking %d, %d cards left",
        config.num_hands,
        config.cards_per_hand,
        config.peek_count,
        deck.cards_left(),
    )
    return DealResult(
        peeked=[card_view(card) for card in peeked],
        drawn=[card_view(card) for card in drawn],
        hands=[
            HandView(player=seat + 1, mask=mask, cards=[card_view(card) for card in iter_hand(mask)])
            for seat, mask in enumerate(hands)
        ],
        cards_left=deck.cards_left(),
    )
