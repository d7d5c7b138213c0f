from __future__ import annotations

import random
import time

from bitdeck.engine.errors import InsufficientCards, InvalidCard
from bitdeck.engine.models import DECK_SIZE, DeckConfig, DeckSnapshot
from bitdeck.utils.cards import FULL_DECK_MASK, card_view, format_card, is_valid_card
from bitdeck.utils.log import get_logger


log = get_logger("bitdeck.deck")


class Deck:
    """A 52-card deck held as a bitmask pool plus an ordered peek buffer.

    Cards in the peek buffer have already left the pool; they are handed out
    first, in the order they were peeked. Every other draw picks a card
    uniformly from the pool using the deck's own generator.
    """

    def __init__(self, rng: random.Random | None = None, *, less_random: bool = False) -> None:
        self._rng = rng or random.Random()
        self._less_random = less_random
        self._mask = FULL_DECK_MASK
        self._remaining = DECK_SIZE
        self._peeked: list[int] = []

    @classmethod
    def from_config(cls, config: DeckConfig) -> Deck:
        return cls(random.Random(config.seed), less_random=config.less_random)

    @property
    def mask(self) -> int:
        return self._mask

    @property
    def remaining_count(self) -> int:
        return self._remaining

    @property
    def peeked(self) -> list[int]:
        return list(self._peeked)

    def cards_left(self) -> int:
        return self._remaining + len(self._peeked)

    def __len__(self) -> int:
        return self.cards_left()

    def __contains__(self, card: object) -> bool:
        if not isinstance(card, int) or not is_valid_card(card):
            return False
        return bool(self._mask & card) or card in self._peeked

    def reset(self) -> None:
        self._mask = FULL_DECK_MASK
        self._remaining = DECK_SIZE
        self._peeked.clear()
        log.debug("deck reset to %d cards", DECK_SIZE)

    def shuffle(self) -> None:
        """Return every peeked card to the pool, forgetting the peek order."""
        peeked, self._peeked = self._peeked, []
        for card in peeked:
            self.redeck(card)
        log.debug("shuffled %d peeked cards back into the pool", len(peeked))

    def redeck(self, card: int) -> None:
        if not is_valid_card(card):
            raise InvalidCard(card)
        if card in self:
            raise InvalidCard(card, f"{format_card(card)} is already in the deck.", code="CARD_ALREADY_IN_DECK")
        self._mask |= card
        self._remaining += 1
        log.debug("redecked %s", format_card(card))

    def draw_card(self) -> int:
        if self.cards_left() == 0:
            raise InsufficientCards("Cannot draw from an empty deck.")
        if self._peeked:
            return self._peeked.pop(0)
        return self._draw_random()

    def peek_cards(self, count: int) -> list[int]:
        """Reveal the next ``count`` cards without drawing them.

        Already-peeked cards keep their place; only the shortfall is drawn
        from the pool. The bound is checked against the pool size alone.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if self._remaining < count:
            raise InsufficientCards(f"Cannot peek {count} cards, only {self._remaining} remain in the pool.")

        while len(self._peeked) < count:
            self._peeked.append(self._draw_random())
        log.debug("peeked %d cards", count)
        return self._peeked[:count]

    def snapshot(self) -> DeckSnapshot:
        return DeckSnapshot(
            cards_left=self.cards_left(),
            remaining_count=self._remaining,
            mask=self._mask,
            peeked=[card_view(card) for card in self._peeked],
        )

    def _draw_random(self) -> int:
        if self._remaining == 0:
            raise InsufficientCards("The random pool is empty.")
        if self._less_random:
            self._rng.seed(int(time.time()))

        # k-th set bit, k uniform in [1, remaining]
        mask = self._mask
        for _ in range(self._rng.randrange(self._remaining)):
            mask &= mask - 1
        card = mask & -mask

        self._mask ^= card
        self._remaining -= 1
        return card
