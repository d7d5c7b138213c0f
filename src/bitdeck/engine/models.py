from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


DECK_SIZE = 52


class Suit(IntEnum):
    HEARTS = 0
    SPADES = 1
    DIAMONDS = 2
    CLUBS = 3

    @property
    def label(self) -> str:
        return self.name.title()


class Value(IntEnum):
    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12

    @property
    def label(self) -> str:
        return self.name.title()


class DeckConfig(BaseModel):
    seed: int | None = None
    less_random: bool = False

    model_config = ConfigDict(extra="forbid")


class DealConfig(BaseModel):
    peek_count: int = Field(default=5, ge=0, le=DECK_SIZE)
    num_hands: int = Field(default=2, ge=1)
    cards_per_hand: int = Field(default=26, ge=0)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _fits_in_one_deck(self) -> DealConfig:
        if self.num_hands * self.cards_per_hand > DECK_SIZE:
            raise ValueError(
                f"{self.num_hands} hands of {self.cards_per_hand} cards need more than {DECK_SIZE} cards",
            )
        return self


class CardView(BaseModel):
    index: int
    suit: Suit
    value: Value
    label: str

    model_config = ConfigDict(extra="forbid")


class HandView(BaseModel):
    player: int
    mask: int
    cards: list[CardView]

    model_config = ConfigDict(extra="forbid")


class DeckSnapshot(BaseModel):
    cards_left: int
    remaining_count: int
    mask: int
    peeked: list[CardView]

    model_config = ConfigDict(extra="forbid")


class DealResult(BaseModel):
    peeked: list[CardView]
    drawn: list[CardView]
    hands: list[HandView]
    cards_left: int

    model_config = ConfigDict(extra="forbid")
