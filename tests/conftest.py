from __future__ import annotations

import random

import pytest

from bitdeck.engine.deck import Deck


@pytest.fixture
def deck() -> Deck:
    return Deck(random.Random(7))
