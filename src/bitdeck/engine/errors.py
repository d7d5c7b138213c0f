from __future__ import annotations


class DeckError(Exception):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class InsufficientCards(DeckError):
    def __init__(self, message: str) -> None:
        super().__init__("INSUFFICIENT_CARDS", message)


class InvalidCard(DeckError):
    def __init__(self, card: int, message: str | None = None, code: str = "INVALID_CARD") -> None:
        super().__init__(code, message or f"{card:#x} is not a single card below bit 52.")
        self.card = card
