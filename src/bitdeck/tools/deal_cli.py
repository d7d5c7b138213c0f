from __future__ import annotations

import argparse
import json
import sys

from pydantic import ValidationError

from bitdeck.engine.dealer import deal
from bitdeck.engine.deck import Deck
from bitdeck.engine.errors import DeckError
from bitdeck.engine.models import DealConfig, DealResult, DeckConfig
from bitdeck.utils.log import LOG_LEVEL, get_logger, setup_logging


log = get_logger("bitdeck.cli")


def render_text(result: DealResult) -> str:
    lines = ["Peeking"]
    lines.extend(f"  {card.label}" for card in result.peeked)
    lines.append("Drawing Cards:")
    lines.extend(f"  {card.label}" for card in result.drawn)
    for hand in result.hands:
        lines.append(f"Player {hand.player} Hand:")
        lines.extend(f"  {card.label}" for card in hand.cards)
    lines.append("")
    return "\n".join(lines) + "\n"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Peek at a fresh deck, then deal it into two hands")
    parser.add_argument("--seed", type=int, default=None, help="seed the deck's generator for a repeatable deal")
    parser.add_argument(
        "--less-random",
        action="store_true",
        help="reseed the generator from the wall clock before every random draw",
    )
    parser.add_argument("--peek", type=int, default=5, help="number of cards to peek before dealing")
    parser.add_argument("--json", action="store_true", help="print the deal as JSON")
    parser.add_argument("--log-level", default=LOG_LEVEL)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        deck_config = DeckConfig(seed=args.seed, less_random=args.less_random)
        deal_config = DealConfig(peek_count=args.peek)
    except ValidationError as exc:
        parser.error(str(exc))

    deck = Deck.from_config(deck_config)
    try:
        result = deal(deck, deal_config)
    except DeckError as exc:
        log.error("deal aborted: %s", exc.code)
        print(f"error: {exc.message}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2))
    else:
        sys.stdout.write(render_text(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
