"""Cribbage calculator.

Ranks every way of discarding to the crib by the average points the kept
hand scores over all starters that could be cut, or scores a single hand.

Usage:
  python scripts/rank_discards.py
  python scripts/rank_discards.py --cards 5C 5D JH 1S 4S KD --workers 4
  python scripts/rank_discards.py --score 5C 5S 5D JH 5H
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional
import logging

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from cribbage_calc.cards import Card, InvalidCardNotation, parse_card, parse_cards
from cribbage_calc.constants import DEALT_CARDS
from cribbage_calc.discard import ACE_NOTE, FIVE_NOTE, dealt_card_count, rank_discards, ranking_table
from cribbage_calc.logging_setup import configure_logging
from cribbage_calc.scoring import score_breakdown
from cribbage_calc.utils import build_rank_discards_parser

logger = logging.getLogger(__name__)

ENTER_PLAYERS = "Cribbage Calculator\n\nHow many players (2-4)? "
ENTER_CARDS = (
    "\nEach card is its value (1-10, J, Q or K) plus the suit (case insensitive)\n"
    "Examples:\n"
    "'1D': Ace of diamonds\n"
    "'4S': Four of spades\n"
    "'10C': Ten of clubs\n"
    "'KH': King of hearts\n"
    "Enter each of the cards in your hand one by one below and press enter:\n"
)


def read_players() -> int:
    answer = input(ENTER_PLAYERS).strip()
    while answer not in {str(n) for n in DEALT_CARDS}:
        answer = input("Invalid input. Try again: ").strip()
    return int(answer)


def read_cards(n: int) -> List[Card]:
    print(f"{n} cards to start")
    print(ENTER_CARDS)
    cards: List[Card] = []
    for i in range(1, n + 1):
        prompt = f"Card {i}: "
        while True:
            try:
                card = parse_card(input(prompt))
            except InvalidCardNotation:
                card = None
            if card is not None and card not in cards:
                break
            prompt = "Invalid or duplicate card, input again: "
        cards.append(card)
        print(f"{card.name}\n")
    return cards


def print_ranking(dealt: List[Card], workers: int) -> None:
    options = rank_discards(dealt, workers=workers)
    df = ranking_table(options)
    print("---Drop combinations by average points---")
    for row in df.itertuples(index=False):
        line = f"#{row.place}: {row.discards}: {row.average:.2f}"
        if row.note:
            line += f" ({row.note})"
        print(line)
    print()
    if df["note"].str.contains(FIVE_NOTE, regex=False).any():
        print(f"({FIVE_NOTE}) Consider keeping fives if you don't have the crib")
    if df["note"].str.contains(ACE_NOTE, regex=False).any():
        print(f"({ACE_NOTE}) Aces are good for the play round, consider keeping them if the points are close")


def print_score(cards: List[Card]) -> None:
    hand, starter = cards[:4], cards[4]
    score = score_breakdown(hand, starter)
    print(f"Hand: {' '.join(str(c) for c in hand)}  Starter: {starter}")
    print(f"  fifteens:  {score.fifteens}")
    print(f"  multiples: {score.multiples}")
    print(f"  runs:      {score.runs}")
    print(f"  flushes:   {score.flushes}")
    print(f"  nobs:      {score.nobs}")
    print(f"Total: {score.total}")


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_rank_discards_parser()
    args = ap.parse_args(argv)
    if args.workers < 1:
        ap.error("--workers must be at least 1")

    if args.score is not None:
        try:
            print_score(parse_cards(args.score))
        except ValueError as exc:
            ap.error(str(exc))
        return 0

    if args.cards is not None:
        try:
            dealt = parse_cards(args.cards)
        except InvalidCardNotation as exc:
            ap.error(str(exc))
        if args.players is not None and len(dealt) != dealt_card_count(args.players):
            ap.error(f"{args.players} players are dealt {dealt_card_count(args.players)} cards, got {len(dealt)}")
        if len(dealt) not in DEALT_CARDS.values():
            ap.error(f"Expected 5 or 6 dealt cards, got {len(dealt)}")
        if len(set(dealt)) != len(dealt):
            ap.error("Duplicate cards given")
    else:
        players = args.players if args.players is not None else read_players()
        dealt = read_cards(dealt_card_count(players))

    logger.info("Dealt: %s", " ".join(str(c) for c in dealt))
    print_ranking(dealt, args.workers)
    return 0


if __name__ == "__main__":
    # sitecustomize runs before the repo root is on sys.path
    configure_logging()
    sys.exit(main())
