from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Set
import logging
from logging import getLogger

from cribbage_calc.cards import Card
from cribbage_calc.constants import FIFTEEN, HAND_SIZE, JACK

logger = getLogger(__name__)

MIN_RUN = 3


class InvalidHandSize(ValueError):
    pass


class InvalidStarter(ValueError):
    pass


@dataclass(frozen=True)
class HandScore:
    fifteens: int
    multiples: int
    runs: int
    flushes: int
    nobs: int

    @property
    def total(self) -> int:
        return self.fifteens + self.multiples + self.runs + self.flushes + self.nobs


def power_set(cards: Iterable[Card]) -> Set[FrozenSet[Card]]:
    """
    Every subset of `cards`, including the empty one (2**n subsets).
    Bit i of the mask selects the i-th card, so there is no recursion.
    """
    items = list(dict.fromkeys(cards))
    n = len(items)
    subsets = set()
    for mask in range(1 << n):
        subsets.add(frozenset(items[i] for i in range(n) if mask >> i & 1))
    return subsets


def cribbage_value(card: Card) -> int:
    return card.value


def score_fifteens(combinations: Iterable[FrozenSet[Card]]) -> int:
    """2 points for every combination whose values add up to exactly 15."""
    return sum(2 for combo in combinations if sum(cribbage_value(c) for c in combo) == FIFTEEN)


def score_multiples(cards: Iterable[Card]) -> int:
    # k cards of one rank make C(k, 2) pairs worth 2 each: k*k - k
    counts = Counter(c.rank for c in cards)
    return sum(k * k - k for k in counts.values())


def is_run(combo: Iterable[Card]) -> bool:
    ranks = sorted(c.rank for c in combo)
    if len(ranks) < MIN_RUN:
        return False
    return all(b - a == 1 for a, b in zip(ranks, ranks[1:]))


def score_runs(combinations: Iterable[FrozenSet[Card]]) -> int:
    """
    Points for runs of three or more consecutive ranks.

    Only the longest run length present is counted. Every distinct
    combination of that length is a separate run (2-3-3-4-5 holds two runs
    of four and scores 8), while the shorter runs inside them score nothing.
    """
    by_size: dict[int, int] = {}
    for combo in combinations:
        if len(combo) >= MIN_RUN and is_run(combo):
            by_size[len(combo)] = by_size.get(len(combo), 0) + len(combo)
    if not by_size:
        return 0
    return by_size[max(by_size)]


def score_flushes(hand: Iterable[Card], starter: Card) -> int:
    # 3 hand cards + starter is never a flush
    suits = {c.suit for c in hand}
    if len(suits) != 1:
        return 0
    return 5 if starter.suit in suits else 4


def score_nobs(hand: Iterable[Card], starter: Card) -> int:
    return 1 if any(c.rank == JACK and c.suit == starter.suit for c in hand) else 0


def _validate(hand: Iterable[Card], starter: Card | None) -> FrozenSet[Card]:
    hand_cards = list(hand)
    cards = frozenset(hand_cards)
    if len(cards) != len(hand_cards):
        raise InvalidHandSize(f"Hand contains duplicate cards: {sorted(str(c) for c in hand_cards)}")
    if len(cards) != HAND_SIZE:
        raise InvalidHandSize(f"Hand must have exactly {HAND_SIZE} cards, got {len(cards)}")
    if starter is None:
        raise InvalidStarter("A starter card is required")
    if not isinstance(starter, Card):
        raise InvalidStarter(f"Starter must be a Card, got {starter!r}")
    if starter in cards:
        raise InvalidStarter(f"Starter {starter} is already in the hand")
    return cards


def score_breakdown(hand: Iterable[Card], starter: Card | None) -> HandScore:
    cards = _validate(hand, starter)
    with_starter = cards | {starter}
    combinations = power_set(with_starter)
    score = HandScore(
        fifteens=score_fifteens(combinations),
        multiples=score_multiples(with_starter),
        runs=score_runs(combinations),
        flushes=score_flushes(cards, starter),
        nobs=score_nobs(cards, starter),
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Scored %s + %s: %s", " ".join(str(c) for c in sorted(cards)), starter, score)
    return score


def total_points(hand: Iterable[Card], starter: Card | None) -> int:
    """
    Points for a four card hand counted with the starter.

    Raises InvalidHandSize unless the hand holds exactly four distinct cards,
    and InvalidStarter when the starter is missing or already in the hand.
    """
    return score_breakdown(hand, starter).total
