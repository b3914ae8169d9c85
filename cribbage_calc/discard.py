"""Discard advice: average hand points for every way of discarding to the crib.

Each option keeps 4 of the dealt cards. Its value is the mean of
total_points over every starter that could still be cut, i.e. every card of
the deck the player has not seen (46 starters for 6 dealt cards, 47 for 5).
The crib and the play are not taken into account.
"""
from __future__ import annotations

import multiprocessing as mp
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, List, Sequence, Tuple
from logging import getLogger

import numpy as np
import pandas as pd

from cribbage_calc.cards import Card, get_full_deck
from cribbage_calc.constants import ACE, DEALT_CARDS, FIVE, HAND_SIZE
from cribbage_calc.scoring import total_points

logger = getLogger(__name__)

FIVE_NOTE = "*"
ACE_NOTE = "**"


@dataclass(frozen=True)
class DiscardOption:
    discards: Tuple[Card, ...]
    kept: Tuple[Card, ...]
    average: float

    @property
    def label(self) -> str:
        return " and ".join(c.name for c in self.discards)

    @property
    def note(self) -> str:
        notes = []
        if any(c.rank == FIVE for c in self.discards):
            notes.append(FIVE_NOTE)
        if any(c.rank == ACE for c in self.discards):
            notes.append(ACE_NOTE)
        return " ".join(notes)


def dealt_card_count(num_players: int) -> int:
    if num_players not in DEALT_CARDS:
        raise ValueError(f"Cribbage is played by 2 to 4 players, got {num_players}")
    return DEALT_CARDS[num_players]


def get_discard_options(dealt: Sequence[Card]) -> list[tuple[list[Card], list[Card]]]:
    """
    Given 5 or 6 dealt cards, return all possible (cards_to_keep, crib_cards) pairs,
    where cards_to_keep is a list of 4 cards and crib_cards is the 1 or 2 cards put in the crib.
    """
    if len(dealt) not in set(DEALT_CARDS.values()):
        raise ValueError(f"Dealt hand must have 5 or 6 cards, got {len(dealt)}")
    if len(set(dealt)) != len(dealt):
        raise ValueError("Dealt hand contains duplicate cards")
    ordered = sorted(dealt)
    all_combos = []
    for kept in combinations(ordered, HAND_SIZE):
        crib = [c for c in ordered if c not in kept]
        all_combos.append((list(kept), crib))
    return all_combos


def possible_starters(seen: Iterable[Card]) -> List[Card]:
    seen_set = set(seen)
    return [c for c in get_full_deck() if c not in seen_set]


def average_points(kept: Sequence[Card], dealt: Sequence[Card]) -> float:
    starters = possible_starters(dealt)
    points = np.fromiter((total_points(kept, s) for s in starters), dtype=np.float64, count=len(starters))
    return float(points.mean())


def _score_option(task: tuple[list[Card], list[Card], list[Card]]) -> DiscardOption:
    kept, discards, dealt = task
    return DiscardOption(discards=tuple(discards), kept=tuple(kept), average=average_points(kept, dealt))


def rank_discards(dealt: Sequence[Card], workers: int = 1) -> list[DiscardOption]:
    """Score every discard option, best average first."""
    dealt = list(dealt)
    tasks = [(kept, crib, dealt) for kept, crib in get_discard_options(dealt)]
    logger.info(
        "Ranking %d discard options for %s over %d starters",
        len(tasks), " ".join(str(c) for c in sorted(dealt)), len(possible_starters(dealt)),
    )
    if workers > 1:
        ctx = mp.get_context("spawn")
        with ctx.Pool(processes=min(workers, len(tasks))) as pool:
            options = pool.map(_score_option, tasks)
    else:
        options = [_score_option(t) for t in tasks]
    options.sort(key=lambda o: (-o.average, [str(c) for c in o.discards]))
    return options


def ranking_table(options: Iterable[DiscardOption]) -> pd.DataFrame:
    """
    Tabulate ranked options. Options whose averages agree to 2 decimals share
    a place, and the next place skips accordingly (1, 1, 3).
    """
    df = pd.DataFrame(
        [{"discards": o.label, "average": round(o.average, 2), "note": o.note} for o in options],
        columns=["discards", "average", "note"],
    )
    df = df.sort_values("average", ascending=False, kind="stable").reset_index(drop=True)
    df.insert(0, "place", df["average"].rank(method="min", ascending=False).astype(int))
    return df
