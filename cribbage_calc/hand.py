from __future__ import annotations
from typing import Iterable, Iterator, Optional, Set
from logging import getLogger

from cribbage_calc.cards import Card
from cribbage_calc.scoring import total_points

logger = getLogger(__name__)


class CardNotInHand(ValueError):
    pass


class CribbageHand:
    """
    A player's hand of unique cards, not including the starter.

    The hand can hold any number of cards while it is being edited (a dealt
    hand has 5 or 6), but it must hold exactly 4 when it is scored.
    Scoring works on a snapshot, so the hand can be changed freely between
    calls.
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards: Set[Card] = set(cards) if cards is not None else set()

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __iter__(self) -> Iterator[Card]:
        return iter(sorted(self._cards))

    def __repr__(self) -> str:
        return f"CribbageHand([{', '.join(str(c) for c in self)}])"

    def set_hand(self, cards: Iterable[Card]) -> None:
        self._cards = set(cards)

    def clear(self) -> None:
        self._cards.clear()

    def add(self, card: Card) -> bool:
        """Returns False if the card was already in the hand."""
        if card in self._cards:
            return False
        self._cards.add(card)
        return True

    def remove(self, card: Card) -> None:
        try:
            self._cards.remove(card)
        except KeyError as exc:
            raise CardNotInHand(f"{card} is not present in this hand") from exc

    def size(self) -> int:
        return len(self._cards)

    def snapshot(self) -> Set[Card]:
        return set(self._cards)

    def total_points(self, starter: Card) -> int:
        return total_points(self.snapshot(), starter)
