from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, List
import re
from logging import getLogger

from cribbage_calc.constants import RANK_NAMES, RANK_TOKENS, RANK_VALUE, RANKS, SUIT_NAMES, SUITS

logger = getLogger(__name__)

CARD_PATTERN = re.compile(r"^(10|[1-9JQK])([CDHS])$")
TOKEN_RANKS = {token: rank for rank, token in RANK_TOKENS.items()}


class InvalidCardNotation(ValueError):
    pass


@total_ordering
@dataclass(frozen=True)
class Card:
    suit: str
    rank: int

    def __post_init__(self) -> None:
        if self.suit not in SUITS:
            raise ValueError(f"Unknown suit {self.suit!r}, expected one of {SUITS}")
        if self.rank not in RANKS:
            raise ValueError(f"Rank must be between 1 and 13, got {self.rank!r}")

    def __str__(self) -> str:
        return f"{RANK_TOKENS[self.rank]}{self.suit}"

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return (self.rank, SUITS.index(self.suit)) < (other.rank, SUITS.index(other.suit))

    @property
    def value(self) -> int:
        """Cribbage counting value: face cards count 10."""
        return RANK_VALUE[self.rank]

    @property
    def name(self) -> str:
        return f"{RANK_NAMES[self.rank]} of {SUIT_NAMES[self.suit]}"

    def to_index(self) -> int:
        s = SUITS.index(self.suit)
        r = self.rank - 1
        return s * 13 + r


def parse_card(text: str) -> Card:
    """
    Parse a card token such as "10c", "jH" or "1d" (aces are written as 1).
    Rank comes first, then the first letter of the suit. Case-insensitive.
    """
    if not isinstance(text, str):
        raise InvalidCardNotation(f"Card notation must be a string, got {text!r}")
    match = CARD_PATTERN.match(text.strip().upper())
    if match is None:
        raise InvalidCardNotation(f"{text!r} is not a valid card (expected e.g. '10C', 'JH', '1D')")
    rank_token, suit = match.groups()
    return Card(suit, TOKEN_RANKS[rank_token])


def parse_cards(texts: Iterable[str]) -> List[Card]:
    return [parse_card(t) for t in texts]


def get_full_deck() -> List[Card]:
    return [Card(s, r) for s in SUITS for r in RANKS]
