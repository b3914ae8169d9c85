import argparse

from cribbage_calc.constants import DEALT_CARDS, DEFAULT_WORKERS


def build_rank_discards_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Cribbage calculator: rank discards by average hand points, or score a hand.",
    )
    ap.add_argument(
        "--players",
        type=int,
        default=None,
        choices=sorted(DEALT_CARDS),
        help="Number of players (2-4). Prompted for when omitted and --cards is not given.",
    )
    ap.add_argument(
        "--cards",
        nargs="+",
        default=None,
        help="Dealt cards, e.g. 5C 10D JH 1S 4S KD. Prompted for one by one when omitted.",
    )
    ap.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_WORKERS,
        help="Number of worker processes used to score discard options.",
    )
    ap.add_argument(
        "--score",
        nargs=5,
        default=None,
        metavar="CARD",
        help="Score a single hand: four hand cards followed by the starter.",
    )
    return ap
