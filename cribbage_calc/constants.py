import os
from dotenv import load_dotenv

load_dotenv(override=True)

SUITS = ["C", "D", "H", "S"]
SUIT_NAMES = {"C": "clubs", "D": "diamonds", "H": "hearts", "S": "spades"}
RANKS = list(range(1, 14))  # 1=Ace, 11=Jack, 12=Queen, 13=King
RANK_NAMES = {
    1: "Ace", 2: "Two", 3: "Three", 4: "Four", 5: "Five", 6: "Six", 7: "Seven",
    8: "Eight", 9: "Nine", 10: "Ten", 11: "Jack", 12: "Queen", 13: "King",
}
RANK_TOKENS = {**{i: str(i) for i in range(1, 11)}, 11: "J", 12: "Q", 13: "K"}
RANK_VALUE = {**{i: i for i in range(1, 10)}, 10: 10, 11: 10, 12: 10, 13: 10}

ACE = 1
FIVE = 5
JACK = 11

HAND_SIZE = 4
FIFTEEN = 15

# players -> cards dealt to each player
DEALT_CARDS = {2: 6, 3: 5, 4: 5}

DEFAULT_WORKERS = int(os.getenv("CRIB_CALC_WORKERS", "1"))
