from logging import getLogger
logger = getLogger(__name__)

__all__ = [
    "cards",
    "constants",
    "scoring",
    "hand",
    "discard",
    "utils",
]
