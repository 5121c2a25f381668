"""
Random singer names.
"""
import random
from typing import Optional

FIRST_NAMES = [
    "Saffron", "Eleanor", "Ann", "Salma", "Kiera", "Mariam", "Georgie", "Eden", "Carmen", "Darcie",
    "Antony", "Benjamin", "Donald", "Keaton", "Jared", "Simon", "Tanya", "Julian", "Eugene", "Laurence",
]
LAST_NAMES = [
    "Terry", "Ford", "Mills", "Connolly", "Newton", "Rodgers", "Austin", "Floyd", "Doherty", "Nguyen",
    "Chavez", "Crossley", "Silva", "George", "Baldwin", "Burns", "Russell", "Ramirez", "Hunter", "Fuller",
]


def random_first_name(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(FIRST_NAMES)


def random_last_name(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(LAST_NAMES)
