"""Day 7: Camel Cards."""

from collections import Counter
from typing import List, Tuple

from aoc.core.errors import InvalidInputError

CARDS = "23456789TJQKA"
CARDS_WITH_JOKERS = "J23456789TQKA"


def parse(text: str) -> List[Tuple[str, int]]:
    hands = []
    for line in text.splitlines():
        if not line.strip():
            continue
        words = line.split()
        if len(words) != 2 or len(words[0]) != 5 or set(words[0]) - set(CARDS) or not words[1].isdigit():
            raise InvalidInputError(f"Bad hand: {line!r}")
        hands.append((words[0], int(words[1])))
    return hands


def hand_type(hand: str, jokers: bool) -> List[int]:
    """Card counts in descending order; compares in the same order as hand types."""
    counts = Counter(hand)
    wild = counts.pop("J", 0) if jokers else 0
    shape = sorted(counts.values(), reverse=True) or [0]
    # Jokers always do best joining the largest group
    shape[0] += wild
    return shape


def total_winnings(text: str, jokers: bool) -> int:
    order = CARDS_WITH_JOKERS if jokers else CARDS
    ranked = sorted(
        parse(text),
        key=lambda hb: (hand_type(hb[0], jokers), [order.index(card) for card in hb[0]]),
    )
    return sum(rank * bid for rank, (_, bid) in enumerate(ranked, 1))


def part1(text: str) -> int:
    return total_winnings(text, jokers=False)


def part2(text: str) -> int:
    return total_winnings(text, jokers=True)
