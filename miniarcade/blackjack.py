"""Single-hand blackjack against a dealer who draws to 17."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum

SUITS = ("Hearts", "Diamonds", "Clubs", "Spades")
RANKS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "Jack", "Queen", "King", "Ace")
VALUES = (2, 3, 4, 5, 6, 7, 8, 9, 10, 10, 10, 10, 11)
BLACKJACK = 21
DEALER_STANDS_AT = 17


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _chars(read: Callable[[], str]) -> Iterator[str]:
    """Yield the non-blank characters typed, one at a time."""
    while True:
        try:
            line = read()
        except EOFError:
            return
        yield from (ch for ch in line if not ch.isspace())


@dataclass(frozen=True)
class Card:
    """A playing card with its blackjack value."""

    suit: str
    rank: str
    value: int

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"


class Deck:
    """A shuffled 52-card deck dealt from the top."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards = [
            Card(suit, rank, value)
            for suit in SUITS
            for rank, value in zip(RANKS, VALUES)
        ]
        self.shuffle()

    def shuffle(self) -> None:
        self._rng.shuffle(self._cards)

    def deal(self) -> Card:
        if not self._cards:
            raise IndexError("cannot deal from an empty deck")
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)


@dataclass
class Hand:
    """Cards held by one participant."""

    cards: list[Card] = field(default_factory=list)

    def add(self, card: Card) -> None:
        self.cards.append(card)

    def total(self) -> int:
        """Best total, counting aces as 1 where 11 would bust."""
        total = sum(card.value for card in self.cards)
        aces = sum(1 for card in self.cards if card.rank == "Ace")
        while total > BLACKJACK and aces:
            total -= 10
            aces -= 1
        return total

    def show(self, hide_first: bool = False) -> str:
        lines = (
            "[hidden]" if index == 0 and hide_first else str(card)
            for index, card in enumerate(self.cards)
        )
        return "".join(f"{line}\n" for line in lines)

    def last_card(self) -> Card:
        if not self.cards:
            raise IndexError("hand is empty")
        return self.cards[-1]


class Outcome(Enum):
    """How a round ended, with the message announcing it."""

    PLAYER_BUST = "You busted. Dealer wins!"
    DEALER_BUST = "Dealer busted. You win!"
    PLAYER_WINS = "You win!"
    DEALER_WINS = "Dealer wins!"
    TIE = "It's a tie!"


def decide_outcome(player_total: int, dealer_total: int) -> Outcome:
    if player_total > BLACKJACK:
        return Outcome.PLAYER_BUST
    if dealer_total > BLACKJACK:
        return Outcome.DEALER_BUST
    if player_total > dealer_total:
        return Outcome.PLAYER_WINS
    if player_total < dealer_total:
        return Outcome.DEALER_WINS
    return Outcome.TIE


def play(
    read: Callable[[], str] = input,
    write: Callable[[str], None] = _write,
    rng: random.Random | None = None,
) -> Outcome:
    """Play one round; raises EOFError if input ends while a choice is due."""
    choices = _chars(read)
    deck = Deck(rng)
    player, dealer = Hand(), Hand()
    for _ in range(2):
        player.add(deck.deal())
        dealer.add(deck.deal())

    write("Dealer's hand:\n" + dealer.show(hide_first=True))
    write(f"\nYour hand ({player.total()}):\n" + player.show())

    while player.total() < BLACKJACK:
        write("\nHit or stand? (h/s): ")
        choice = next(choices, None)
        if choice is None:
            raise EOFError("input ended")
        if choice.lower() != "h":
            break
        player.add(deck.deal())
        write(f"\nYour hand ({player.total()}):\n" + player.show())

    write(f"\nDealer's hand ({dealer.total()}):\n" + dealer.show())
    while dealer.total() < DEALER_STANDS_AT:
        dealer.add(deck.deal())
        write(f"\nDealer hits:\n{dealer.last_card()}")
        write(f"\nDealer's hand ({dealer.total()}):\n" + dealer.show())

    player_total, dealer_total = player.total(), dealer.total()
    write("\nFinal Scores:\n")
    write(f"You: {player_total}  Dealer: {dealer_total}\n")
    outcome = decide_outcome(player_total, dealer_total)
    write(outcome.value + "\n")
    return outcome


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="blackjack", description="Play a hand of blackjack.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the shuffle")
    args = parser.parse_args(argv)
    _write("Welcome to Blackjack!\n\n")
    try:
        play(rng=random.Random(args.seed))
    except (EOFError, KeyboardInterrupt):
        _write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())