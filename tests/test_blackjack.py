import io
import random
import re

import pytest

from miniarcade.blackjack import Card, Deck, Hand, Outcome, decide_outcome, main, play


def _card(rank):
    values = {"2": 2, "King": 10, "Queen": 10, "Ace": 11}
    return Card("Hearts", rank, values[rank])


def _lines(*lines):
    feed = iter(lines)

    def read():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    return read


def test_card_str():
    assert str(Card("Spades", "Ace", 11)) == "Ace of Spades"


def test_deck_has_every_card_once():
    deck = Deck(random.Random(3))
    assert len(deck) == 52
    cards = [deck.deal() for _ in range(52)]
    assert len({(c.suit, c.rank) for c in cards}) == 52
    assert len(deck) == 0


def test_deck_empty_raises():
    deck = Deck(random.Random(3))
    for _ in range(52):
        deck.deal()
    with pytest.raises(IndexError):
        deck.deal()


def test_same_seed_same_order():
    first = Deck(random.Random(11))
    second = Deck(random.Random(11))
    assert [first.deal() for _ in range(52)] == [second.deal() for _ in range(52)]


@pytest.mark.parametrize(
    "ranks, expected",
    [(["Ace", "King"], 21), (["Ace", "Ace"], 12), (["King", "Queen", "2"], 22)],
)
def test_hand_total(ranks, expected):
    hand = Hand()
    for rank in ranks:
        hand.add(_card(rank))
    assert hand.total() == expected


def test_show_hides_first_card():
    hand = Hand()
    first, second = _card("King"), _card("2")
    hand.add(first)
    hand.add(second)
    assert hand.show(hide_first=True) == f"[hidden]\n{second}\n"
    assert hand.show() == f"{first}\n{second}\n"
    assert hand.last_card() == second


def test_last_card_of_empty_hand():
    with pytest.raises(IndexError):
        Hand().last_card()


@pytest.mark.parametrize(
    "player, dealer, outcome",
    [
        (22, 18, Outcome.PLAYER_BUST),
        (22, 23, Outcome.PLAYER_BUST),
        (20, 22, Outcome.DEALER_BUST),
        (20, 18, Outcome.PLAYER_WINS),
        (17, 19, Outcome.DEALER_WINS),
        (19, 19, Outcome.TIE),
    ],
)
def test_decide_outcome(player, dealer, outcome):
    assert decide_outcome(player, dealer) is outcome


def _final_totals(text):
    match = re.search(r"You: (\d+)  Dealer: (\d+)", text)
    return int(match.group(1)), int(match.group(2))


@pytest.mark.parametrize("seed", range(8))
def test_play_stand(seed):
    out = []
    outcome = play(_lines("s"), out.append, random.Random(seed))
    text = "".join(out)
    player, dealer = _final_totals(text)
    assert dealer >= 17
    assert decide_outcome(player, dealer) is outcome
    assert text.endswith(outcome.value + "\n")


@pytest.mark.parametrize("seed", range(8))
def test_play_always_hit(seed):
    out = []
    outcome = play(lambda: "h", out.append, random.Random(seed))
    player, dealer = _final_totals("".join(out))
    assert player >= 21
    assert decide_outcome(player, dealer) is outcome


def test_main_runs_a_round(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("s\n"))
    assert main(["--seed", "4"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Welcome to Blackjack!")
    assert "Final Scores:" in out