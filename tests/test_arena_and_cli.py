from random import Random

from bidders.arena import main as arena_main
from bidders.arena import run_match
from bidders.random_bidder import RandomLegalIndexBidder, SequentialShuffledDrawBidder
from goofspiel import cli
from goofspiel.cards import PRIZE_SUIT, make_card
from goofspiel.report import format_report
from goofspiel.rules_schema import RuleSet
from goofspiel.scoring import score_session


def test_run_match_executes():
    results = run_match(RandomLegalIndexBidder(seed=1), SequentialShuffledDrawBidder(seed=2), n_games=5, seed=7)

    assert len(results["history"]) == 5
    assert sum(results["wins"]) + results["draws"] == 5


def test_play_game_with_scripted_human():
    # Always bid the lowest remaining slot; slots 1..13 in order.
    answers = iter(str(index) for index in range(1, 14))
    output = []

    result = cli.play_game(RuleSet(), Random(3), input_fn=lambda _: next(answers), output_fn=output.append)

    assert sum(len(pool) for pool in result.pools) + len(result.discard) == 13
    assert sum(1 for line in output if line.startswith("you bid: ")) == 13
    report = output[-21:]
    assert report[0] == f"Computer's total: {result.totals[1]}"
    assert report[2] in {"You win!!", "You lose.", "Draw!"}


def test_main_stops_on_end_of_input(monkeypatch, capsys):
    def closed(_=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    cli.main(["--seed", "1", "--log-level", "ERROR"])

    assert "Exiting." in capsys.readouterr().out


def test_format_report_lines():
    result = score_session([[make_card(PRIZE_SUIT, 13)], [make_card(PRIZE_SUIT, 2)]], [make_card(PRIZE_SUIT, 7)])
    lines = format_report(result, second_person=True)

    assert lines[:3] == ["Computer's total: 2", "Your total: 13", "You win!!"]
    assert lines[3] == "Computer's pool:"
    assert lines[9] == "Your pool:"
    assert lines[15] == "Discarded cards:"
    assert len(lines) == 21


def test_outcome_line_with_bidder_names():
    result = score_session([[], [make_card(PRIZE_SUIT, 4)]], [])
    assert format_report(result, names=("Random", "Sequential"))[:3] == [
        "Sequential's total: 4",
        "Random's total: 0",
        "Sequential wins!",
    ]


def test_report_wording_does_not_depend_on_names():
    result = score_session([[make_card(PRIZE_SUIT, 9)], []], [])

    assert format_report(result, names=("Alice", "Computer"))[2] == "Alice wins!"
    assert format_report(result, names=("Alice", "Computer"), second_person=True)[1:3] == ["Your total: 9", "You win!!"]


def test_arena_main_prints_summary(capsys):
    arena_main(["--n", "3", "--seed", "5", "--log-level", "ERROR"])

    out = capsys.readouterr().out
    assert "Games played: 3" in out
    assert "Average totals:" in out
