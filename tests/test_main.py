"""Tests for the command-line front end."""

import io
import json

import pytest

from tablegames.config import BlackjackConfig
from tablegames.game.blackjack import BlackjackSession
from tablegames.game.gomoku import GameStatus, GomokuSession
from tablegames.main import build_parser, main, run_blackjack, run_gomoku
from tablegames.models.card import Suit
from tablegames.utils.logger import GameDisplay


@pytest.fixture
def out():
    return io.StringIO()


class TestRunGomoku:
    """Tests for the five-in-a-row command loop."""

    def test_win(self, out):
        session = GomokuSession()
        moves = ["0 0", "1 1", "0 1", "12 0", "0,2", "12 2", "0 3", "12 4", "0 4", "q"]
        run_gomoku(session, GameDisplay(out=out), iter(m + "\n" for m in moves))

        text = out.getvalue()
        assert session.status == GameStatus.WON_A
        assert "BLACK (X) wins the game!" in text
        assert "from (0, 0) to (0, 4)" in text

    def test_bad_input_and_rejections(self, out):
        session = GomokuSession()
        lines = ["hello", "0 0", "0 0", "new", "resign", "new", "q"]
        run_gomoku(session, GameDisplay(show_board=False, out=out), iter(lines))

        text = out.getvalue()
        assert 'Enter a move as "row col"' in text
        assert "Move rejected: occupied" in text
        assert "Finish the current game first!" in text
        assert "WHITE (O) resigns. BLACK (X) wins." in text
        assert session.game_number == 2
        assert session.status == GameStatus.IN_PROGRESS

    def test_end_of_input(self, out):
        session = GomokuSession()
        run_gomoku(session, GameDisplay(out=out), iter([]))
        assert session.status == GameStatus.IN_PROGRESS


class TestRunBlackjack:
    """Tests for the Blackjack command loop."""

    def test_round(self, out, card, stacked_rng):
        top = [
            card(10, Suit.SPADES),
            card(7, Suit.SPADES),
            card(10, Suit.HEARTS),
            card(9, Suit.HEARTS),
        ]
        session = BlackjackSession(rng=stacked_rng(top))
        run_blackjack(session, GameDisplay(out=out), iter(["20", "x", "s", "q"]))

        text = out.getvalue()
        assert "ROUND 1: bet 20" in text
        assert "Dealer: ??, 7 of Spades" in text
        assert 'Please enter "h" to hit or "s" to stand.' in text
        assert "You win (player_higher): 19 to 17" in text
        assert session.money == 120

    def test_bad_bets(self, out):
        session = BlackjackSession()
        run_blackjack(session, GameDisplay(out=out), iter(["abc", "500", "q"]))

        text = out.getvalue()
        assert "The bet amount must be a legal positive integer." in text
        assert "You can't bet more money than you have" in text
        assert session.round_number == 0

    def test_out_of_money(self, out, card, stacked_rng):
        top = [
            card(1, Suit.SPADES),
            card(13, Suit.SPADES),
            card(9, Suit.HEARTS),
            card(9, Suit.DIAMONDS),
        ]
        session = BlackjackSession(BlackjackConfig(starting_money=10), rng=stacked_rng(top))
        run_blackjack(session, GameDisplay(out=out), iter(["10"]))

        assert "You are out of money. Game over." in out.getvalue()


class TestMain:
    """Tests for main()."""

    def test_parser_requires_game(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_gomoku(self, capsys):
        code = main(["gomoku", "--size", "7"], stdin=io.StringIO("3 3\nresign\nq\n"))
        assert code == 0
        assert "resigns" in capsys.readouterr().out

    def test_invalid_size(self, capsys):
        code = main(["gomoku", "--size", "3"], stdin=io.StringIO(""))
        assert code == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_blackjack_with_log(self, tmp_path, capsys):
        log_path = tmp_path / "bj.jsonl"
        code = main(
            ["--game-log", str(log_path), "blackjack", "--seed", "1"],
            stdin=io.StringIO("10\ns\nq\n"),
        )

        assert code == 0
        assert "ROUND 1" in capsys.readouterr().out
        with open(log_path, encoding="utf-8") as f:
            events = [json.loads(line) for line in f]
        assert events[0]["type"] == "round_start"
        assert events[-1]["type"] == "round_end"

    @pytest.mark.parametrize("money", ["0", "-5"])
    def test_invalid_money(self, money, capsys):
        """A bankroll override is validated like the config file."""
        code = main(["blackjack", "--money", money], stdin=io.StringIO(""))
        assert code == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_zero_size(self, capsys):
        code = main(["gomoku", "--size", "0"], stdin=io.StringIO(""))
        assert code == 2
        assert "Invalid configuration" in capsys.readouterr().err

    @pytest.mark.parametrize("text", ["- 1\n- 2\n", "gomoku: [1\n"])
    def test_bad_config_file(self, text, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text(text)
        code = main(["-c", str(path), "gomoku"], stdin=io.StringIO(""))
        assert code == 2
        assert "Invalid configuration" in capsys.readouterr().err
