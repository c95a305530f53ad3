"""Tests for terminal input parsing, rendering and the game loop."""

import io

import pytest

from chainreaction.ai.random_agent import RandomAgent
from chainreaction.core.grid import new_grid
from chainreaction.game.actions import play_move
from chainreaction.game.controller import run_game, seat_agents
from chainreaction.game.engine import Engine
from chainreaction.types import Player
from chainreaction.ui import colors, render
from chainreaction.ui.effects import ai_thinking
from chainreaction.ui.human import HumanAgent
from chainreaction.ui.prompts import parse_move


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.setattr(colors, "USE_COLOR", False)
    monkeypatch.setattr(render, "CLEAR_SCREEN", False)


class TestParseMove:
    @pytest.mark.parametrize("raw,expected", [
        ("1 1", (0, 0)),
        ("2 3", (1, 2)),
        (" 5,5 ", (4, 4)),
        ("3, 1", (2, 0)),
    ])
    def test_valid(self, raw: str, expected) -> None:
        assert parse_move(raw, 5, 5) == expected

    @pytest.mark.parametrize("raw", ["q", "Quit", "exit"])
    def test_quit(self, raw: str) -> None:
        assert parse_move(raw, 5, 5) is None

    @pytest.mark.parametrize("raw", ["", "3", "a b", "1 2 3", "-1 2"])
    def test_garbage(self, raw: str) -> None:
        with pytest.raises(ValueError, match="Invalid input"):
            parse_move(raw, 5, 5)

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="Row must be between 1 and 5"):
            parse_move("6 1", 5, 5)
        with pytest.raises(ValueError, match="Column must be between 1 and 4"):
            parse_move("1 5", 5, 4)


class TestRender:
    def test_format_board(self, plain) -> None:
        grid = new_grid(3, 3)
        play_move(grid, 1, 1, Player.GREEN)
        lines = render.format_board(grid)
        assert len(lines) == 3 + 2
        assert lines[0].strip() == "1 2 3"
        assert lines[2] == " 2 | · 1 · |"

    def test_explosions_are_marked(self, plain) -> None:
        grid = new_grid(3, 3)
        play_move(grid, 0, 0, Player.RED)
        result = play_move(grid, 0, 0, Player.RED)
        lines = render.format_board(grid, exploded=result.topples)
        assert lines[1] == " 1 | * 1 · |"

    def test_render_prints_status_and_counts(self, plain, capsys) -> None:
        grid = new_grid(2, 2)
        play_move(grid, 0, 0, Player.BLUE)
        render.render(grid, "hello")
        out = capsys.readouterr().out
        assert "CHAIN REACTION" in out
        assert "hello" in out
        assert "Blue: 1" in out


class TestController:
    def test_seats_wrap_around(self) -> None:
        human = HumanAgent()
        seats = seat_agents([human])
        assert list(seats) == [Player.RED, Player.GREEN, Player.BLUE, Player.YELLOW]
        assert all(a is human for a in seats.values())

    def test_seat_count_is_checked(self) -> None:
        with pytest.raises(ValueError):
            seat_agents([])
        with pytest.raises(ValueError):
            seat_agents([HumanAgent()] * 5)

    def test_random_agents_play_to_move_limit(self, plain, capsys) -> None:
        agents = [RandomAgent(seed=i) for i in range(4)]
        engine = run_game(agents, rows=4, cols=4, show_thinking=False, max_moves=6)
        assert engine.moves_played == 6
        assert engine.grid.total_dots() == 6
        assert "Move limit reached (6)." in capsys.readouterr().out

    def test_human_input_loop(self, plain, monkeypatch, capsys) -> None:
        answers = iter(["1 1", "9 9", "1 1", "2 2", "q"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        engine = run_game([HumanAgent()], rows=3, cols=3, show_thinking=False, max_moves=None)

        # "9 9" is rejected by the parser; Green's "1 1" hits Red's cell.
        assert engine.moves_played == 2
        assert engine.get_cell(0, 0).as_tuple() == (1, Player.RED)
        assert engine.get_cell(1, 1).as_tuple() == (1, Player.GREEN)
        assert engine.current_player() is Player.BLUE
        assert "Game quit." in capsys.readouterr().out

    def test_saturated_board_ends_the_game(self, plain, monkeypatch, capsys) -> None:
        """Five dots on a 2x2 board can never settle; the loop stops instead of crashing."""
        answers = iter(["1 1", "1 2", "2 1", "2 2", "1 1"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        engine = run_game([HumanAgent()], rows=2, cols=2, show_thinking=False, max_moves=None)

        assert engine.moves_played == 4
        assert engine.get_cell(0, 0).as_tuple() == (1, Player.RED)
        assert engine.grid.total_dots() == 4
        assert "can no longer settle" in capsys.readouterr().out

    def test_random_agents_on_tiny_board_stop_without_limit(self, plain, capsys) -> None:
        agents = [RandomAgent(seed=i) for i in range(4)]
        engine = run_game(agents, rows=2, cols=2, show_thinking=False, max_moves=None)

        engine.grid.check_invariants()
        out = capsys.readouterr().out
        assert "can no longer settle" in out or "No valid moves." in out


class TestRandomAgent:
    def test_only_picks_legal_cells(self) -> None:
        engine = Engine(3, 3)
        agent = RandomAgent(seed=7)
        for _ in range(8):
            move = agent.choose_move(engine.state)
            assert move in engine.legal_moves()
            assert engine.apply_move(*move)

    def test_seeded_agents_agree(self) -> None:
        engine = Engine(5, 5)
        a, b = RandomAgent(seed=3), RandomAgent(seed=3)
        picks_a = [a.choose_move(engine.state) for _ in range(5)]
        picks_b = [b.choose_move(engine.state) for _ in range(5)]
        assert picks_a == picks_b


class TestEffects:
    def test_zero_delay_prints_nothing(self) -> None:
        buf = io.StringIO()
        ai_thinking("Random AI", 0, stream=buf)
        assert buf.getvalue() == ""

    def test_spinner_wipes_its_line(self) -> None:
        buf = io.StringIO()
        ai_thinking("Random AI", 0.05, stream=buf)
        text = buf.getvalue()
        assert text.startswith("\rRandom AI ")
        assert text.endswith(" " * len("Random AI  ") + "\r")
