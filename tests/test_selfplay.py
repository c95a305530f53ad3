"""Tests for headless self-play and its CSV export."""

import csv

from chainreaction.scripts import selfplay
from chainreaction.scripts.selfplay import FIELDS, play_headless, run_selfplay, write_csv


def _without_timing(records):
    return [{k: v for k, v in rec.items() if k != "ms"} for rec in records]


class TestPlayHeadless:
    def test_rows_per_accepted_move(self) -> None:
        rows = play_headless(1, rows=4, cols=4, moves=12, seed=3)
        assert len(rows) == 12
        assert [r["move"] for r in rows] == list(range(1, 13))
        assert set(rows[0]) == set(FIELDS)

    def test_dots_are_conserved(self) -> None:
        """Every move adds one dot and explosions only move dots around."""
        for rec in play_headless(2, rows=5, cols=5, moves=20, seed=9):
            assert rec["total_dots"] == rec["move"]

    def test_players_rotate(self) -> None:
        rows = play_headless(1, rows=5, cols=5, moves=8, seed=1)
        assert [r["player"] for r in rows] == ["red", "green", "blue", "yellow"] * 2

    def test_same_seed_same_game(self) -> None:
        a = play_headless(4, rows=5, cols=5, moves=15, seed=11)
        b = play_headless(4, rows=5, cols=5, moves=15, seed=11)
        assert _without_timing(a) == _without_timing(b)

    def test_saturated_board_stops_the_game(self) -> None:
        # 2x2 board saturates after a handful of moves
        rows = play_headless(1, rows=2, cols=2, moves=50, seed=0)
        assert len(rows) < 50


class TestRunAndExport:
    def test_run_selfplay_sequential(self) -> None:
        records = run_selfplay(3, rows=4, cols=4, moves=5, seed=2)
        assert sorted({r["game"] for r in records}) == [1, 2, 3]
        assert len(records) == 15

    def test_write_csv(self, tmp_path) -> None:
        records = run_selfplay(2, rows=3, cols=3, moves=4, seed=5)
        path = write_csv(records, tmp_path / "out", stamp="test")
        assert path.name == "selfplay_test.csv"

        with path.open(newline="", encoding="utf-8") as f:
            read = list(csv.DictReader(f))
        assert len(read) == 8
        assert list(read[0]) == FIELDS

    def test_main_writes_file(self, tmp_path, capsys) -> None:
        rc = selfplay.main([
            "--games", "2", "--moves", "5", "--rows", "4", "--cols", "4",
            "--discipline", "lifo", "--out", str(tmp_path), "--log-level", "WARNING",
        ])
        assert rc == 0
        files = list(tmp_path.glob("selfplay_*.csv"))
        assert len(files) == 1
        assert "Wrote 10 rows" in capsys.readouterr().out
