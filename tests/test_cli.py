"""
Tests for the command line front-ends.
"""

import os
import sys
from unittest.mock import MagicMock

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gridsnake.domain import OVER_WALL
from gridsnake.cli import replay
from gridsnake.cli.play import CursesView
from gridsnake.services.frame_renderer import FrameRenderer


class TestRunReplay:
    """Tests for the headless replay runner."""

    def test_runs_into_wall(self):
        """Heading right on a 5x5 board must hit the wall within five ticks."""
        game = replay.run_replay(
            ["RIGHT"], width=100, height=100, scale=20, seed=3,
            ticks_per_key=0, trailing_ticks=10,
        )
        assert game.over
        assert game.over_reason == OVER_WALL
        assert game.snake.head.x == 4

    def test_same_seed_same_game(self):
        kwargs = dict(width=200, height=200, scale=20, seed=11, ticks_per_key=2)
        keys = ["ArrowDown", "ArrowRight", "ArrowUp"]
        first = replay.run_replay(keys, **kwargs)
        second = replay.run_replay(keys, **kwargs)
        assert first.snake.cells == second.snake.cells
        assert first.apple.position == second.apple.position

    def test_no_keys_leaves_snake_idle(self):
        game = replay.run_replay([], width=100, height=100, scale=20, seed=1, trailing_ticks=5)
        assert not game.over
        assert len(game.snake) == 1
        assert not game.loop_active

    def test_game_is_detached_afterwards(self):
        game = replay.run_replay(["RIGHT"], width=100, height=100, scale=20, seed=1)
        assert game.input_channel.subscribers == 0

    def test_renderer_records_frames(self):
        renderer = FrameRenderer(scale=20)
        replay.run_replay(
            ["x"], width=100, height=100, scale=20, seed=2,
            ticks_per_key=3, renderer=renderer,
        )
        # Idle snake: one frame for set-up plus one per tick
        assert len(renderer.frames) == 4


class TestReplayMain:
    """Tests for the replay entry point."""

    def test_writes_gif(self, tmp_path, capsys):
        output = tmp_path / "run.gif"
        code = replay.main([
            "RIGHT", "DOWN",
            "--width", "100", "--height", "100", "--scale", "20",
            "--seed", "5", "--ticks-per-key", "2",
            "--output", str(output),
        ])
        assert code == 0
        assert output.exists()
        assert "Score:" in capsys.readouterr().out

    def test_invalid_surface_returns_error(self):
        code = replay.main(["RIGHT", "--width", "10", "--height", "10", "--scale", "20"])
        assert code == 1


class TestCursesView:
    """Tests for the terminal painter."""

    def test_draws_board_and_score(self):
        stdscr = MagicMock()
        game = replay.run_replay([], width=60, height=40, scale=20, seed=0)

        CursesView(stdscr)(game)

        stdscr.erase.assert_called_once()
        stdscr.refresh.assert_called_once()
        drawn = [call.args[2] for call in stdscr.addstr.call_args_list]
        assert len(drawn) == 3
        assert drawn[-1].startswith("Score: 0")
