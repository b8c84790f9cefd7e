"""
Tests for the game loop and end-to-end scores.
"""

import numpy as np
import pytest

from tokenboxes.core.config_loader import load_config
from tokenboxes.core.game import CoreGame, play


FIBONACCI_4 = [1, 1, 2, 3]
FIBONACCI_8 = [1, 1, 2, 3, 5, 8, 13, 21]


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def game(config):
    return CoreGame(config=config)


class TestPlay:
    """Test the play() entry point."""

    def test_first_4_fibonacci(self):
        """Final scores for [1, 1, 2, 3]."""
        assert play(FIBONACCI_4) == (13.0, 25.0)

    def test_first_8_fibonacci(self):
        """Final scores for [1, 1, 2, 3, 5, 8, 13, 21]."""
        assert play(FIBONACCI_8) == (155.0, 366.25)

    def test_empty_input(self):
        """No tokens, no score."""
        assert play([]) == (0.0, 0.0)

    def test_single_token(self):
        """Player A takes the only turn."""
        assert play([4]) == (16.0, 0.0)

    def test_deterministic(self):
        """Replaying the same sequence gives identical scores."""
        weights = [7, 0, 3, 3, 12, 1, 9, 4, 4, 2]

        first = play(weights)
        second = play(weights)

        assert first == second

    def test_accepts_any_iterable(self):
        """Tokens are consumed once, left to right."""
        assert play(iter(FIBONACCI_4)) == (13.0, 25.0)

    def test_verbose_prints_scores(self, capsys):
        """Verbose mode prints a summary line."""
        play(FIBONACCI_8, verbose=True)

        out = capsys.readouterr().out
        assert "Scores: player A 155, player B 366.25" in out

    def test_silent_by_default(self, capsys):
        """No output unless asked for."""
        play(FIBONACCI_4)

        assert capsys.readouterr().out == ""


class TestCoreGame:
    """Test turn-by-turn orchestration."""

    def test_initial_state(self, game):
        """Fresh game has the standard roster and zero scores."""
        assert game.turn_index == 0
        assert game.scores == (0.0, 0.0)
        assert [b.weight for b in game.roster] == [0.0, 0.1, 0.2, 0.3]
        assert game.current_player.name == "A"

    def test_players_alternate(self, game):
        """A moves on even turns, B on odd turns."""
        records = [game.step(w) for w in FIBONACCI_8]

        assert [r.player for r in records] == ["A", "B"] * 4
        assert [r.turn_index for r in records] == list(range(8))

    def test_box_choice_sequence(self, game):
        """Lightest box is chosen each turn."""
        result = game.run(FIBONACCI_8)

        assert [t.box_index for t in result.turns] == [0, 1, 2, 3, 0, 1, 2, 3]
        assert [t.points for t in result.turns] == [
            1.0, 1.0, 12.0, 24.0, 9.0, 20.25, 133.0, 321.0
        ]

    def test_result(self, game):
        """GameResult carries scores, turns and the winner."""
        result = game.run(FIBONACCI_4)

        assert result.as_pair() == (13.0, 25.0)
        assert result.num_turns == 4
        assert result.winner == "B"

    def test_empty_game_is_tie(self, game):
        """No turns means no winner."""
        result = game.run([])

        assert result.as_pair() == (0.0, 0.0)
        assert result.winner is None

    def test_weight_invariant_across_game(self, game):
        """Every box weight equals its initial weight plus its tokens."""
        game.run(FIBONACCI_8)

        for box in game.roster:
            assert box.weight == pytest.approx(box.initial_weight + sum(box.absorbed_weights))

        all_tokens = sorted(w for box in game.roster for w in box.absorbed_weights)
        assert all_tokens == sorted(FIBONACCI_8)

    def test_reset_replays_identically(self, game):
        """A reset game reproduces the same outcome."""
        first = game.run(FIBONACCI_8)
        snapshot = game.reset()
        second = game.run(FIBONACCI_8)

        assert snapshot.turn_index == 0
        assert snapshot.scores == (0.0, 0.0)
        assert first.as_pair() == second.as_pair()
        assert first.turns == second.turns

    def test_reset_restores_same_roster(self, game):
        """Reset empties the existing boxes back to their initial weights."""
        boxes = list(game.roster)
        game.run(FIBONACCI_4)
        game.reset()

        assert all(a is b for a, b in zip(game.roster, boxes))
        assert [b.weight for b in game.roster] == [0.0, 0.1, 0.2, 0.3]
        assert all(b.absorbed_weights == [] for b in game.roster)
        assert game.history == []

    def test_history_is_a_copy(self, game):
        """Mutating the returned history leaves the game intact."""
        game.step(1)
        game.history.clear()

        assert len(game.history) == 1


class TestSnapshot:
    """Test state snapshots."""

    def test_snapshot_after_turns(self, game):
        """Snapshot reflects roster and scores."""
        game.run(FIBONACCI_4)
        snapshot = game.snapshot()

        assert snapshot.turn_index == 4
        assert snapshot.box_variants == ("green", "green", "blue", "blue")
        np.testing.assert_allclose(snapshot.box_weights, [1.0, 1.1, 2.2, 3.3])
        np.testing.assert_array_equal(snapshot.box_absorb_counts, [1, 1, 1, 1])
        assert snapshot.scores == (13.0, 25.0)
        assert snapshot.lightest_box_index == 0

    def test_snapshot_is_detached(self, game):
        """Later turns do not alter an earlier snapshot."""
        snapshot = game.snapshot()
        game.step(5)

        assert snapshot.box_weights[0] == 0.0
        assert snapshot.scores == (0.0, 0.0)

    def test_to_dict(self, game):
        """Dict form uses plain Python types."""
        game.step(2)
        data = game.snapshot().to_dict()

        assert data["turn_index"] == 1
        assert data["box_weights"] == pytest.approx([2.0, 0.1, 0.2, 0.3])
        assert all(type(w) is float for w in data["box_weights"])
        assert data["box_absorb_counts"] == [1, 0, 0, 0]
        assert data["lightest_box_index"] == 1
