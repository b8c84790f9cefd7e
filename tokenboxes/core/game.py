"""
Core Game
=========

Main game orchestrator combining the box roster, players and turn rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from tokenboxes.core.boxes import Box, build_roster
from tokenboxes.core.config_loader import GameConfig, get_config
from tokenboxes.core.player import Player, TurnRecord
from tokenboxes.core.rules import decide_winner, player_index_for_turn
from tokenboxes.core.state_snapshot import GameSnapshot, SnapshotBuilder


@dataclass(frozen=True)
class GameResult:
    """Final outcome of a game."""
    score_a: float
    score_b: float
    turns: Tuple[TurnRecord, ...]
    winner: Optional[str]           # None on a tie

    @property
    def num_turns(self) -> int:
        return len(self.turns)

    def as_pair(self) -> Tuple[float, float]:
        """Final scores as (player A, player B)."""
        return (self.score_a, self.score_b)


class CoreGame:
    """
    Main game simulation class.

    Owns:
    - The box roster (fresh for every game)
    - Players A and B
    - Turn counter and history

    One step = one token absorbed by the lightest box on behalf of
    the player whose turn it is.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize game.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._snapshot_builder = SnapshotBuilder()

        self._roster: List[Box] = build_roster(config)
        self._players: Tuple[Player, ...] = tuple(
            Player(name) for name in config.players.names
        )
        self._turn_index: int = 0
        self._history: List[TurnRecord] = []

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config

    @property
    def roster(self) -> List[Box]:
        """The shared box roster."""
        return self._roster

    @property
    def players(self) -> Tuple[Player, ...]:
        """Players in turn order."""
        return self._players

    @property
    def turn_index(self) -> int:
        """Number of turns played so far."""
        return self._turn_index

    @property
    def scores(self) -> Tuple[float, float]:
        """Current scores as (player A, player B)."""
        return (self._players[0].score, self._players[1].score)

    @property
    def history(self) -> List[TurnRecord]:
        """All turns played, in order."""
        return list(self._history)

    @property
    def current_player(self) -> Player:
        """Player who moves next."""
        return self._players[player_index_for_turn(self._turn_index, len(self._players))]

    def reset(self) -> GameSnapshot:
        """
        Reset game to initial state.

        Returns:
            Initial game snapshot.
        """
        for box in self._roster:
            box.reset()
        for player in self._players:
            player.reset()
        self._turn_index = 0
        self._history = []
        return self.snapshot()

    def step(self, weight: float) -> TurnRecord:
        """
        Play one turn with the next token.

        Args:
            weight: Token weight, consumed by this turn only.

        Returns:
            TurnRecord for the move.
        """
        record = self.current_player.take_turn(weight, self._roster, self._turn_index)
        self._history.append(record)
        self._turn_index += 1
        return record

    def run(self, weights: Iterable[float]) -> GameResult:
        """
        Play every token in order and return the outcome.

        Args:
            weights: Token weights, consumed left to right.

        Returns:
            GameResult with final scores and turn history.
        """
        for weight in weights:
            self.step(weight)
        return self.result()

    def result(self) -> GameResult:
        """Outcome of the turns played so far."""
        score_a, score_b = self.scores
        return GameResult(
            score_a=score_a,
            score_b=score_b,
            turns=tuple(self._history),
            winner=decide_winner(score_a, score_b, self._config.players.names)
        )

    def snapshot(self) -> GameSnapshot:
        """Build current game state snapshot."""
        return self._snapshot_builder.build(
            roster=self._roster,
            players=self._players,
            turn_index=self._turn_index
        )


def play(
    weights: Iterable[float],
    config: Optional[GameConfig] = None,
    verbose: bool = False
) -> Tuple[float, float]:
    """
    Play a full game on a fresh roster.

    Args:
        weights: Token weights, one per turn. Player A takes even turns.
        config: Game configuration. Uses default if None.
        verbose: If True, print the final scores.

    Returns:
        Final scores as (player A, player B).
    """
    game = CoreGame(config)
    result = game.run(weights)

    if verbose:
        name_a, name_b = game.config.players.names
        print(f"Scores: player {name_a} {result.score_a:g}, player {name_b} {result.score_b:g}")

    return result.as_pair()
