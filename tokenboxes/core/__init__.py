"""
Token Boxes Core - the game simulation.

Main exports:
- play: Play a full game and return (player A, player B) scores
- CoreGame: Turn-by-turn game orchestrator
- Box, BoxVariant: Scoring boxes and their variants
- Player: Game participant with a running score
- GameConfig: Configuration loaded from game_config.yaml
"""

from tokenboxes.core.config_loader import GameConfig, load_config
from tokenboxes.core.scoring import cantor_pairing, green_score, blue_score
from tokenboxes.core.boxes import (
    Box,
    BoxVariant,
    build_roster,
    make_box,
    make_blue_box,
    make_green_box,
)
from tokenboxes.core.player import Player, TurnRecord, select_lightest_box
from tokenboxes.core.state_snapshot import GameSnapshot
from tokenboxes.core.game import CoreGame, GameResult, play

__all__ = [
    "GameConfig",
    "load_config",
    "cantor_pairing",
    "green_score",
    "blue_score",
    "Box",
    "BoxVariant",
    "build_roster",
    "make_box",
    "make_blue_box",
    "make_green_box",
    "Player",
    "TurnRecord",
    "select_lightest_box",
    "GameSnapshot",
    "CoreGame",
    "GameResult",
    "play",
]
