"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to the locked
game constants (box roster, green scoring window, player names).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import yaml


# Variant names in the fixed roster order
STANDARD_ROSTER_VARIANTS: Tuple[str, ...] = ("green", "green", "blue", "blue")

STANDARD_GREEN_WINDOW = 3

KNOWN_VARIANTS = ("green", "blue")


@dataclass(frozen=True)
class BoxConfig:
    """A single roster slot."""
    variant: str            # "green" or "blue"
    initial_weight: float   # Weight the box starts the game with


@dataclass(frozen=True)
class ScoringConfig:
    """Scoring parameters."""
    green_window: int       # Most recent tokens averaged by a green box


@dataclass(frozen=True)
class PlayersConfig:
    """Player names in turn order (first name moves first)."""
    names: Tuple[str, ...]


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during a game.
    """
    roster: Tuple[BoxConfig, ...]
    scoring: ScoringConfig
    players: PlayersConfig


def _parse_box(box_data: dict) -> BoxConfig:
    """Parse a single roster slot from YAML."""
    try:
        variant = str(box_data["variant"]).lower()
        initial_weight = float(box_data["initial_weight"])
    except (KeyError, TypeError) as e:
        raise ValueError(f"Roster entry must have 'variant' and 'initial_weight', got {box_data}") from e

    if variant not in KNOWN_VARIANTS:
        raise ValueError(f"Unknown box variant '{variant}', expected one of {KNOWN_VARIANTS}")
    return BoxConfig(variant=variant, initial_weight=initial_weight)


def _section(raw: dict, name: str) -> dict:
    """Get an optional top-level section. A present section must be a mapping."""
    data = raw.get(name, {})
    if not isinstance(data, dict):
        raise ValueError(f"Section '{name}' must be a mapping, got {type(data).__name__}")
    return data


def _validate_config(config: GameConfig) -> None:
    """Validate that the configuration describes the standard game."""
    variants = tuple(box.variant for box in config.roster)
    if variants != STANDARD_ROSTER_VARIANTS:
        raise ValueError(
            f"Roster must be {list(STANDARD_ROSTER_VARIANTS)}, got {list(variants)}"
        )

    if config.scoring.green_window != STANDARD_GREEN_WINDOW:
        raise ValueError(
            f"scoring.green_window must be {STANDARD_GREEN_WINDOW}, "
            f"got {config.scoring.green_window}"
        )

    if len(config.players.names) != 2:
        raise ValueError(f"Exactly two players are required, got {list(config.players.names)}")

    if len(set(config.players.names)) != 2:
        raise ValueError(f"Player names must be distinct, got {list(config.players.names)}")


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    roster_data: List = raw.get("roster") or []
    if not isinstance(roster_data, list):
        raise ValueError(f"roster must be a list, got {type(roster_data).__name__}")
    roster = tuple(_parse_box(b) for b in roster_data)

    scoring_data = _section(raw, "scoring")
    scoring = ScoringConfig(
        green_window=int(scoring_data.get("green_window", STANDARD_GREEN_WINDOW))
    )

    players_data = _section(raw, "players")
    names = players_data.get("names", ["A", "B"])
    if not isinstance(names, list):
        raise ValueError(f"players.names must be a list, got {names!r}")
    players = PlayersConfig(
        names=tuple(str(n) for n in names)
    )

    config = GameConfig(
        roster=roster,
        scoring=scoring,
        players=players
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
