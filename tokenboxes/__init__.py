"""
Token Boxes
===========

A two-player token game played against a fixed roster of scoring boxes.

- core: boxes, scoring rules, players and the game loop
- evaluation: sequence bank harness and command line entry point

All game constants live in game_config.yaml and are locked.
"""
