"""
Evaluation Package
==================

Contains the sequence bank and evaluation harness for comparing games.
"""

from tokenboxes.evaluation.run_eval import evaluate_bank, load_sequence_bank

__all__ = ["evaluate_bank", "load_sequence_bank"]
