"""Deterministic receipt scoring."""

from .rules import RULES, score_breakdown, score_receipt

__all__ = ["RULES", "score_breakdown", "score_receipt"]
