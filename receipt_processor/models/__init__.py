"""Data models for the receipt processor.

- receipt.py: validated receipt, line items and stored score records
"""

from .receipt import LineItem, Receipt, ScoreRecord

__all__ = [
    "LineItem",
    "Receipt",
    "ScoreRecord",
]
