"""Storage for score records."""

from .receipt_store import ReceiptStore, generate_receipt_id

__all__ = ["ReceiptStore", "generate_receipt_id"]
