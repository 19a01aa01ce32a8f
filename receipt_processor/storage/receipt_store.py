"""In-memory receipt store - identifier keyed score records for the process lifetime."""

from __future__ import annotations

import threading
from typing import Callable, Dict
from uuid import UUID, uuid4

from ..errors import ReceiptNotFoundError
from ..models import ScoreRecord


class ReceiptStore:
    """Score record store.

    One instance is created per application and handed to the request
    handlers. Records are never evicted or overwritten by the handlers;
    the contents are lost when the process exits.
    """

    def __init__(self):
        self._records: Dict[str, ScoreRecord] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, record: ScoreRecord) -> None:
        """Store a record under an identifier.

        Args:
            receipt_id: identifier from generate_receipt_id
            record: score record for the receipt
        """
        with self._lock:
            self._records[receipt_id] = record

    def has(self, receipt_id: str) -> bool:
        with self._lock:
            return receipt_id in self._records

    def get(self, receipt_id: str) -> ScoreRecord:
        """Look up the record for an identifier.

        Raises:
            ReceiptNotFoundError: if nothing is stored under the identifier
        """
        with self._lock:
            record = self._records.get(receipt_id)
        if record is None:
            raise ReceiptNotFoundError(f"No receipt stored under id {receipt_id}")
        return record

    def __contains__(self, receipt_id: object) -> bool:
        return isinstance(receipt_id, str) and self.has(receipt_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


def generate_receipt_id(store: ReceiptStore, factory: Callable[[], UUID] = uuid4) -> str:
    """Generate an identifier that is not yet used in the store.

    Candidates that collide with an existing key are discarded and a new one
    is drawn, so an existing record is never overwritten.

    Args:
        store: store the identifier must be unique in
        factory: source of random UUIDs

    Returns:
        The identifier as a string
    """
    receipt_id = str(factory())
    while store.has(receipt_id):
        receipt_id = str(factory())
    return receipt_id


__all__ = ["ReceiptStore", "generate_receipt_id"]
