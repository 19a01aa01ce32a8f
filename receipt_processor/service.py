"""Receipt processing workflow shared by the HTTP handlers."""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict

from .errors import ReceiptNotFoundError, StorageError
from .models import Receipt, ScoreRecord
from .scoring import score_receipt
from .storage import ReceiptStore, generate_receipt_id
from .validation import validate_receipt

logger = logging.getLogger(__name__)


def record_receipt(
    store: ReceiptStore,
    receipt_id: str,
    receipt: Receipt,
    document: Dict[str, Any],
) -> ScoreRecord:
    """Score a validated receipt and store the result under receipt_id.

    Args:
        store: target store
        receipt_id: identifier chosen by the caller
        receipt: validated receipt
        document: the submitted document, kept verbatim on the record

    Returns:
        The stored score record
    """
    record = ScoreRecord(points=score_receipt(receipt), receipt=copy.deepcopy(document))
    store.put(receipt_id, record)
    return record


def process_receipt(store: ReceiptStore, document: Any) -> str:
    """Validate, score and store a submitted receipt.

    Returns:
        Identifier of the new score record

    Raises:
        InvalidReceiptError: if the document fails validation. Nothing is stored.
    """
    receipt = validate_receipt(document)
    receipt_id = generate_receipt_id(store)
    record = record_receipt(store, receipt_id, receipt, document)
    logger.info(f"Receipt {receipt_id} from {receipt.retailer!r} scored {record.points} points")
    return receipt_id


def get_points(store: ReceiptStore, receipt_id: str) -> int:
    """Return the points stored for an identifier.

    Raises:
        ReceiptNotFoundError: if the identifier is unknown
        StorageError: if the store fails for any other reason
    """
    try:
        if not store.has(receipt_id):
            raise ReceiptNotFoundError(f"No receipt stored under id {receipt_id}")
        record = store.get(receipt_id)
    except ReceiptNotFoundError:
        raise
    except Exception as e:
        logger.exception(f"Failed to read receipt {receipt_id} from the store")
        raise StorageError(str(e)) from e
    return record.points


__all__ = ["get_points", "process_receipt", "record_receipt"]
