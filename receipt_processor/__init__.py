"""
Receipt processor: scores retail receipts for reward points.

Quickstart::

    from receipt_processor import ReceiptStore, get_points, process_receipt

    store = ReceiptStore()
    receipt_id = process_receipt(
        store,
        {
            "retailer": "Target",
            "purchaseDate": "2022-01-01",
            "purchaseTime": "13:01",
            "total": "6.49",
            "items": [{"shortDescription": "Mountain Dew 12PK", "price": "6.49"}],
        },
    )
    print(get_points(store, receipt_id))

Run the HTTP API with ``receipt-processor`` or
``uvicorn receipt_processor.server:app``.
"""

from .config import Settings, get_settings, load_env
from .errors import (
    InvalidReceiptError,
    ReceiptNotFoundError,
    ReceiptProcessorError,
    StorageError,
)
from .models import LineItem, Receipt, ScoreRecord
from .scoring import score_receipt
from .service import get_points, process_receipt
from .storage import ReceiptStore, generate_receipt_id
from .validation import validate_receipt

load_env()

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "InvalidReceiptError",
    "LineItem",
    "Receipt",
    "ReceiptNotFoundError",
    "ReceiptProcessorError",
    "ReceiptStore",
    "ScoreRecord",
    "StorageError",
    "generate_receipt_id",
    "get_points",
    "get_settings",
    "load_env",
    "process_receipt",
    "score_receipt",
    "validate_receipt",
    "__version__",
]
