"""
Transactional Key-Value Store

An in-memory key-value store with integer values and a single transaction
at a time: writes are staged, then committed or rolled back as a unit.
"""

from .store import Store
from .async_store import AsyncStore
from .transaction import TransactionState
from .exceptions import (
    ErrorKind,
    StoreError,
    TransactionError,
    KeyNotFoundError,
    NoActiveTransactionError,
    TransactionAlreadyActiveError,
)

__version__ = "0.1.0"
__all__ = [
    "Store",
    "AsyncStore",
    "TransactionState",
    "ErrorKind",
    "StoreError",
    "TransactionError",
    "KeyNotFoundError",
    "NoActiveTransactionError",
    "TransactionAlreadyActiveError",
]
