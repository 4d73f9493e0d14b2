"""
Transaction management for the key-value store.
"""

import logging
from enum import Enum
from typing import Dict, Mapping, Optional

from .exceptions import (
    KeyNotFoundError,
    NoActiveTransactionError,
    TransactionAlreadyActiveError,
)

logger = logging.getLogger(__name__)


class TransactionState(Enum):
    """Transaction state enumeration."""
    IDLE = "idle"
    IN_TRANSACTION = "in_transaction"


def validate_key(key: str) -> None:
    """Raise TypeError unless the key is a str."""
    if not isinstance(key, str):
        raise TypeError(f"Keys must be str, not {type(key).__name__}")


def validate_value(value: int) -> None:
    """Raise TypeError unless the value is an int (bool excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Values must be int, not {type(value).__name__}")


class TransactionManager:
    """
    Holds the committed data and the staged changes of the single active
    transaction.

    Every method either succeeds or raises before touching any state, so a
    failed call leaves the manager exactly as it was.
    """

    def __init__(self, initial_data: Optional[Mapping[str, int]] = None) -> None:
        self.committed_data: Dict[str, int] = {}
        self.changes: Dict[str, int] = {}
        self.state = TransactionState.IDLE

        if initial_data:
            for key, value in initial_data.items():
                validate_key(key)
                validate_value(value)
            self.committed_data.update(initial_data)

    def has_active_transaction(self) -> bool:
        """Check if there's an active transaction."""
        return self.state is TransactionState.IN_TRANSACTION

    def begin(self) -> None:
        """Start a transaction with an empty set of changes."""
        if self.has_active_transaction():
            raise TransactionAlreadyActiveError()

        self.changes.clear()
        self.state = TransactionState.IN_TRANSACTION
        logger.debug("Transaction started")

    def commit(self) -> None:
        """Apply staged changes to the committed data and end the transaction."""
        if not self.has_active_transaction():
            raise NoActiveTransactionError()

        self.committed_data.update(self.changes)
        logger.debug("Transaction committed (%d keys)", len(self.changes))
        self.changes.clear()
        self.state = TransactionState.IDLE

    def rollback(self) -> None:
        """Discard staged changes and end the transaction."""
        if not self.has_active_transaction():
            raise NoActiveTransactionError()

        logger.debug("Transaction rolled back (%d keys discarded)", len(self.changes))
        self.changes.clear()
        self.state = TransactionState.IDLE

    def get(self, key: str) -> int:
        """Get a value, preferring the active transaction's own writes."""
        validate_key(key)
        if self.has_active_transaction() and key in self.changes:
            return self.changes[key]
        if key in self.committed_data:
            return self.committed_data[key]
        raise KeyNotFoundError(key)

    def put(self, key: str, value: int) -> None:
        """Stage a value in the current transaction."""
        if not self.has_active_transaction():
            raise NoActiveTransactionError()

        validate_key(key)
        validate_value(value)
        self.changes[key] = value

    def contains(self, key: str) -> bool:
        """Check if get() would find a value for the key."""
        if self.has_active_transaction() and key in self.changes:
            return True
        return key in self.committed_data
