"""
Custom exceptions for the transactional key-value store.
"""

from enum import Enum


class ErrorKind(Enum):
    """The kinds of failure a store operation can report."""
    KEY_NOT_FOUND = "key_not_found"
    NO_ACTIVE_TRANSACTION = "no_active_transaction"
    TRANSACTION_ALREADY_ACTIVE = "transaction_already_active"


class StoreError(Exception):
    """Base exception for all store-related errors."""
    kind: ErrorKind


class KeyNotFoundError(StoreError, KeyError):
    """Exception raised when a key has no value in the store."""
    kind = ErrorKind.KEY_NOT_FOUND

    def __init__(self, key: str) -> None:
        super().__init__(f"Key not found: {key}")
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class TransactionError(StoreError):
    """Exception raised for transaction-related errors."""
    pass


class NoActiveTransactionError(TransactionError):
    """Exception raised when put/commit/rollback is called without an active transaction."""
    kind = ErrorKind.NO_ACTIVE_TRANSACTION

    def __init__(self, message: str = "No transaction in progress") -> None:
        super().__init__(message)


class TransactionAlreadyActiveError(TransactionError):
    """Exception raised when begin() is called while a transaction is open."""
    kind = ErrorKind.TRANSACTION_ALREADY_ACTIVE

    def __init__(self, message: str = "Transaction already in progress") -> None:
        super().__init__(message)
