"""
Main Store class implementation for the transactional key-value store.
"""

from contextlib import contextmanager
from typing import Dict, Iterator, Mapping, Optional

from .transaction import TransactionManager, TransactionState


class Store:
    """
    A transactional key-value store with at most one open transaction.

    Writes are staged with put() and become visible to reads made outside
    the transaction only once commit() runs. rollback() discards them.
    Reads made while the transaction is open see its own staged writes.

    Example usage:
        store = Store()

        store.begin()
        store.put("a", 5)
        store.get("a")     # 5, the transaction sees its own write
        store.commit()

        store.begin()
        store.put("b", 10)
        store.rollback()
        store.get("b")     # raises KeyNotFoundError

        with store.transaction():
            store.put("c", 1)
    """

    def __init__(self, initial_data: Optional[Mapping[str, int]] = None) -> None:
        """
        Initialize the store.

        Args:
            initial_data: Optional committed key-value pairs to start from.
        """
        self._transaction_manager = TransactionManager(initial_data)

    def get(self, key: str) -> int:
        """
        Get the value for a key.

        Callable with or without an active transaction.

        Args:
            key: The key to retrieve

        Returns:
            The staged value if the active transaction wrote the key,
            otherwise the committed value

        Raises:
            KeyNotFoundError: If the key has neither a staged nor a committed value
        """
        return self._transaction_manager.get(key)

    def put(self, key: str, value: int) -> None:
        """
        Stage a key-value pair in the current transaction.

        Args:
            key: The key to set
            value: The integer value to associate with the key

        Raises:
            NoActiveTransactionError: If no transaction is active
        """
        self._transaction_manager.put(key, value)

    def begin(self) -> None:
        """
        Begin a new transaction.

        Raises:
            TransactionAlreadyActiveError: If a transaction is already active
        """
        self._transaction_manager.begin()

    def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            NoActiveTransactionError: If no transaction is active
        """
        self._transaction_manager.commit()

    def rollback(self) -> None:
        """
        Rollback the current transaction.

        Raises:
            NoActiveTransactionError: If no transaction is active
        """
        self._transaction_manager.rollback()

    @contextmanager
    def transaction(self) -> Iterator["Store"]:
        """
        Run a block inside a transaction.

        Commits when the block finishes, rolls back and re-raises if it fails.
        A block that ends the transaction itself is left as it ended it.
        """
        self.begin()
        try:
            yield self
        except BaseException:
            if self.has_active_transaction():
                self.rollback()
            raise
        if self.has_active_transaction():
            self.commit()

    # Additional utility methods

    def has_active_transaction(self) -> bool:
        """
        Check if there's an active transaction.

        Returns:
            True if there's an active transaction, False otherwise
        """
        return self._transaction_manager.has_active_transaction()

    @property
    def state(self) -> TransactionState:
        return self._transaction_manager.state

    def _get_committed_data(self) -> Dict[str, int]:
        """
        Get the committed data (for testing purposes).

        Returns:
            A copy of the committed data
        """
        return self._transaction_manager.committed_data.copy()

    def __contains__(self, key: str) -> bool:
        return self._transaction_manager.contains(key)

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit, discarding any transaction left open."""
        if self.has_active_transaction():
            self.rollback()
