"""
Async Store class implementation for the transactional key-value store.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Mapping, Optional

from .transaction import TransactionManager, TransactionState


class AsyncStore:
    """
    An async transactional key-value store for use by several tasks.

    Every operation runs under one asyncio.Lock covering the committed data,
    the staged changes and the transaction state. There is still only one
    transaction at a time: a second begin() fails instead of waiting.

    The open transaction is not tied to the task that began it. Any task
    can put(), commit() or rollback() into it, so cooperating tasks must
    agree on which of them owns the transaction between begin() and its end.

    Example usage:
        store = AsyncStore()

        await store.begin()
        await store.put("a", 5)
        await store.commit()

        async with store.transaction():
            await store.put("b", 10)
    """

    def __init__(self, initial_data: Optional[Mapping[str, int]] = None) -> None:
        """
        Initialize the async store.

        Args:
            initial_data: Optional committed key-value pairs to start from.
        """
        self._transaction_manager = TransactionManager(initial_data)
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> int:
        """
        Get the value for a key.

        Raises:
            KeyNotFoundError: If the key has neither a staged nor a committed value
        """
        async with self._lock:
            return self._transaction_manager.get(key)

    async def put(self, key: str, value: int) -> None:
        """
        Stage a key-value pair in the current transaction.

        Raises:
            NoActiveTransactionError: If no transaction is active
        """
        async with self._lock:
            self._transaction_manager.put(key, value)

    async def begin(self) -> None:
        """
        Begin a new transaction.

        Raises:
            TransactionAlreadyActiveError: If a transaction is already active
        """
        async with self._lock:
            self._transaction_manager.begin()

    async def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            NoActiveTransactionError: If no transaction is active
        """
        async with self._lock:
            self._transaction_manager.commit()

    async def rollback(self) -> None:
        """
        Rollback the current transaction.

        Raises:
            NoActiveTransactionError: If no transaction is active
        """
        async with self._lock:
            self._transaction_manager.rollback()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["AsyncStore"]:
        """
        Run a block inside a transaction, rolling back if it fails.

        A block that ends the transaction itself is left as it ended it.
        """
        await self.begin()
        try:
            yield self
        except BaseException:
            async with self._lock:
                if self._transaction_manager.has_active_transaction():
                    self._transaction_manager.rollback()
            raise
        async with self._lock:
            if self._transaction_manager.has_active_transaction():
                self._transaction_manager.commit()

    # Additional utility methods

    def has_active_transaction(self) -> bool:
        """Check if there's an active transaction."""
        return self._transaction_manager.has_active_transaction()

    @property
    def state(self) -> TransactionState:
        return self._transaction_manager.state

    async def _get_committed_data(self) -> Dict[str, int]:
        """
        Get the committed data (for testing purposes).

        Returns:
            A copy of the committed data
        """
        async with self._lock:
            return self._transaction_manager.committed_data.copy()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit, discarding any transaction left open."""
        async with self._lock:
            if self._transaction_manager.has_active_transaction():
                self._transaction_manager.rollback()
