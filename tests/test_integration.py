"""
Integration tests for the complete transactional key-value store system.
"""

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from txstore import Store
from txstore.exceptions import (
    KeyNotFoundError,
    NoActiveTransactionError,
    TransactionAlreadyActiveError,
)


class TestEndToEndScenarios:
    """Test complete end-to-end scenarios."""

    def test_error_recovery_scenario(self):
        """Test the store stays usable after every kind of failure."""
        store = Store()

        store.begin()
        store.put("counter", 0)
        store.put("status", 0)
        store.commit()

        store.begin()
        counter = store.get("counter")
        store.put("counter", counter + 1)

        with pytest.raises(KeyNotFoundError):
            store.get("nonexistent_key")
        with pytest.raises(TransactionAlreadyActiveError):
            store.begin()

        # Failures above left the transaction untouched
        store.put("status", 1)
        assert store.get("counter") == 1
        store.commit()

        with pytest.raises(NoActiveTransactionError):
            store.put("status", 2)
        with pytest.raises(NoActiveTransactionError):
            store.rollback()

        assert store._get_committed_data() == {"counter": 1, "status": 1}

    def test_transfer_between_accounts(self):
        """Test a multi-key update is applied all at once or not at all."""
        store = Store({"alice": 100, "bob": 20})

        def transfer(source, target, amount):
            with store.transaction():
                store.put(source, store.get(source) - amount)
                if store.get(source) < 0:
                    raise ValueError("insufficient funds")
                store.put(target, store.get(target) + amount)

        transfer("alice", "bob", 30)
        assert store._get_committed_data() == {"alice": 70, "bob": 50}

        with pytest.raises(ValueError):
            transfer("bob", "alice", 80)
        assert store._get_committed_data() == {"alice": 70, "bob": 50}

    def test_transfer_to_missing_account(self):
        """Test a KeyNotFoundError inside a block rolls the block back."""
        store = Store({"alice": 100})

        with pytest.raises(KeyNotFoundError):
            with store.transaction():
                store.put("alice", store.get("alice") - 10)
                store.put("carol", store.get("carol") + 10)

        assert store.get("alice") == 100
        assert "carol" not in store

    def test_counter_increments(self):
        """Test read-modify-write across many committed transactions."""
        store = Store({"hits": 0})
        for _ in range(10):
            store.begin()
            store.put("hits", store.get("hits") + 1)
            store.commit()
        assert store.get("hits") == 10
