"""
Test the reference scenario run by example.py.
"""

import pytest
import sys
import os

# Add src and the project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from txstore import Store
from txstore.exceptions import KeyNotFoundError, NoActiveTransactionError

import example


class TestRequirementsExample:
    """Test the reference scenario step by step."""

    def test_reference_scenario_step_by_step(self):
        """
        Test the exact sequence of the reference driver:
        get A, put A outside a transaction, commit A=6, commit/rollback
        with nothing open, then roll back B=10.
        """
        store = Store()

        # A does not exist yet
        with pytest.raises(KeyNotFoundError):
            store.get("A")

        # No transaction in progress
        with pytest.raises(NoActiveTransactionError):
            store.put("A", 5)

        store.begin()
        store.put("A", 5)
        # The open transaction reads its own staged write
        assert store.get("A") == 5
        assert store._get_committed_data() == {}

        store.put("A", 6)
        store.commit()
        assert store.get("A") == 6

        with pytest.raises(NoActiveTransactionError):
            store.commit()
        with pytest.raises(NoActiveTransactionError):
            store.rollback()

        with pytest.raises(KeyNotFoundError):
            store.get("B")

        store.begin()
        store.put("B", 10)
        store.rollback()

        with pytest.raises(KeyNotFoundError):
            store.get("B")

        assert store._get_committed_data() == {"A": 6}
        assert not store.has_active_transaction()


class TestExampleDriver:
    """Test the printed output of example.py."""

    def test_example_output(self, capsys):
        """Test each call prints its value or error message."""
        example.main()
        lines = [line.strip() for line in capsys.readouterr().out.splitlines()]

        assert "- get('A'): error: Key not found: A" in lines
        assert "- put('A', 5): error: No transaction in progress" in lines
        assert "- get('A') inside the transaction: 5" in lines
        assert "- get('A'): 6" in lines
        assert "- commit(): error: No transaction in progress" in lines
        assert "- rollback(): error: No transaction in progress" in lines
        assert "- get('B'): error: Key not found: B" in lines
        assert "- A: 6" in lines
        assert "- B: 10" not in lines
        assert lines[-1] == "=== Demo completed successfully! ==="
