#!/usr/bin/env python3
"""
Example usage of the transactional key-value store.

Runs the reference scenario, printing each returned value or error message.
"""

import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from txstore import Store, StoreError


def attempt(description, operation, *args):
    """Run one store call and print its result or error."""
    try:
        result = operation(*args)
    except StoreError as e:
        print(f"   - {description}: error: {e}")
        return
    if result is None:
        print(f"   - {description}: ok")
    else:
        print(f"   - {description}: {result}")


def main():
    """Demonstrate the Store functionality."""
    print("=== Transactional Key-Value Store Demo ===\n")

    store = Store()

    print("1. Outside a transaction:")
    attempt("get('A')", store.get, "A")
    attempt("put('A', 5)", store.put, "A", 5)

    print("\n2. Commit:")
    attempt("begin()", store.begin)
    attempt("put('A', 5)", store.put, "A", 5)
    attempt("get('A') inside the transaction", store.get, "A")
    attempt("put('A', 6)", store.put, "A", 6)
    attempt("commit()", store.commit)
    attempt("get('A')", store.get, "A")

    print("\n3. No transaction open:")
    attempt("commit()", store.commit)
    attempt("rollback()", store.rollback)
    attempt("get('B')", store.get, "B")

    print("\n4. Rollback:")
    attempt("begin()", store.begin)
    attempt("put('B', 10)", store.put, "B", 10)
    attempt("rollback()", store.rollback)
    attempt("get('B')", store.get, "B")

    print("\n5. Final committed data:")
    for key, value in store._get_committed_data().items():
        print(f"   - {key}: {value}")

    print("\n=== Demo completed successfully! ===")


if __name__ == "__main__":
    main()
