#!/usr/bin/env python3
"""
Example demonstrating async functionality of the transactional key-value store.
"""

import asyncio
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from txstore import AsyncStore, TransactionAlreadyActiveError, KeyNotFoundError


async def demonstrate_async_basic_operations():
    """Demonstrate basic async operations."""
    print("=== Async Basic Operations Demo ===\n")

    store = AsyncStore()
    print("1. Async store initialized")

    await store.begin()
    print("   - Transaction started")

    await store.put("apples", 3)
    await store.put("pears", 7)
    print("   - Put apples=3, pears=7")
    print(f"   - Get apples inside the transaction: {await store.get('apples')}")

    await store.commit()
    print("   - Transaction committed")

    print("\n2. Rollback inside a transaction block:")
    try:
        async with store.transaction():
            await store.put("apples", 100)
            raise RuntimeError("abandon the update")
    except RuntimeError as e:
        print(f"   - Block failed ({e}), transaction rolled back")
    print(f"   - apples is still {await store.get('apples')}")

    try:
        await store.get("plums")
    except KeyNotFoundError as e:
        print(f"   - {e}")


async def demonstrate_contended_transactions():
    """Demonstrate several tasks taking turns at the single transaction."""
    print("\n=== Contended Transactions Demo ===\n")

    store = AsyncStore()

    async def worker(worker_id: int) -> int:
        """Retry begin() until the transaction slot is free."""
        attempts = 0
        while True:
            attempts += 1
            try:
                await store.begin()
                break
            except TransactionAlreadyActiveError:
                await asyncio.sleep(0.001)

        await store.put(f"worker_{worker_id}", worker_id)
        # Hold the transaction open while other workers try to begin
        await asyncio.sleep(0.005)
        await store.commit()
        return attempts

    print("1. Starting 5 workers...")
    attempts = await asyncio.gather(*(worker(i) for i in range(5)))
    for worker_id, count in enumerate(attempts):
        print(f"   - Worker {worker_id} began after {count} attempt(s)")

    committed_data = await store._get_committed_data()
    print(f"2. Total keys committed: {len(committed_data)}")


async def main():
    """Run all async demonstrations."""
    print("=== Async Transactional Key-Value Store Demo ===")

    await demonstrate_async_basic_operations()
    await demonstrate_contended_transactions()

    print("\n=== All async demos completed successfully! ===")


if __name__ == "__main__":
    asyncio.run(main())
