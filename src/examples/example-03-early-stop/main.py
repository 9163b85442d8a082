"""
Example 03: Stopping Early

stop() makes the producer's pending yield call return False, then waits
until the producer has unwound. It is safe to call more than once.
"""

import logging

from pull_iterators import PullAdapter, RandomValuesGenerator

logging.basicConfig(level=logging.INFO, format="  %(name)s: %(message)s")


if __name__ == "__main__":
    adapter = PullAdapter(RandomValuesGenerator(limit=10))

    print("Taking 5 of 10 pairs:")
    for _ in range(5):
        key, value, ok = adapter.next()
        print(f"  {key}: {value}")

    print("\nStopping (the producer logs 'Received stop'):")
    adapter.stop()

    print(f"\nnext() after stop = {adapter.next()}")
    adapter.stop()  # No error
    print(f"Session: {adapter.statistics()}")

    print("\n✅ stop() is idempotent and the producer cleans up exactly once!")
