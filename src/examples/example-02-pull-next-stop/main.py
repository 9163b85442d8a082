"""
Example 02: Pulling From a Push Producer

pull() inverts control. The consumer asks for one pair at a time with
next() and the producer is parked inside its yield call in between.
"""

from pull_iterators import RandomValuesGenerator, pull


if __name__ == "__main__":
    print("Pulling every pair with next():")

    next_pair, stop = pull(RandomValuesGenerator(limit=10, seed=42))
    try:
        i, v, ok = next_pair()
        while ok:
            print(f"  next() = ({i}, {v}, {ok})")
            i, v, ok = next_pair()

        print("\nCalling next() after the end:")
        print(f"  next() = {next_pair()}")  # (0, 0, False), forever
    finally:
        stop()

    print("\n✅ next() turns a callback producer into an ordinary pull loop!")
