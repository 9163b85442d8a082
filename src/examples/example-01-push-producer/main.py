"""
Example 01: Push-style Producers

A producer does not return values. It calls a yield callback once per
pair and checks the answer: True means "keep going", False means "stop".
"""


def countdown(yield_):
    """Producer that pushes (step, value) pairs to the callback."""
    for step, value in enumerate(range(5, 0, -1)):
        if not yield_(step, value):
            print("  producer: told to stop")
            return
    print("  producer: limit reached")


if __name__ == "__main__":
    print("Driving the producer with a callback that accepts everything:")

    def print_all(step, value):
        print(f"  {step}: {value}")
        return True

    countdown(print_all)

    print("\nDriving the producer with a callback that stops after 2 pairs:")
    seen = []

    def first_two(step, value):
        seen.append(value)
        print(f"  {step}: {value}")
        return len(seen) < 2

    countdown(first_two)

    print("\n✅ The producer is in control: the consumer can only answer!")
