"""
Example 04: Reading Files With Pull

The file reader yields (line, error) pairs. The consumer decides when it
has seen enough; stopping closes the file right away.
"""

import os
import tempfile

from pull_iterators import FileReader, PullAdapter


if __name__ == "__main__":
    with tempfile.NamedTemporaryFile(mode='w', delete=False, suffix='.txt') as f:
        test_file = f.name
        f.write("Lorem ipsum dolor sit amet\n")
        f.write("Donec malesuada suscipit nulla, STOP HERE\n")
        f.write("Should never be read\n")

    try:
        with PullAdapter(FileReader(test_file)) as lines:
            for line, err in lines:
                if err is not None:
                    print(f"Error: {err}")
                elif "STOP" in line:
                    print(f"Stop: {line}")
                    break
                else:
                    print(f"Read line: {line}")

        print("\nA missing file is reported as a single error pair:")
        for line, err in FileReader("does-not-exist.txt"):
            print(f"  line={line!r} error={err}")
    finally:
        os.unlink(test_file)

    print("\n✅ The third line is never read!")
