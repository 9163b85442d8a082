"""Main entry point: walk through the pull iteration exercises."""

import logging
import sys
from pathlib import Path

from .config import AppConfig, get_app_config
from .producers import FileReader, MappingProducer, RandomValuesGenerator, SliceProducer
from .pull import pull
from .sinks import write_parquet

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

SAMPLE_LINES = [
    "Lorem ipsum dolor sit amet",
    "Donec malesuada suscipit nulla, STOP HERE",
    "Should never be read",
]


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def ensure_sample_file(path: Path) -> bool:
    """Write the sample input file if it does not exist yet.

    Returns:
        True if the file was created
    """
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    logger.info(f"Created sample input file: {path}")
    return True


def exercise_slice():
    print("Exercise 1: Base iterator usage with slice")
    items = ["a", "b", "c", "d", "e", "f", "g", "h"]
    for i, s in SliceProducer(items):
        print(f"{i}: {s}; ", end="")
    print()


def exercise_mapping():
    print("Exercise 2: Base iterator usage with map")
    vendors = {"Apple": "United States", "Samsung": "South Korea", "Xiaomi": "China"}
    for k, v in MappingProducer(vendors):
        print(f"{k}: {v}; ", end="")
    print()


def exercise_range(config: AppConfig):
    print("Exercise 3: Custom iterator usage with a for loop")
    generator = _random_generator(config)
    for i, v in generator:
        print(f"{i}: {v}; ", end="")
    print()


def exercise_pull(config: AppConfig):
    print("Exercise 4: Custom iterator usage with pull")
    next_pair, stop = pull(_random_generator(config))
    try:
        i, v, ok = next_pair()
        while ok:
            print(f"{i}: {v}; ", end="")
            i, v, ok = next_pair()
        print()

        print("Exercise 4.1: Call iterator one more time")
        i, v, ok = next_pair()
        print(f"{i}: {v}: {ok};")
    finally:
        stop()


def exercise_early_stop(config: AppConfig, count: int = 5):
    print("Exercise 5: Custom iterator usage with pull and custom stop")
    next_pair, stop = pull(_random_generator(config))
    for _ in range(count):
        j, v, ok = next_pair()
        if not ok:
            break
        print(f"{j}: {v}; ", end="")
    print()
    stop()

    print("Exercise 5.1: Call iterator one more time")
    i, v, ok = next_pair()
    print(f"{i}: {v}: {ok};")

    print("Exercise 5.2: Call stop one more time")
    stop()
    print("OK")


def exercise_read_file(config: AppConfig):
    print("Exercise 6: Read file with iterator")
    next_pair, stop = pull(FileReader(config.input_file))
    try:
        line, err, ok = next_pair()
        while ok:
            if err is not None:
                print(f"Error: {err}")
            elif "STOP" in line:
                print(f"Stop: {line}")
                stop()
            else:
                print(f"Read line: {line}")
            line, err, ok = next_pair()
    finally:
        stop()


def exercise_parquet(config: AppConfig) -> dict:
    print("Exercise 7: Drain a producer into a Parquet file")
    output_path = Path(config.output_dir) / "random_values.parquet"
    stats = write_parquet(_random_generator(config), output_path)
    print(f"Wrote {stats['num_rows']} pairs to {stats['file_path']}")
    return stats


def _random_generator(config: AppConfig) -> RandomValuesGenerator:
    return RandomValuesGenerator(
        limit=config.random_limit,
        upper_bound=config.random_upper_bound,
        seed=config.random_seed,
    )


def main():
    """Main execution function."""
    try:
        config = get_app_config()
        setup_logging(config.verbose)

        ensure_sample_file(Path(config.input_file))

        exercises = [
            exercise_slice,
            exercise_mapping,
            lambda: exercise_range(config),
            lambda: exercise_pull(config),
            lambda: exercise_early_stop(config),
            lambda: exercise_read_file(config),
            lambda: exercise_parquet(config),
        ]
        for exercise in exercises:
            exercise()
            print()

        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
