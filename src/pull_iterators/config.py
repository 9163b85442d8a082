"""Configuration management for the application."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class AppConfig:
    """Application configuration parameters."""

    random_limit: int = 10
    random_upper_bound: int = 100
    random_seed: Optional[int] = None
    input_file: str = "./dump.txt"
    output_dir: str = "./output"
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.random_limit <= 0:
            raise ValueError("random_limit must be positive")
        if self.random_upper_bound <= 0:
            raise ValueError("random_upper_bound must be positive")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load application configuration from environment variables.

        RANDOM_SEED is optional; when unset or empty the random generator is
        left unseeded.
        """
        seed = os.getenv("RANDOM_SEED") or None
        return cls(
            random_limit=int(os.getenv("RANDOM_LIMIT", "10")),
            random_upper_bound=int(os.getenv("RANDOM_UPPER_BOUND", "100")),
            random_seed=int(seed) if seed is not None else None,
            input_file=os.getenv("INPUT_FILE", "./dump.txt"),
            output_dir=os.getenv("OUTPUT_DIR", "./output"),
            verbose=os.getenv("VERBOSE", "false").lower() == "true",
        )


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return AppConfig.from_env()
