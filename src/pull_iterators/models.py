"""Data models for pull iteration sessions."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, Optional


class AdapterState(str, Enum):
    """Lifecycle state of a pull adapter."""

    IDLE = "idle"
    RUNNING = "running"
    DRAINING = "draining"
    DONE = "done"


class Termination(str, Enum):
    """Why a pull session ended."""

    EXHAUSTED = "exhausted"
    STOPPED = "stopped"
    FAILED = "failed"


class PullResult(NamedTuple):
    """Result of a single ``next()`` call."""

    key: Any
    value: Any
    ok: bool


@dataclass
class PullStatistics:
    """Statistics for one pull session."""

    pairs_delivered: int = 0
    termination: Optional[Termination] = None
    elapsed_time: float = 0.0
