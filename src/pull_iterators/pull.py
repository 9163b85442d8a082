"""Push-to-pull adapter for callback driven producers.

A producer pushes pairs by calling a ``yield_(key, value)`` callback and
waits for its boolean answer. :class:`PullAdapter` runs the producer on a
helper thread and hands each pair over through a one-slot queue, so the
consumer can pull pairs one at a time with :meth:`PullAdapter.next` and
cancel the producer with :meth:`PullAdapter.stop`.

Control passes strictly back and forth: while the consumer runs, the
producer is parked inside ``yield_``; while the producer runs, the consumer
is parked inside ``next()`` or ``stop()``. At most one pair is ever in
flight.
"""

import logging
import threading
import time
from queue import Queue
from typing import Any, Callable, Iterator, Optional, Tuple, Union

from .errors import ProducerContractError
from .models import AdapterState, PullResult, PullStatistics, Termination
from .protocols import LoggerProtocol, Producer, YieldFunc

# Posted by the producer thread once ``run`` has returned or raised.
_FINISHED = object()

ProducerLike = Union[Producer, Callable[[YieldFunc], None]]


def _resolve_run(producer: ProducerLike) -> Callable[[YieldFunc], None]:
    run = getattr(producer, "run", None)
    if callable(run):
        return run
    if callable(producer):
        return producer
    raise TypeError(
        f"Expected a producer with a run(yield_) method or a callable, "
        f"got {type(producer).__name__}"
    )


class PullAdapter:
    """
    Converts a push-style producer into a pull-style iterator.

    ``next()`` returns a :class:`PullResult` ``(key, value, ok)``. Once ``ok``
    is False it stays False, and the payload is the producer's zero pair.
    ``stop()`` may be called any number of times and never raises.

    Always call ``stop()`` (or use the adapter as a context manager) unless
    the sequence was drained. An adapter dropped mid-iteration leaves its
    producer thread parked inside ``yield_`` for good, still holding any
    resource it opened.
    """

    def __init__(
        self,
        producer: ProducerLike,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize adapter. The producer does not start until the first
        ``next()`` call.

        Args:
            producer: Object with a ``run(yield_)`` method, or a bare callable
            logger: Logger instance (defaults to module logger)
        """
        self._run_producer = _resolve_run(producer)
        self._name = getattr(producer, "__name__", None) or type(producer).__name__
        zero_key, zero_value = getattr(producer, "zero", (None, None))
        self._exhausted_result = PullResult(zero_key, zero_value, False)
        self._logger = logger or logging.getLogger(__name__)

        self._state = AdapterState.IDLE
        self._termination: Optional[Termination] = None
        self._pairs: Queue = Queue(maxsize=1)
        self._signals: Queue = Queue(maxsize=1)
        self._thread: Optional[threading.Thread] = None
        self._stop_requested = False
        self._error: Optional[BaseException] = None
        self._delivered = 0
        self._started_at: Optional[float] = None
        self._finished_at: Optional[float] = None

    @property
    def state(self) -> AdapterState:
        """Current lifecycle state."""
        return self._state

    @property
    def termination(self) -> Optional[Termination]:
        """Why the session ended, or None while it is still live."""
        return self._termination

    @property
    def delivered(self) -> int:
        """Number of pairs handed to the consumer so far."""
        return self._delivered

    def next(self) -> PullResult:
        """
        Demand the next pair from the producer.

        Returns:
            PullResult with ``ok=True`` and the pair, or the zero pair with
            ``ok=False`` once the sequence has ended

        Raises:
            Exception: Whatever the producer raised while producing this pair.
                The adapter is Done afterwards.
        """
        self._check_not_reentrant("next")

        if self._state is AdapterState.IDLE:
            self._start()
        elif self._state is AdapterState.RUNNING:
            self._signals.put(True)
        else:
            return self._exhausted_result

        item = self._pairs.get()
        if item is _FINISHED:
            self._finish()
            if self._error is not None:
                error, self._error = self._error, None
                raise error
            return self._exhausted_result

        self._delivered += 1
        key, value = item
        return PullResult(key, value, True)

    def stop(self) -> None:
        """
        Tell the producer to stop and wait until it has unwound.

        Safe to call before the first ``next()``, after exhaustion and any
        number of times. Errors raised while the producer unwinds are logged
        and swallowed.
        """
        self._check_not_reentrant("stop")

        if self._state is AdapterState.IDLE:
            self._state = AdapterState.DONE
            self._termination = Termination.STOPPED
            self._logger.debug(f"{self._name}: stopped before start")
            return
        if self._state is not AdapterState.RUNNING:
            return

        # The producer is parked inside yield_ waiting for a signal.
        self._state = AdapterState.DRAINING
        self._signals.put(False)
        self._pairs.get()
        self._finish()

        if self._error is not None:
            self._logger.warning(
                f"{self._name}: error while stopping producer ignored: {self._error!r}"
            )
            self._error = None

    def statistics(self) -> PullStatistics:
        """Return statistics for this session."""
        if self._started_at is None:
            elapsed = 0.0
        else:
            elapsed = (self._finished_at or time.time()) - self._started_at
        return PullStatistics(
            pairs_delivered=self._delivered,
            termination=self._termination,
            elapsed_time=elapsed,
        )

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        return self

    def __next__(self) -> Tuple[Any, Any]:
        key, value, ok = self.next()
        if not ok:
            raise StopIteration
        return key, value

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and stop the producer."""
        self.stop()

    def __repr__(self) -> str:
        return (
            f"PullAdapter(producer={self._name!r}, state={self._state.value}, "
            f"delivered={self._delivered})"
        )

    def _start(self) -> None:
        self._state = AdapterState.RUNNING
        self._started_at = time.time()
        self._thread = threading.Thread(
            target=self._produce,
            name=f"pull-{self._name}",
            daemon=True,
        )
        self._logger.debug(f"{self._name}: starting producer")
        self._thread.start()

    def _produce(self) -> None:
        """Producer thread body. Always ends by posting ``_FINISHED``."""
        try:
            self._run_producer(self._yield)
        except BaseException as e:
            self._error = e
        finally:
            self._pairs.put(_FINISHED)

    def _yield(self, key: Any, value: Any) -> bool:
        """Callback handed to the producer. Parks it until the next demand."""
        if self._stop_requested:
            raise ProducerContractError(
                f"{self._name} called yield after being told to stop"
            )
        self._pairs.put((key, value))
        proceed = self._signals.get()
        if not proceed:
            self._stop_requested = True
        return proceed

    def _finish(self) -> None:
        if self._thread is not None:
            self._thread.join()
        self._finished_at = time.time()

        if self._stop_requested:
            self._termination = Termination.STOPPED
        elif self._error is not None:
            self._termination = Termination.FAILED
        else:
            self._termination = Termination.EXHAUSTED
        self._state = AdapterState.DONE

        self._logger.debug(
            f"{self._name}: done ({self._termination.value}) after "
            f"{self._delivered} pairs"
        )

    def _check_not_reentrant(self, operation: str) -> None:
        if self._thread is not None and threading.current_thread() is self._thread:
            raise ProducerContractError(
                f"{operation}() called from inside {self._name}'s own run"
            )


def pull(
    producer: ProducerLike, logger: Optional[LoggerProtocol] = None
) -> Tuple[Callable[[], PullResult], Callable[[], None]]:
    """
    Wrap a producer and return its ``(next, stop)`` pair.

    Args:
        producer: Object with a ``run(yield_)`` method, or a bare callable
        logger: Logger instance

    Returns:
        Tuple of the bound ``next`` and ``stop`` operations
    """
    adapter = PullAdapter(producer, logger=logger)
    return adapter.next, adapter.stop
