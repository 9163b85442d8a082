"""Abstract interface for push-style sequence producers."""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Tuple

from .protocols import YieldFunc
from .pull import PullAdapter


class SequenceProducer(ABC):
    """Abstract base class for producers of ``(key, value)`` pairs."""

    #: Payload returned by a pull adapter once the sequence has ended.
    zero: Tuple[Any, Any] = (None, None)

    @abstractmethod
    def run(self, yield_: YieldFunc) -> None:
        """Push every pair of the sequence to ``yield_``.

        ``yield_`` is called once per pair, in order. When it returns False
        the producer must clean up and return without calling it again.

        Args:
            yield_: Callback receiving ``(key, value)`` and returning whether
                to continue
        """
        pass

    def pull(self) -> PullAdapter:
        """Wrap this producer in a pull adapter."""
        return PullAdapter(self)

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        """Iterate over the pairs; leaving the loop early stops the producer."""
        with PullAdapter(self) as adapter:
            yield from adapter
