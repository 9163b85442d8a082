"""Concrete sequence producers."""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Union

import pandas as pd
from faker import Faker

from .errors import LineReadError
from .producer_interface import SequenceProducer
from .protocols import YieldFunc

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
DEFAULT_UPPER_BOUND = 100


class RandomValuesGenerator(SequenceProducer):
    """Produce ``limit`` pairs of ``(index, random int in [0, upper_bound))``."""

    zero = (0, 0)

    def __init__(
        self,
        limit: int = DEFAULT_LIMIT,
        upper_bound: int = DEFAULT_UPPER_BOUND,
        seed: Optional[int] = None,
    ):
        """Initialize the generator.

        Args:
            limit: Number of pairs to produce
            upper_bound: Exclusive upper bound of the drawn values
            seed: Random seed for reproducibility
        """
        if limit < 0:
            raise ValueError("limit must not be negative")
        if upper_bound <= 0:
            raise ValueError("upper_bound must be positive")
        self.limit = limit
        self.upper_bound = upper_bound
        self.faker = Faker()
        if seed is not None:
            self.faker.seed_instance(seed)

    def run(self, yield_: YieldFunc) -> None:
        for i in range(self.limit):
            value = self.faker.random_int(min=0, max=self.upper_bound - 1)
            if not yield_(i, value):
                logger.info("Received stop")
                return
        logger.info("Limit reached")


class FileReader(SequenceProducer):
    """Produce ``(line, error)`` pairs from a text file.

    Each line is yielded without its trailing ``\\n`` or ``\\r\\n`` and with
    ``None`` as the error. Lines are split on raw bytes and decoded one at a
    time, so undecodable bytes only affect their own line. If the file
    cannot be opened or a read fails, a single ``("", LineReadError)`` pair
    is yielded and the reader stops. The file is closed on every exit path.
    """

    zero = ("", None)

    def __init__(
        self,
        file: Union[str, Path],
        encoding: str = "utf-8",
        errors: str = "replace",
    ):
        self.file = Path(file)
        self.encoding = encoding
        self.errors = errors

    def run(self, yield_: YieldFunc) -> None:
        try:
            handle = open(self.file, "rb")
        except OSError as e:
            error = LineReadError(f"open: {e}")
            error.__cause__ = e
            yield_("", error)
            return

        with handle:
            logger.debug(f"Opened {self.file}")
            while True:
                try:
                    raw = handle.readline()
                except OSError as e:
                    error = LineReadError(f"read line: {e}")
                    error.__cause__ = e
                    yield_("", error)
                    return
                if not raw:
                    return
                if not yield_(self._decode(raw), None):
                    logger.debug(f"Stopped reading {self.file}")
                    return

    def _decode(self, raw: bytes) -> str:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        return raw.decode(self.encoding, self.errors)


class SliceProducer(SequenceProducer):
    """Produce ``(index, item)`` pairs over a sequence."""

    zero = (0, None)

    def __init__(self, items: Sequence[Any]):
        self.items = items

    def run(self, yield_: YieldFunc) -> None:
        for i, item in enumerate(self.items):
            if not yield_(i, item):
                return


class MappingProducer(SequenceProducer):
    """Produce ``(key, value)`` pairs over a mapping, in mapping order."""

    def __init__(self, mapping: Mapping[Any, Any]):
        self.mapping = mapping

    def run(self, yield_: YieldFunc) -> None:
        for key, value in self.mapping.items():
            if not yield_(key, value):
                return


class DataFrameRowsProducer(SequenceProducer):
    """Produce ``(index, row)`` pairs over a pandas DataFrame.

    Rows are delivered as plain dictionaries keyed by column name.
    """

    def __init__(self, df: pd.DataFrame):
        self.df = df

    def run(self, yield_: YieldFunc) -> None:
        columns = list(self.df.columns)
        for index, *values in self.df.itertuples(index=True, name=None):
            row: Dict[str, Any] = dict(zip(columns, values))
            if not yield_(index, row):
                return
