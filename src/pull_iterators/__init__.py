"""Pull iterators - drive push-style producers one pair at a time."""

__version__ = "0.1.0"

from .errors import LineReadError, ProducerContractError
from .models import AdapterState, PullResult, PullStatistics, Termination
from .producer_interface import SequenceProducer
from .producers import (
    DataFrameRowsProducer,
    FileReader,
    MappingProducer,
    RandomValuesGenerator,
    SliceProducer,
)
from .pull import PullAdapter, pull
from .sinks import collect_dataframe, write_parquet

__all__ = [
    # Adapter
    "PullAdapter",
    "pull",
    # Models
    "AdapterState",
    "PullResult",
    "PullStatistics",
    "Termination",
    # Errors
    "LineReadError",
    "ProducerContractError",
    # Producers
    "SequenceProducer",
    "RandomValuesGenerator",
    "FileReader",
    "SliceProducer",
    "MappingProducer",
    "DataFrameRowsProducer",
    # Sinks
    "collect_dataframe",
    "write_parquet",
]
