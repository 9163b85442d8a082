"""Sinks that drain a pull session into pandas and Parquet."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from .pull import ProducerLike, PullAdapter

logger = logging.getLogger(__name__)

Source = Union[PullAdapter, ProducerLike]


def _as_adapter(source: Source) -> PullAdapter:
    if isinstance(source, PullAdapter):
        return source
    return PullAdapter(source)


def collect_dataframe(
    source: Source,
    limit: Optional[int] = None,
    key_column: str = "key",
    value_column: str = "value",
) -> pd.DataFrame:
    """Drain pairs into a DataFrame.

    Pulling stops after ``limit`` pairs, in which case the adapter is
    stopped so the producer can release its resources.

    Args:
        source: Pull adapter, or a producer to wrap in one
        limit: Maximum number of pairs to collect (None for all)
        key_column: Name of the key column
        value_column: Name of the value column

    Returns:
        DataFrame with one row per pair, in production order
    """
    if limit is not None and limit < 0:
        raise ValueError("limit must not be negative")

    adapter = _as_adapter(source)
    keys = []
    values = []
    try:
        while limit is None or len(keys) < limit:
            key, value, ok = adapter.next()
            if not ok:
                break
            keys.append(key)
            values.append(value)
    finally:
        adapter.stop()

    df = pd.DataFrame({key_column: keys, value_column: values})
    logger.debug(f"Collected {len(df):,} pairs into a DataFrame")
    return df


def write_parquet(
    source: Source,
    output_path: Union[str, Path],
    compression: str = "snappy",
    limit: Optional[int] = None,
) -> dict:
    """Drain pairs into a Parquet file.

    Args:
        source: Pull adapter, or a producer to wrap in one
        output_path: Path where the Parquet file will be written
        compression: Compression codec to use (snappy, gzip, zstd, etc.)
        limit: Maximum number of pairs to write (None for all)

    Returns:
        Dictionary with write statistics
    """
    df = collect_dataframe(source, limit=limit)
    table = pa.Table.from_pandas(df, preserve_index=False)

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(table, str(output_path), compression=compression)

    file_size = os.path.getsize(output_path)
    stats = {
        "file_path": str(output_path),
        "file_size_bytes": file_size,
        "num_rows": table.num_rows,
        "num_columns": table.num_columns,
        "compression": compression,
    }
    logger.info(f"Wrote {table.num_rows:,} pairs to {output_path} ({file_size:,} bytes)")
    return stats
