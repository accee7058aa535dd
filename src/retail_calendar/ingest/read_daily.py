"""Readers that turn daily tables into Dask DataFrames.

Daily CSVs are small per file but may be concatenated over many stores or
years; reading them through Dask keeps the cleaning step partition-wise.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast
import logging

import pandas as pd
import dask.dataframe as dd

log = logging.getLogger(__name__)

ROWS_PER_PARTITION = 200_000


def daily_ddf_from_pandas(pdf: pd.DataFrame) -> Any:
    """Wrap a pandas daily table in a Dask DataFrame with stable partitioning."""
    dd_mod = cast(Any, dd)
    return dd_mod.from_pandas(pdf, npartitions=max(1, len(pdf) // ROWS_PER_PARTITION))


def read_daily_csv(path: Path, date_column: str = "date") -> Any:
    """Read a daily CSV (or glob of CSVs) into a Dask DataFrame.

    The date column is read as text; parsing happens in the cleaning step
    so bad dates are dropped instead of failing the read.

    Raises:
        RuntimeError: if no file matches `path`.
    """
    dd_mod = cast(Any, dd)
    try:
        ddf = dd_mod.read_csv(str(path), dtype={date_column: "object"})
    except OSError as e:
        raise RuntimeError(f"Cannot read daily table from {path}: {e}") from e

    log.info("Reading daily table %s (%d partitions)", path, ddf.npartitions)
    return ddf
