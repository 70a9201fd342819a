"""
Edge list ingestion.

Reads ``source,target`` CSV files and drops rows that lack either endpoint
before they reach graph construction.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import polars as pl

logger = logging.getLogger(__name__)


def _clean_id(value: Optional[object]) -> str:
    if value is None:
        return ""
    return str(value).strip()


def clean_edge_rows(rows: Iterable[Sequence[Optional[object]]]) -> List[Tuple[str, str]]:
    """
    Normalize raw rows into (source, target) id pairs.

    Whitespace around ids is stripped. Rows with a missing or empty source or
    target are dropped silently.

    Args:
        rows: Iterable of rows whose first two fields are source and target

    Returns:
        List[Tuple[str, str]]: Cleaned edges in input order
    """
    edges = []
    dropped = 0
    for row in rows:
        source = _clean_id(row[0]) if len(row) > 0 else ""
        target = _clean_id(row[1]) if len(row) > 1 else ""
        if not source or not target:
            dropped += 1
            continue
        edges.append((source, target))

    if dropped:
        logger.info(f"Dropped {dropped} edge rows with a missing endpoint")
    return edges


def read_edge_list(path: Union[str, Path]) -> List[Tuple[str, str]]:
    """
    Read an edge list from a headered CSV file.

    The first two columns are taken as source and target whatever their
    header names; further columns are ignored. An empty file yields no
    edges, and bytes that are not valid UTF-8 are replaced rather than
    failing the whole load.

    Args:
        path: Path to the CSV file

    Returns:
        List[Tuple[str, str]]: Cleaned edges

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file has fewer than two columns
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Edge file {path} does not exist")

    df = pl.read_csv(
        path,
        has_header=True,
        infer_schema_length=0,
        truncate_ragged_lines=True,
        raise_if_empty=False,
        encoding="utf8-lossy",
    )
    if df.width == 0:
        logger.info(f"Edge file {path} is empty")
        return []
    if df.width < 2:
        raise ValueError(f"Edge file {path} needs at least two columns, found {df.width}")

    edges = clean_edge_rows(df.select(df.columns[:2]).iter_rows())
    logger.info(f"Read {len(edges):,} edges from {path}")
    return edges
