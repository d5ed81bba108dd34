"""
Volcano dataset loader.

Reads a CSV file with a header row into an ordered sequence of records.
Every value is kept as the raw string found in the file: the tooltip shows
values verbatim, and numeric parsing is left to ``parse_float`` so that a
malformed cell filters the record out instead of failing the load.

Usage
-----
    from volcano_map.ingest.dataset import load_dataset
    ds = load_dataset("data/volcanoes.csv")
    print(len(ds), "records;", ", ".join(ds.field_names))
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import pandas as pd

from ..config import REQUIRED_COLUMNS

log = logging.getLogger(__name__)

Record = Dict[str, str]


class DatasetError(ValueError):
    """Raised when the input table cannot be used at all."""


def parse_float(raw: Optional[str]) -> Optional[float]:
    """Parse *raw* as a finite float, or return None.

    Empty strings, non-numeric text, NaN and infinities all yield None.
    """
    if raw is None:
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


@dataclass(frozen=True)
class Dataset:
    """Ordered records plus the ordered header of the source table."""

    field_names: Tuple[str, ...]
    records: Tuple[Record, ...]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index: int) -> Record:
        return self.records[index]

    @classmethod
    def from_rows(
        cls,
        field_names: Sequence[str],
        rows: Iterable[Sequence[str]],
    ) -> "Dataset":
        """Build a dataset from a header and positional rows.

        Short rows are padded with empty strings.
        """
        names = tuple(field_names)
        records: List[Record] = []
        for row in rows:
            values = list(row) + [""] * (len(names) - len(row))
            records.append(dict(zip(names, values)))
        return cls(field_names=names, records=tuple(records))


def load_dataset(
    source: Union[str, Path],
    required: Sequence[str] = REQUIRED_COLUMNS,
) -> Dataset:
    """Load a CSV file into a :class:`Dataset`.

    Parameters
    ----------
    source : str or Path
        Path to a CSV file whose first row is the header.
    required : sequence of str
        Column names that must be present in the header.

    Raises
    ------
    DatasetError
        If the file does not exist, cannot be parsed, or lacks a
        required column.
    """
    path = Path(source)
    if not path.is_file():
        raise DatasetError(f"Dataset not found: {path}")

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise DatasetError(f"Cannot parse {path}: {exc}") from exc

    field_names = tuple(str(c) for c in df.columns)
    missing = [c for c in required if c not in field_names]
    if missing:
        raise DatasetError(
            f"{path.name} is missing required columns: {', '.join(missing)}"
        )

    records = tuple(
        {name: str(value) for name, value in row.items()}
        for row in df.to_dict(orient="records")
    )
    log.info("Loaded %d records (%d columns) from %s",
             len(records), len(field_names), path)
    return Dataset(field_names=field_names, records=records)
