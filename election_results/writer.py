"""Rendering of the aggregated table and reading it back."""

from __future__ import annotations

import csv
import io
from typing import Dict, List, Mapping, Sequence, TextIO, Tuple

from .aggregate import AggregationResult
from .models import CenterKey, ResultRow
from .rules import (
    CENTER_COLUMN,
    CONSTITUENCY_COLUMN,
    MISSING_VALUE,
    NORMALIZED_DELIMITER,
    TARGET_ENCODING,
    TOTAL_VOTERS_COLUMN,
)


def table_header(symbols: Sequence[str], summary_columns: Sequence[str]) -> List[str]:
    return [CONSTITUENCY_COLUMN, CENTER_COLUMN, *symbols, *summary_columns, TOTAL_VOTERS_COLUMN]


def write_table(
    table: Mapping[CenterKey, ResultRow],
    symbols: Sequence[str],
    summary_columns: Sequence[str],
    output: TextIO,
) -> int:
    """
    Write one row per center, ordered by (constituency, center).

    Symbols a center never saw are filled with "0". Values are written as
    stored. Returns the number of data rows written.
    """
    writer = csv.writer(output, delimiter=NORMALIZED_DELIMITER, lineterminator="\n")
    writer.writerow(table_header(symbols, summary_columns))

    written = 0
    for key in sorted(table):
        results = table[key]
        row = [key.constituency, key.center]
        row.extend(results.get(symbol, MISSING_VALUE) for symbol in symbols)
        row.extend(results.get(column, MISSING_VALUE) for column in summary_columns)
        row.append(results.get(TOTAL_VOTERS_COLUMN, MISSING_VALUE))
        writer.writerow(row)
        written += 1
    return written


def render_table(result: AggregationResult, encoding: str = TARGET_ENCODING) -> bytes:
    out = io.StringIO(newline="")
    write_table(result.table, result.symbols, result.summary_columns, out)
    return out.getvalue().encode(encoding)


def read_table(
    stream: TextIO,
    summary_columns: Sequence[str],
) -> Tuple[Dict[CenterKey, ResultRow], List[str], Tuple[str, ...]]:
    """
    Load a table produced by write_table.

    Columns between Center and the summary columns are taken as symbols.
    """
    reader = csv.reader(stream, delimiter=NORMALIZED_DELIMITER)
    try:
        header = next(reader)
    except StopIteration:
        raise ValueError("Normalized table is empty") from None

    if header[:2] != [CONSTITUENCY_COLUMN, CENTER_COLUMN] or header[-1] != TOTAL_VOTERS_COLUMN:
        raise ValueError(f"Not a normalized result table: {header[:2]!r} ... {header[-1:]!r}")

    middle = header[2:-1]
    present = tuple(column for column in summary_columns if column in middle)
    symbols = [column for column in middle if column not in present]

    table: Dict[CenterKey, ResultRow] = {}
    for row in reader:
        if not row:
            continue
        values = dict(zip(header, row))
        key = CenterKey(values.pop(CONSTITUENCY_COLUMN), values.pop(CENTER_COLUMN))
        table[key] = values
    return table, symbols, present
