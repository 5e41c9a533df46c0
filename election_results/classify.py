"""Row classification for stacked result sheets."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from .rules import CENTER_MARKER, CONSTITUENCY_PATTERN


class RowKind(Enum):
    CONSTITUENCY_LABEL = "constituency_label"
    CENTER_INFO_HEADER = "center_info_header"
    # assigned by the aggregator, never returned by classify()
    SYMBOL_LIST = "symbol_list"
    EMPTY = "empty"
    DATA_ROW = "data_row"


def is_constituency_row(row: Sequence[str]) -> bool:
    """True when any cell carries a "<code> <name> : সংসদ সদস্য" label."""
    return any(cell and CONSTITUENCY_PATTERN.search(cell) for cell in row)


def is_center_information_row(row: Sequence[str]) -> bool:
    return bool(row) and row[0].lstrip().startswith(CENTER_MARKER)


def is_empty_row(row: Sequence[str]) -> bool:
    return all(not cell.strip() for cell in row)


def classify(row: Sequence[str]) -> RowKind:
    """
    Decide what a single parsed row is, without any section context.

    Labels win over headers, headers over blank rows; anything unrecognised
    is a data row.
    """
    if is_constituency_row(row):
        return RowKind.CONSTITUENCY_LABEL
    if is_center_information_row(row):
        return RowKind.CENTER_INFO_HEADER
    if is_empty_row(row):
        return RowKind.EMPTY
    return RowKind.DATA_ROW
