"""
Section-aware aggregation of a stacked result sheet.

A sheet stacks one block per constituency:

    ,,"০০৩ ঠাকুরগাঁও-১ : সংসদ সদস্য",,,       constituency label
    "কেন্দ্র","মোট ভোটার","<candidate>",...    center information header
    ,,"নৌকা","ধানের শীষ",...                  symbol list (always the next row)
    "1 <center>",2885,1097,805,...,70.88%     one data row per polling center

Rows are fed one at a time; the aggregator keeps the current constituency and
the symbol order of the current block and builds one result row per
(constituency, center).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .classify import RowKind, classify
from .errors import DuplicateCenterError
from .logging import get_logger
from .models import CenterKey, ResultRow
from .resolve import extract_name
from .rules import DATA_OFFSET, MISSING_VALUE, SUMMARY_COLUMNS, TOTAL_VOTERS_COLUMN
from .symbols import SymbolTracker, symbol_positions

logger = get_logger(__name__)

# ASCII or Bengali digits
VOTE_COUNT = re.compile(r"\d+")


class SectionState(Enum):
    AWAITING_SECTION = "awaiting_section"
    IN_SECTION = "in_section"
    AWAITING_SYMBOL_LIST = "awaiting_symbol_list"


@dataclass
class AggregationResult:
    table: Dict[CenterKey, ResultRow]
    symbols: List[str]
    summary_columns: Tuple[str, ...]
    warnings: List[dict] = field(default_factory=list)
    rows: int = 0

    @property
    def constituencies(self) -> List[str]:
        return sorted({key.constituency for key in self.table})

    def sorted_items(self) -> List[Tuple[CenterKey, ResultRow]]:
        return sorted(self.table.items())


def _vote_count(cell: str) -> Optional[str]:
    value = cell.strip()
    if VOTE_COUNT.fullmatch(value):
        return value
    return None


def read_symbol_votes(
    row: Sequence[str],
    positions: Sequence[str],
    results: ResultRow,
) -> List[Tuple[str, str]]:
    """
    Map the vote cells following the fixed header cells onto symbols.

    Missing trailing cells read as "0". Returns the (symbol, raw value)
    pairs that were not vote counts and were replaced by "0".
    """
    rejected = []
    for i, symbol in enumerate(positions):
        index = i + DATA_OFFSET
        if index >= len(row):
            results[symbol] = MISSING_VALUE
            continue
        votes = _vote_count(row[index])
        if votes is None:
            if row[index].strip():
                rejected.append((symbol, row[index]))
            votes = MISSING_VALUE
        results[symbol] = votes
    return rejected


def read_summary_columns(
    row: Sequence[str],
    summary_columns: Sequence[str],
    offset: int,
    results: ResultRow,
) -> None:
    # values are kept verbatim so "70.88%" survives
    for i, column in enumerate(summary_columns):
        index = i + offset
        value = row[index].strip() if index < len(row) else ""
        results[column] = value or MISSING_VALUE


class Aggregator:
    """
    Row-at-a-time state machine over a stacked result sheet.

    The row right after a center information header is the symbol list of
    the new block, whatever it looks like. A label row whose name cannot be
    extracted aborts the run; everything else degrades to a warning.
    """

    def __init__(
        self,
        translations: Optional[Mapping[str, str]] = None,
        summary_columns: Sequence[str] = SUMMARY_COLUMNS,
        strict_duplicates: bool = False,
    ) -> None:
        self.translations = translations
        self.summary_columns = tuple(summary_columns)
        self.strict_duplicates = strict_duplicates

        self.state = SectionState.AWAITING_SECTION
        self.constituency = ""
        self.positions: List[str] = []
        self.tracker = SymbolTracker()
        self.table: Dict[CenterKey, ResultRow] = {}
        self.warnings: List[dict] = []
        self.rows = 0

    def feed(self, row: Sequence[str]) -> RowKind:
        """Consume one row and return the kind it was handled as."""
        self.rows += 1
        kind = classify(row)

        if kind is RowKind.CONSTITUENCY_LABEL:
            self.constituency = extract_name(row, self.translations)
            self.state = SectionState.IN_SECTION
            logger.debug("constituency_found", row=self.rows, constituency=self.constituency)
            return kind

        if kind is RowKind.CENTER_INFO_HEADER:
            self.state = SectionState.AWAITING_SYMBOL_LIST
            return kind

        if self.state is SectionState.AWAITING_SYMBOL_LIST:
            self.tracker.record(row)
            self.positions = symbol_positions(row)
            self.state = SectionState.IN_SECTION
            return RowKind.SYMBOL_LIST

        if kind is RowKind.EMPTY:
            return kind

        self._add_data_row(row)
        return RowKind.DATA_ROW

    def consume(self, rows: Iterable[Sequence[str]]) -> "Aggregator":
        for row in rows:
            self.feed(row)
        return self

    def result(self) -> AggregationResult:
        return AggregationResult(
            table=dict(self.table),
            symbols=self.tracker.sorted(),
            summary_columns=self.summary_columns,
            warnings=list(self.warnings),
            rows=self.rows,
        )

    def _warn(self, issue: str, action: str, column: Optional[str] = None, value: Optional[str] = None) -> None:
        item = {
            "row": self.rows,
            "column": column,
            "issue": issue,
            "value": value,
            "action": action,
        }
        self.warnings.append(item)
        logger.warning(issue, **item)

    def _add_data_row(self, row: Sequence[str]) -> None:
        center = row[0].strip() if row else ""

        if not self.constituency:
            self._warn("row_before_constituency", "skipped", value=center)
            return
        if not center:
            self._warn("missing_center_name", "skipped")
            return

        results: ResultRow = {}
        for symbol, value in read_symbol_votes(row, self.positions, results):
            self._warn("invalid_vote_count", f"replaced_with_{MISSING_VALUE}", column=symbol, value=value)
        read_summary_columns(row, self.summary_columns, len(self.positions) + DATA_OFFSET, results)

        total_voters = _vote_count(row[1]) if len(row) > 1 else None
        if total_voters is None:
            if len(row) > 1 and row[1].strip():
                self._warn(
                    "invalid_vote_count",
                    f"replaced_with_{MISSING_VALUE}",
                    column=TOTAL_VOTERS_COLUMN,
                    value=row[1],
                )
            total_voters = MISSING_VALUE
        results[TOTAL_VOTERS_COLUMN] = total_voters

        key = CenterKey(self.constituency, center)
        if key in self.table:
            if self.strict_duplicates:
                raise DuplicateCenterError(key.constituency, key.center, self.rows)
            # last write wins
            self._warn("duplicate_center", "replaced", column=key.constituency, value=center)
        self.table[key] = results


def aggregate_rows(
    rows: Iterable[Sequence[str]],
    translations: Optional[Mapping[str, str]] = None,
    summary_columns: Sequence[str] = SUMMARY_COLUMNS,
    strict_duplicates: bool = False,
) -> AggregationResult:
    aggregator = Aggregator(translations, summary_columns, strict_duplicates)
    result = aggregator.consume(rows).result()
    logger.info("symbols_found", count=len(result.symbols))
    logger.info("rows_found", count=len(result.table))
    return result
