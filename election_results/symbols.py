from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Set


def symbol_positions(row: Sequence[str]) -> List[str]:
    """Trimmed non-empty cells of a symbol-list row, in column order."""
    return [cell.strip() for cell in row if cell.strip()]


def record_symbols(
    row: Iterable[str],
    symbols: List[str],
    members: Optional[Set[str]] = None,
) -> None:
    """
    Append the row's new symbols to ``symbols`` in column order.

    ``members`` mirrors ``symbols`` as a set when given, so repeated lookups
    stay cheap over a whole sheet.
    """
    for cell in row:
        symbol = cell.strip()
        if not symbol:
            continue
        if symbol in (symbols if members is None else members):
            continue
        symbols.append(symbol)
        if members is not None:
            members.add(symbol)


class SymbolTracker:
    """Distinct symbols across every section, in first-seen order."""

    def __init__(self) -> None:
        self._seen: List[str] = []
        self._members: Set[str] = set()

    def record(self, row: Iterable[str]) -> None:
        record_symbols(row, self._seen, self._members)

    @property
    def seen(self) -> List[str]:
        return list(self._seen)

    def sorted(self) -> List[str]:
        # plain code point order; the same on every platform and locale
        return sorted(self._seen)

    def __len__(self) -> int:
        return len(self._seen)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._members
