from __future__ import annotations

from typing import Mapping, Optional, Sequence

from .errors import NameExtractionError
from .rules import CONSTITUENCY_PATTERN


def _label_cell(row: Sequence[str]) -> Optional[str]:
    """The cell holding the constituency label, else the first cell with a ':'."""
    for cell in row:
        if cell and CONSTITUENCY_PATTERN.search(cell):
            return cell
    for cell in row:
        if cell and ":" in cell:
            return cell
    return None


def extract_name(
    row: Sequence[str],
    translations: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Pull the constituency name out of a label row.

    The name is whatever precedes the first ':' of the cell carrying the
    "<code> <name> : সংসদ সদস্য" label, trimmed. Rows without such a cell fall
    back to the first non-empty cell that has a ':'. With a translation table
    the trimmed name must have an entry there and its translation is
    returned instead.
    """
    cell = _label_cell(row)
    if cell is None:
        raise NameExtractionError(row)

    name = cell[:cell.find(":")].strip()
    if translations is None:
        return name
    try:
        return translations[name]
    except KeyError:
        raise NameExtractionError(row, name) from None
