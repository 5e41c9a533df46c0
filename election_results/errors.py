from __future__ import annotations

from typing import Optional, Sequence


class TallyError(Exception):
    """Base class for errors that abort an aggregation run."""


class NameExtractionError(TallyError):
    def __init__(self, row: Sequence[str], name: Optional[str] = None):
        self.row = list(row)
        self.name = name
        if name is None:
            message = "Failed to get constituency name: no ':' in label row"
        else:
            message = f"Failed to get constituency name: unrecognized constituency {name!r}"
        super().__init__(message)


class RowTypeAmbiguous(TallyError):
    """Reserved: rows of unknown shape currently degrade to data rows."""

    def __init__(self, row: Sequence[str]):
        self.row = list(row)
        super().__init__("Can't detect the type of row automatically")


class TranslationTableError(TallyError):
    pass


class InputDecodeError(TallyError):
    pass


class DuplicateCenterError(TallyError):
    def __init__(self, constituency: str, center: str, row: int):
        self.constituency = constituency
        self.center = center
        self.row = row
        super().__init__(
            f"Center {center!r} of constituency {constituency!r} appears again at row {row}"
        )
