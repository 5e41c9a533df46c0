"""
Constituency name translation table.

The side file lists pairs of rows: a row holding the original-language name
followed by a row holding its translation. Only the first cell of each row
is used.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence, Union

from .config import Settings
from .errors import TranslationTableError
from .logging import get_logger
from .normalize import decode_csv_bytes, read_rows

logger = get_logger(__name__)


def load_translation_table(rows: Iterable[Sequence[str]]) -> Dict[str, str]:
    table: Dict[str, str] = {}
    pending = None
    count = 0

    for row in rows:
        if not row or not row[0].strip():
            continue
        count += 1
        if pending is None:
            pending = row[0].strip()
        else:
            table[pending] = row[0].strip()
            pending = None

    if pending is not None:
        raise TranslationTableError(
            f"Translation table has an odd number of rows ({count}); "
            f"{pending!r} has no translation"
        )
    return table


def read_translation_table(path: Union[str, Path]) -> Dict[str, str]:
    text, _ = decode_csv_bytes(Path(path).read_bytes())
    return load_translation_table(read_rows(text))


def load_configured_translations(settings: Settings) -> Optional[Dict[str, str]]:
    if settings.translation_table is None:
        return None
    table = read_translation_table(settings.translation_table)
    logger.info("translations_loaded", path=str(settings.translation_table), entries=len(table))
    return table
