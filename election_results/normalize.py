"""
Input decoding and the end-to-end normalization of one result sheet.

Responsibilities:
- encoding detection + decoding to text
- newline normalization
- CSV row parsing
- aggregation + rendering of the normalized table
- the report envelope returned to API callers
"""

from __future__ import annotations

import base64
import csv
import hashlib
import io
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from charset_normalizer import from_bytes

from .aggregate import AggregationResult, aggregate_rows
from .config import Settings
from .errors import InputDecodeError
from .logging import get_logger
from .writer import render_table

logger = get_logger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def decode_csv_bytes(raw: bytes) -> Tuple[str, Dict[str, Any]]:
    """
    Decode input bytes to text.

    Rules:
    - Valid UTF-8 (with or without BOM) is decoded as such.
    - Otherwise use charset-normalizer's best guess.
    - Undecodable input raises InputDecodeError; there is no lossy fallback.
    - CRLF/CR are normalized to LF.
    """
    detected = None
    try:
        text = raw.decode("utf-8-sig")
        decode_used = "utf-8-sig" if raw.startswith(UTF8_BOM) else "utf-8"
    except UnicodeDecodeError:
        match = from_bytes(raw).best()
        if match is None:
            raise InputDecodeError("Unable to detect the input encoding") from None
        detected = match.encoding
        decode_used = detected
        try:
            text = raw.decode(decode_used)
        except (UnicodeDecodeError, LookupError) as exc:
            raise InputDecodeError(f"Input is not valid {decode_used}") from exc

    nl_before = {
        "crlf": text.count("\r\n"),
        "cr": text.count("\r") - text.count("\r\n"),
    }
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "newlines": {
            "policy": "lf",
            "before": nl_before,
            "changed": (nl_before["crlf"] > 0) or (nl_before["cr"] > 0),
        },
    }
    return text, report


def read_rows(text: str) -> List[List[str]]:
    return list(csv.reader(io.StringIO(text, newline="")))


def aggregate_csv_bytes(
    raw: bytes,
    translations: Optional[Mapping[str, str]] = None,
    settings: Optional[Settings] = None,
) -> Tuple[AggregationResult, Dict[str, Any]]:
    settings = settings or Settings()
    text, enc_report = decode_csv_bytes(raw)
    result = aggregate_rows(
        read_rows(text),
        translations=translations,
        summary_columns=settings.summary_columns,
        strict_duplicates=settings.strict_duplicates,
    )
    return result, enc_report


def build_summary(result: AggregationResult) -> Dict[str, Any]:
    return {
        "rows": result.rows,
        "constituencies": len(result.constituencies),
        "centers": len(result.table),
        "symbols": len(result.symbols),
        "warnings": len(result.warnings),
        "errors": 0,
        "deterministic": True,
    }


def normalize_results_bytes(
    raw: bytes,
    translations: Optional[Mapping[str, str]] = None,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    """
    Aggregate one sheet and return a dict matching the API's response envelope.
    """
    settings = settings or Settings()
    result, enc_report = aggregate_csv_bytes(raw, translations, settings)
    normalized_bytes = render_table(result, settings.output_encoding)

    b64 = base64.b64encode(normalized_bytes).decode("ascii")
    return {
        "normalized_csv": {
            "sha256": _sha256_hex(normalized_bytes),
            "encoding": settings.output_encoding,
            "content_b64": b64,
        },
        "report": {
            "summary": build_summary(result),
            "symbols": result.symbols,
            "normalizations": {
                "encoding": {**enc_report, "output": settings.output_encoding},
                "translated": translations is not None,
                "summary_columns": list(result.summary_columns),
            },
            "warnings": result.warnings,
            "errors": [],
        },
    }


def normalize_results_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    translations: Optional[Mapping[str, str]] = None,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    """
    Aggregate the sheet at input_path into output_path.

    The output is rendered in memory first; nothing is written unless the
    whole sheet aggregated cleanly.
    """
    settings = settings or Settings()
    logger.info("aggregation_started", input=str(input_path), output=str(output_path))

    raw = Path(input_path).read_bytes()
    result, _ = aggregate_csv_bytes(raw, translations, settings)
    normalized_bytes = render_table(result, settings.output_encoding)
    Path(output_path).write_bytes(normalized_bytes)

    summary = build_summary(result)
    logger.info("aggregation_finished", output=str(output_path), **summary)
    return summary
