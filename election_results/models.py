from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

# column name -> string-encoded value, one per polling center
ResultRow = Dict[str, str]


@dataclass(frozen=True, order=True)
class CenterKey:
    constituency: str
    center: str


class NormalizedCsv(BaseModel):
    sha256: str
    encoding: str = Field(default="utf-8-sig")
    content_b64: str


class ReportSummary(BaseModel):
    rows: Optional[int] = Field(default=None, examples=[120])
    constituencies: int = 0
    centers: int = 0
    symbols: int = 0
    warnings: int = 0
    errors: int = 0
    deterministic: bool = True


class ReportItem(BaseModel):
    row: Optional[int] = None
    column: Optional[str] = None
    issue: str
    value: Optional[str] = None
    action: str


class AggregationReport(BaseModel):
    summary: ReportSummary
    symbols: List[str] = Field(default_factory=list)
    normalizations: Dict[str, Any] = Field(default_factory=dict)
    warnings: List[ReportItem] = Field(default_factory=list)
    errors: List[ReportItem] = Field(default_factory=list)


class NormalizeResponse(BaseModel):
    normalized_csv: NormalizedCsv
    report: AggregationReport

class HealthResponse(BaseModel):
    ok: bool = True
