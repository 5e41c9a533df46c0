from typing import Optional

from fastapi import FastAPI, UploadFile, File, HTTPException
from .config import load_settings
from .errors import TallyError
from .models import NormalizeResponse, HealthResponse
from .normalize import decode_csv_bytes, normalize_results_bytes, read_rows
from .translate import load_configured_translations, load_translation_table

app = FastAPI(
    title="election-results-normalizer",
    description="Per-center vote tables from stacked election result sheets",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/aggregate", response_model=NormalizeResponse)
async def aggregate_results(
    file: UploadFile = File(...),
    translations: Optional[UploadFile] = File(None),
):
    if not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    try:
        settings = load_settings()
        if translations is not None:
            text, _ = decode_csv_bytes(await translations.read())
            table = load_translation_table(read_rows(text))
        else:
            table = load_configured_translations(settings)
        return normalize_results_bytes(raw, table, settings)
    except (TallyError, ValueError, OSError) as exc:
        raise HTTPException(status_code=422, detail=str(exc))
