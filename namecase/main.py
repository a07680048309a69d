import logging
from typing import Optional

from fastapi import Depends, FastAPI, File, Form, HTTPException, UploadFile

from .config import Settings, get_settings
from .formatter import name_case, name_case_many, resolve_options
from .log import setup_logging
from .models import (
    BatchRequest,
    BatchResponse,
    FileUploadResponse,
    HealthResponse,
    NameCaseRequest,
    NameCaseResponse,
)
from .upload import SUPPORTED_SUFFIXES, MissingColumnError, decode_upload, names_from_csv, names_from_text

setup_logging(get_settings().LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="namecase",
    description="Capitalization of personal names (Mac/Mc, particles, Roman numerals)",
    version="0.1.0",
)


def _results(names, formatted):
    return [{"original": o, "formatted": f} for o, f in zip(names, formatted)]


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/namecase", response_model=NameCaseResponse)
def format_name(body: NameCaseRequest, settings: Settings = Depends(get_settings)):
    overrides = body.options.overrides() if body.options else {}
    opts = resolve_options(settings.default_options, **overrides)

    formatted = name_case(body.name, opts)
    logger.info("POST /namecase (%d chars)", len(body.name))
    return {"original": body.name, "formatted": formatted, "options": opts}


@app.post("/namecase/batch", response_model=BatchResponse)
def format_batch(body: BatchRequest, settings: Settings = Depends(get_settings)):
    overrides = body.options.overrides() if body.options else {}
    opts = resolve_options(settings.default_options, **overrides)

    formatted = name_case_many(body.names, opts)
    logger.info("POST /namecase/batch (%d names)", len(body.names))
    return {"results": _results(body.names, formatted), "options": opts, "count": len(formatted)}


@app.post("/namecase/file", response_model=FileUploadResponse)
async def format_file(
    file: UploadFile = File(...),
    column: str = Form("name"),
    lazy: Optional[bool] = Form(None),
    irish: Optional[bool] = Form(None),
    spanish: Optional[bool] = Form(None),
    settings: Settings = Depends(get_settings),
):
    filename = (file.filename or "").lower()
    if not filename.endswith(SUPPORTED_SUFFIXES):
        raise HTTPException(status_code=422, detail="Only TXT or CSV files are supported")

    raw = await file.read()
    text, encoding = decode_upload(raw)

    if filename.endswith(".csv"):
        try:
            names = names_from_csv(text, column)
        except MissingColumnError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        source = {"format": "csv", "column": column}
    else:
        names = names_from_text(text)
        source = {"format": "txt"}

    overrides = {k: v for k, v in {"lazy": lazy, "irish": irish, "spanish": spanish}.items() if v is not None}
    opts = resolve_options(settings.default_options, **overrides)

    formatted = name_case_many(names, opts)
    logger.info("POST /namecase/file %s (%d names)", file.filename, len(names))
    return {
        "results": _results(names, formatted),
        "options": opts,
        "count": len(formatted),
        "encoding": encoding,
        "source": source,
    }
