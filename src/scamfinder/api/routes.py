"""API routes for ScamFinder."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import JSONResponse

from scamfinder.classifier import ACCEPTED_FILE_TYPES
from scamfinder.exceptions import AnalysisFailure, CredentialError, ValidationError
from scamfinder.models.request import AnalysisRequest, FilePayload
from scamfinder.scanner import Scanner

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache(maxsize=1)
def get_scanner() -> Scanner:
    """Process-wide scanner; the provider is created on first use."""
    return Scanner()


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/file-types")
def file_types() -> dict[str, list[str]]:
    """Upload filter groups (extensions, without the dot)."""
    return {group: list(exts) for group, exts in ACCEPTED_FILE_TYPES.items()}


@router.post("/scan")
def submit_scan(
    text: str = Form(""),
    file: Optional[UploadFile] = File(None),
    scanner: Scanner = Depends(get_scanner),
) -> Any:
    """Analyze text and/or an uploaded file and return the verdict."""
    payload: FilePayload | None = None
    if file is not None and file.filename:
        # Never buffer more than one byte past the limit; the scanner rejects on size
        limit = scanner.settings.limits.max_file_bytes
        if file.size is not None and file.size > limit:
            data, size = b"", file.size
        else:
            data = file.file.read(limit + 1)
            size = len(data)
        payload = FilePayload(
            raw_bytes=data,
            file_name=file.filename,
            declared_mime_type=file.content_type or "",
            size_bytes=size,
        )

    request = AnalysisRequest(text=text, file=payload)

    try:
        result = scanner.scan(request)
    except ValidationError as e:
        status = 413 if e.field == "file" else 400
        raise HTTPException(status_code=status, detail=str(e)) from e
    except CredentialError as e:
        logger.error("Scan rejected: %s", e)
        raise HTTPException(status_code=503, detail=str(e)) from e
    except AnalysisFailure as e:
        return JSONResponse(status_code=502, content={"detail": str(e), "reason": e.reason})

    return result.to_dict()
