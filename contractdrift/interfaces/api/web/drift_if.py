"""Drift analysis endpoints for web UI.

Two ways in:
- /analyze takes both documents as JSON and is stateless
- /upload takes files; the service keeps the latest specification and
  traffic and returns the dashboard once both are present
"""

import logging
from dataclasses import replace
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from contractdrift.helpers.dto.intake_dto import FileParseFailure
from contractdrift.helpers.logging_helper import sanitize_exception_message
from contractdrift.interfaces.api.types.drift_types import (
    AnalyzeRequest,
    DriftDashboardResponse,
    DriftInfoResponse,
    UploadResponse,
)
from contractdrift.interfaces.api.web.dependencies import get_config_service, get_drift_service
from contractdrift.services.config_svc import ConfigService
from contractdrift.services.drift_svc import DriftService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/drift", tags=["Drift"])


@router.post("/analyze")
async def web_analyze(
    request: AnalyzeRequest,
    drift_service: Annotated[DriftService, Depends(get_drift_service)],
) -> DriftDashboardResponse:
    """Analyze a parsed specification against parsed traffic statistics."""
    try:
        dashboard = drift_service.analyze(request.spec, request.traffic, spec_name=request.spec_name)
        return DriftDashboardResponse.from_dto(dashboard)
    except Exception as e:
        logger.exception("[Web API] Error analyzing documents")
        raise HTTPException(
            status_code=500,
            detail=sanitize_exception_message(e, "Failed to analyze documents"),
        ) from e


@router.post("/upload")
async def web_upload(
    files: Annotated[list[UploadFile], File(description="Specification and/or traffic files")],
    drift_service: Annotated[DriftService, Depends(get_drift_service)],
) -> UploadResponse:
    """Upload specification/traffic files.

    Parse failures are reported per file in the response body; they do not
    fail the request or discard the other files.
    """
    limit = drift_service.settings.max_upload_bytes
    accepted: list[tuple[str, bytes]] = []
    oversized: list[FileParseFailure] = []

    for upload in files:
        name = upload.filename or "upload"
        content = await upload.read(limit + 1)
        if len(content) > limit:
            logger.warning(f"[Web API] Rejected {name}: larger than {limit} bytes")
            oversized.append(FileParseFailure(name=name, reason=f"file larger than {limit} bytes"))
            continue
        accepted.append((name, content))

    try:
        result = drift_service.submit_files(accepted)
    except Exception as e:
        logger.exception("[Web API] Error processing uploads")
        raise HTTPException(
            status_code=500,
            detail=sanitize_exception_message(e, "Failed to process uploaded files"),
        ) from e

    if oversized:
        result = replace(result, intake=replace(result.intake, failures=tuple(oversized) + result.intake.failures))
    return UploadResponse.from_dto(result)


@router.get("/current")
async def web_current(
    drift_service: Annotated[DriftService, Depends(get_drift_service)],
) -> DriftDashboardResponse:
    """Return the dashboard of the current upload session."""
    dashboard = drift_service.current_dashboard()
    if dashboard is None:
        raise HTTPException(status_code=404, detail="No analysis yet: upload a specification and traffic")
    return DriftDashboardResponse.from_dto(dashboard)


@router.post("/reset")
async def web_reset(
    drift_service: Annotated[DriftService, Depends(get_drift_service)],
) -> dict[str, str]:
    """Start over: forget uploaded documents."""
    drift_service.reset()
    return {"status": "reset"}


@router.get("/info")
async def web_info(
    config_service: Annotated[ConfigService, Depends(get_config_service)],
) -> DriftInfoResponse:
    """Return version, analysis constants and effective settings."""
    info = config_service.get_internal_info()
    settings = config_service.make_settings()
    return DriftInfoResponse(
        version=info.version,
        recognizedMethods=list(info.recognized_methods),
        fieldUsageLimit=info.field_usage_limit,
        safeThreshold=info.safe_threshold,
        mediumThreshold=info.medium_threshold,
        markupParser=settings.markup_parser,
        maxUploadBytes=settings.max_upload_bytes,
    )
