from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Response
from loguru import logger
from pydantic import BaseModel, Field

from app.core.exceptions import SessionNotFoundError
from app.core.security import redact_session_id
from app.models.signals import Profile
from app.services.certificate import certificate_renderer, download_filename
from app.services.quiz_service import quiz_service

router = APIRouter(prefix="/api", tags=["certificate"])

SVG_MEDIA_TYPE = "image/svg+xml"


class CertificateRequest(BaseModel):
    name: str | None = None
    profile: Profile
    certificateId: str = Field(min_length=1)


def _svg_response(svg: str, name: str | None) -> Response:
    return Response(
        content=svg,
        media_type=SVG_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(download_filename(name))}"},
    )


@router.post("/certificate")
async def render_certificate(payload: CertificateRequest) -> Response:
    svg = certificate_renderer.render(payload.name, payload.profile, payload.certificateId)
    return _svg_response(svg, payload.name)


@router.get("/sessions/{session_id}/certificate.svg")
async def session_certificate(session_id: str) -> Response:
    try:
        session = quiz_service.get(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found.")
    if not session.is_complete:
        raise HTTPException(status_code=409, detail="Complete the quiz to get a certificate.")

    logger.info(f"[{redact_session_id(session_id)}] Rendering certificate {session.certificateId}")
    svg = certificate_renderer.render(session.name, session.aiProfile, session.certificateId)
    return _svg_response(svg, session.name)
