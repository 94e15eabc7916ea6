from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from api.services.email_verification_service import EmailVerificationService
from api.services.persona_service import PersonaError

router = APIRouter(tags=["verify-email"])
logger = logging.getLogger(__name__)


def _get_verification_service(request: Request) -> EmailVerificationService:
    svc = getattr(getattr(request.app, "state", None), "email_verification_service", None)
    if not svc:
        raise RuntimeError("EmailVerificationService no configurado")
    return svc


@router.post("/verify-email")
def verify_email(request: Request, payload: Optional[dict] = Body(None)):
    email = (payload or {}).get("email")
    try:
        result = _get_verification_service(request).verify(email)
    except PersonaError as exc:
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)
    except Exception:
        logger.exception("Error verificando email")
        return JSONResponse({"error": "Error interno del servidor"}, status_code=500)
    return JSONResponse(result)
