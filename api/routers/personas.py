from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from api.services.persona_service import PersonaError, PersonaService

router = APIRouter(prefix="/person", tags=["person"])
logger = logging.getLogger(__name__)

MSG_INTERNAL = "Error interno del servidor"


def _get_persona_service(request: Request) -> PersonaService:
    svc = getattr(getattr(request.app, "state", None), "persona_service", None)
    if not svc:
        raise RuntimeError("PersonaService no configurado")
    return svc


def _error_response(err: PersonaError) -> JSONResponse:
    return JSONResponse({"error": err.message}, status_code=err.status_code)


def _internal_error() -> JSONResponse:
    return JSONResponse({"error": MSG_INTERNAL}, status_code=500)


@router.get("")
def list_personas(request: Request):
    try:
        personas = _get_persona_service(request).list_all()
    except Exception:
        logger.exception("Error al obtener personas")
        return _internal_error()
    return JSONResponse([p.to_dict() for p in personas])


@router.post("")
def create_persona(request: Request, payload: Optional[dict] = Body(None)):
    try:
        persona = _get_persona_service(request).create(payload)
    except PersonaError as exc:
        return _error_response(exc)
    except Exception:
        logger.exception("Error al crear persona")
        return _internal_error()
    return JSONResponse(persona.to_dict(), status_code=201)


@router.get("/{persona_id}")
def get_persona(persona_id: str, request: Request):
    try:
        persona = _get_persona_service(request).get(persona_id)
    except PersonaError as exc:
        return _error_response(exc)
    except Exception:
        logger.exception("Error al obtener persona %s", persona_id)
        return _internal_error()
    return JSONResponse(persona.to_dict())


@router.put("/{persona_id}")
def update_persona(persona_id: str, request: Request, payload: Optional[dict] = Body(None)):
    try:
        persona = _get_persona_service(request).update(persona_id, payload)
    except PersonaError as exc:
        return _error_response(exc)
    except Exception:
        logger.exception("Error al actualizar persona %s", persona_id)
        return _internal_error()
    return JSONResponse(persona.to_dict())


@router.delete("/{persona_id}")
def delete_persona(persona_id: str, request: Request):
    try:
        _get_persona_service(request).delete(persona_id)
    except PersonaError as exc:
        return _error_response(exc)
    except Exception:
        logger.exception("Error al eliminar persona %s", persona_id)
        return _internal_error()
    return JSONResponse({"message": "Persona eliminada correctamente"})
