"""Persona use cases (list, lookup, create, full-replace update, delete)."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from sqlalchemy.exc import IntegrityError

from api.db.models import Persona
from api.domain.personas import (
    normalize_email,
    normalize_name,
    parse_persona_id,
    validate_email_format,
    validate_required,
)
from api.repositories.sql_repository import PersonaRepository

logger = logging.getLogger(__name__)


class PersonaError(Exception):
    """Base exception for persona workflows; carries the HTTP mapping."""

    status_code = 400
    code = "invalid"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingFieldError(PersonaError):
    code = "missing_field"


class InvalidIdError(PersonaError):
    code = "invalid_id"


class InvalidEmailFormatError(PersonaError):
    code = "invalid_email_format"


class PersonaNotFoundError(PersonaError):
    status_code = 404
    code = "not_found"


class EmailConflictError(PersonaError):
    status_code = 409
    code = "email_conflict"


MSG_REQUIRED = "Nombre, apellido y email son requeridos"
MSG_INVALID_EMAIL = "Formato de email inválido"
MSG_INVALID_ID = "ID inválido"
MSG_NOT_FOUND = "Persona no encontrada"
MSG_EMAIL_TAKEN = "El email ya está registrado"
MSG_EMAIL_IN_USE = "El email ya está en uso"


class PersonaService:
    """Composes field validation with the persona repository."""

    def __init__(self, repository: PersonaRepository | None = None) -> None:
        self.repository = repository or PersonaRepository()

    def _parse_id(self, raw_id: Any) -> int:
        persona_id = parse_persona_id(raw_id)
        if persona_id is None:
            raise InvalidIdError(MSG_INVALID_ID)
        return persona_id

    def _clean_fields(self, payload: Mapping[str, Any] | None) -> tuple[str, str, str]:
        result = validate_required(payload)
        if not result.ok:
            raise MissingFieldError(MSG_REQUIRED)
        if not validate_email_format(payload["email"]):
            raise InvalidEmailFormatError(MSG_INVALID_EMAIL)
        return (
            normalize_name(payload["nombre"]),
            normalize_name(payload["apellido"]),
            normalize_email(payload["email"]),
        )

    def list_all(self) -> list[Persona]:
        return self.repository.list_personas()

    def get(self, raw_id: Any) -> Persona:
        persona_id = self._parse_id(raw_id)
        entity = self.repository.get_persona(persona_id)
        if not entity:
            raise PersonaNotFoundError(MSG_NOT_FOUND)
        return entity

    def create(self, payload: Mapping[str, Any] | None) -> Persona:
        nombre, apellido, email = self._clean_fields(payload)
        if self.repository.get_persona_by_email(email):
            raise EmailConflictError(MSG_EMAIL_TAKEN)
        try:
            entity = self.repository.create_persona(nombre, apellido, email)
        except IntegrityError as exc:
            # lost the race against a concurrent create; the unique index decides
            logger.warning("Unique constraint rejected persona email %s: %s", email, exc.orig)
            raise EmailConflictError(MSG_EMAIL_TAKEN) from exc
        logger.info("Persona %s created", entity.id)
        return entity

    def update(self, raw_id: Any, payload: Mapping[str, Any] | None) -> Persona:
        persona_id = self._parse_id(raw_id)
        nombre, apellido, email = self._clean_fields(payload)
        if not self.repository.get_persona(persona_id):
            raise PersonaNotFoundError(MSG_NOT_FOUND)
        if self.repository.get_persona_by_email(email, exclude_id=persona_id):
            raise EmailConflictError(MSG_EMAIL_IN_USE)
        try:
            entity = self.repository.update_persona(persona_id, nombre, apellido, email)
        except IntegrityError as exc:
            logger.warning("Unique constraint rejected persona email %s: %s", email, exc.orig)
            raise EmailConflictError(MSG_EMAIL_IN_USE) from exc
        if not entity:
            # deleted between the existence check and the write
            raise PersonaNotFoundError(MSG_NOT_FOUND)
        logger.info("Persona %s updated", persona_id)
        return entity

    def delete(self, raw_id: Any) -> None:
        persona_id = self._parse_id(raw_id)
        if not self.repository.get_persona(persona_id):
            raise PersonaNotFoundError(MSG_NOT_FOUND)
        if not self.repository.delete_persona(persona_id):
            raise PersonaNotFoundError(MSG_NOT_FOUND)
        logger.info("Persona %s deleted", persona_id)
