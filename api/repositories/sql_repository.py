"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from api.db.models import Persona
from api.db.session import get_session
from api.domain.personas import persona_id_in_range


class PersonaRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def get_persona(self, persona_id: int) -> Optional[Persona]:
        if not persona_id_in_range(persona_id):
            return None
        with get_session() as session:
            return session.get(Persona, persona_id)

    def list_personas(self) -> list[Persona]:
        with get_session() as session:
            stmt = select(Persona).order_by(Persona.created_at.desc(), Persona.id.desc())
            return list(session.execute(stmt).scalars().all())

    def get_persona_by_email(self, email: str, exclude_id: int | None = None) -> Optional[Persona]:
        with get_session() as session:
            stmt = select(Persona).where(Persona.email == email)
            if exclude_id is not None:
                stmt = stmt.where(Persona.id != exclude_id)
            return session.execute(stmt.limit(1)).scalar_one_or_none()

    def create_persona(self, nombre: str, apellido: str, email: str) -> Persona:
        entity = Persona(
            nombre=nombre,
            apellido=apellido,
            email=email,
            created_at=datetime.now(timezone.utc),
        )
        with get_session() as session:
            session.add(entity)
            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                raise
            session.refresh(entity)
            return entity

    def update_persona(self, persona_id: int, nombre: str, apellido: str, email: str) -> Optional[Persona]:
        if not persona_id_in_range(persona_id):
            return None
        with get_session() as session:
            entity = session.get(Persona, persona_id)
            if not entity:
                return None
            entity.nombre = nombre
            entity.apellido = apellido
            entity.email = email
            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                raise
            session.refresh(entity)
            return entity

    def delete_persona(self, persona_id: int) -> bool:
        if not persona_id_in_range(persona_id):
            return False
        with get_session() as session:
            result = session.execute(delete(Persona).where(Persona.id == persona_id))
            session.commit()
            return bool(result.rowcount)
