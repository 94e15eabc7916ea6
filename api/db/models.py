"""SQLAlchemy models for the personas store."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, func

from .session import Base


class Persona(Base):
    __tablename__ = "personas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(255), nullable=False)
    apellido = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    created_at = Column("createdAt", DateTime(timezone=True), server_default=func.now(), nullable=False)

    def to_dict(self) -> dict:
        created = self.created_at.isoformat() if self.created_at else None
        return {
            "id": self.id,
            "nombre": self.nombre,
            "apellido": self.apellido,
            "email": self.email,
            "createdAt": created,
        }
