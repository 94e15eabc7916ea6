"""
Smoke tests for the PersonaRepository against a temporary SQLite database.
"""
from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from api.repositories.sql_repository import PersonaRepository


def test_persona_crud_flow(temp_db):
    repo = PersonaRepository()
    created = repo.create_persona("Ana", "Pérez", "ana@example.com")
    assert created.id is not None
    assert created.created_at is not None

    fetched = repo.get_persona(created.id)
    assert fetched is not None
    assert fetched.email == "ana@example.com"

    updated = repo.update_persona(created.id, "Ana María", "Pérez", "ana.maria@example.com")
    assert updated is not None
    assert updated.nombre == "Ana María"
    assert repo.get_persona_by_email("ana@example.com") is None

    assert repo.delete_persona(created.id) is True
    assert repo.get_persona(created.id) is None
    assert repo.delete_persona(created.id) is False


def test_list_orders_newest_first(temp_db):
    repo = PersonaRepository()
    first = repo.create_persona("Ana", "Pérez", "ana@example.com")
    second = repo.create_persona("Luis", "Gómez", "luis@example.com")
    third = repo.create_persona("Eva", "Ruiz", "eva@example.com")
    assert [p.id for p in repo.list_personas()] == [third.id, second.id, first.id]


def test_email_lookup_can_exclude_owner(temp_db):
    repo = PersonaRepository()
    ana = repo.create_persona("Ana", "Pérez", "ana@example.com")
    assert repo.get_persona_by_email("ana@example.com").id == ana.id
    assert repo.get_persona_by_email("ana@example.com", exclude_id=ana.id) is None


def test_unique_email_is_enforced_by_storage(temp_db):
    repo = PersonaRepository()
    repo.create_persona("Ana", "Pérez", "ana@example.com")
    with pytest.raises(IntegrityError):
        repo.create_persona("Otra", "Ana", "ana@example.com")
    assert len(repo.list_personas()) == 1


def test_update_missing_persona_returns_none(temp_db):
    repo = PersonaRepository()
    assert repo.update_persona(999, "X", "Y", "x@example.com") is None
