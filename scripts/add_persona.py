#!/usr/bin/env python3
"""
Registrar una persona directamente en la base configurada (DATABASE_URL).

Uso:
  python scripts/add_persona.py --nombre Ana --apellido Pérez --email ana@example.com
"""
from __future__ import annotations

import argparse
import sys

from api.db.session import init_db
from api.services.persona_service import PersonaError, PersonaService


def main() -> None:
    ap = argparse.ArgumentParser(description="Registrar persona en la base")
    ap.add_argument("--nombre", required=True, help="Nombre (ej.: Ana)")
    ap.add_argument("--apellido", required=True, help="Apellido (ej.: Pérez)")
    ap.add_argument("--email", required=True, help="Email unico de la persona")
    args = ap.parse_args()

    init_db()
    svc = PersonaService()
    try:
        persona = svc.create({"nombre": args.nombre, "apellido": args.apellido, "email": args.email})
    except PersonaError as exc:
        raise SystemExit(exc.message)

    print("OK: persona registrada")
    print(f"  ID: {persona.id}")
    print(f"  Nombre: {persona.nombre} {persona.apellido}")
    print(f"  Email: {persona.email}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
