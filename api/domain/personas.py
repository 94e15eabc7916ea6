"""Domain helpers for persona field validation and normalization."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
REQUIRED_FIELDS = ("nombre", "apellido", "email")
# signed 32-bit INTEGER primary key
PERSONA_ID_MIN = -(2**31)
PERSONA_ID_MAX = 2**31 - 1


@dataclass
class ValidationResult:
    missing: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing


def _present(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_required(fields: Mapping[str, Any] | None) -> ValidationResult:
    """Report which of nombre/apellido/email are absent or blank."""
    data = fields if isinstance(fields, Mapping) else {}
    return ValidationResult(missing=[name for name in REQUIRED_FIELDS if not _present(data.get(name))])


def validate_email_format(email: str | None) -> bool:
    """Return True when the value looks like local@domain.tld (no DNS/MX lookup)."""
    if not isinstance(email, str):
        return False
    return matches_email_pattern(email.strip())


def matches_email_pattern(value: Any) -> bool:
    """Apply the email pattern to the value exactly as given."""
    return isinstance(value, str) and bool(EMAIL_PATTERN.fullmatch(value))


def normalize_email(email: str) -> str:
    return email.strip().lower()


def normalize_name(value: str) -> str:
    return value.strip()


def parse_persona_id(raw: Any) -> int | None:
    """Parse a path id strictly; anything but an integer literal yields None."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    text = str(raw or "").strip()
    if not re.fullmatch(r"[+-]?[0-9]+", text):
        return None
    return int(text)


def persona_id_in_range(persona_id: int) -> bool:
    return PERSONA_ID_MIN <= persona_id <= PERSONA_ID_MAX
