"""
Email deliverability check backed by the Hunter email-verifier API.

The format check is local; deliverability is decided remotely and only the
literal result "deliverable" counts as a valid address.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

import httpx

from api.core.config import Settings, get_settings
from api.domain.personas import matches_email_pattern
from api.services.persona_service import MSG_INVALID_EMAIL, MissingFieldError

logger = logging.getLogger(__name__)

DELIVERABLE = "deliverable"
MSG_EMAIL_REQUIRED = "Email es requerido"


class EmailVerificationUnavailable(Exception):
    """Raised when the provider cannot give a usable answer."""


class HunterEmailVerifier:
    """Thin wrapper around one pooled httpx.Client."""

    def __init__(
        self,
        api_key: str,
        api_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.api_url = api_url
        self._client = httpx.Client(timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings) -> "HunterEmailVerifier":
        return cls(
            api_key=settings.hunter_api_key,
            api_url=settings.hunter_api_url,
            timeout=settings.email_verification_timeout,
        )

    def is_deliverable(self, email: str) -> bool:
        if not self.api_key:
            raise EmailVerificationUnavailable("HUNTER_API_KEY is not configured")
        try:
            resp = self._client.get(self.api_url, params={"email": email, "api_key": self.api_key})
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as exc:
            raise EmailVerificationUnavailable(f"Hunter request failed: {exc}") from exc
        except ValueError as exc:
            raise EmailVerificationUnavailable("Hunter returned a non-JSON body") from exc
        logger.debug("Hunter response for %s: %s", email, data)
        payload = data.get("data") if isinstance(data, dict) else None
        result = payload.get("result") if isinstance(payload, dict) else None
        return result == DELIVERABLE

    def close(self) -> None:
        self._client.close()


@dataclass
class EmailVerificationService:
    """Answers "is this email real" for the /verify-email endpoint."""

    verifier: HunterEmailVerifier
    strict: bool = True

    def verify(self, email: Any) -> dict:
        if not isinstance(email, str) or not email:
            raise MissingFieldError(MSG_EMAIL_REQUIRED)
        # checked and sent as received; padding makes it malformed here
        candidate = email
        if not matches_email_pattern(candidate):
            return {"isValid": False, "error": MSG_INVALID_EMAIL}
        try:
            is_valid = self.verifier.is_deliverable(candidate)
        except EmailVerificationUnavailable:
            if self.strict:
                raise
            logger.warning("Email verification unavailable for %s; reporting as invalid", candidate, exc_info=True)
            is_valid = False
        return {
            "isValid": is_valid,
            "email": candidate,
            "timestamp": _now_iso(),
        }

    def close(self) -> None:
        self.verifier.close()


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def build_email_verification_service(settings: Optional[Settings] = None) -> EmailVerificationService:
    settings = settings or get_settings()
    return EmailVerificationService(
        verifier=HunterEmailVerifier.from_settings(settings),
        strict=settings.email_verification_strict,
    )
