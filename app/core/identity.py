"""
Identity assertions presented at login.

Only MockIdentityVerifier exists today: it trusts the user payload sent by the
client and does not check the token. It is meant for local development and is
switched off with AUTH_ALLOW_MOCK_IDENTITY=false.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from pydantic import BaseModel

from app.core.config import settings

logger = logging.getLogger(__name__)


class Identity(BaseModel):
    id: str
    name: str
    email: str


class IdentityRejected(Exception):
    pass


class IdentityVerifier(ABC):
    @abstractmethod
    def verify(self, token: str, claimed: dict) -> Identity:
        """Return the verified identity or raise IdentityRejected."""


class MockIdentityVerifier(IdentityVerifier):
    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def verify(self, token: str, claimed: dict) -> Identity:
        if not self.enabled:
            raise IdentityRejected("Mock identity login is disabled")

        logger.warning("Accepting unverified identity assertion for %r", claimed.get("email"))
        return Identity(
            id=str(claimed.get("id") or "mock-id"),
            name=str(claimed.get("name") or "Test User"),
            email=str(claimed.get("email") or "user@company.com"),
        )


def get_identity_verifier() -> IdentityVerifier:
    return MockIdentityVerifier(enabled=settings.AUTH_ALLOW_MOCK_IDENTITY)
