"""Identity collaborator: who is signed in, and signing out."""

from __future__ import annotations

from typing import Protocol


class IdentityService(Protocol):
    def current_user(self) -> str | None: ...

    async def sign_out(self) -> None: ...


class StaticIdentity:
    """Fixed identity, for local runs and tests."""

    def __init__(self, email: str | None = None) -> None:
        self._email = email

    def current_user(self) -> str | None:
        return self._email

    async def sign_out(self) -> None:
        self._email = None


__all__ = ["IdentityService", "StaticIdentity"]
