"""Core request/session models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .signing import SIGNATURE_PARAM


@dataclass(slots=True)
class Session:
    """Authentication state established by ``login``.

    Mutated in place by the owning client, so one client must not run
    requests from several threads or tasks at once without external locking.
    """

    session_key: str | None = None
    user_id: str | None = None

    @property
    def active(self) -> bool:
        return bool(self.session_key)

    def update(self, session_key: object, user_id: object) -> None:
        self.session_key = str(session_key) if session_key else None
        self.user_id = str(user_id) if user_id else None

    def clear(self) -> None:
        self.session_key = None
        self.user_id = None


@dataclass(slots=True, frozen=True)
class SignedRequest:
    method: str
    url: str
    params: Mapping[str, str]
    signature: str

    def form_fields(self) -> dict[str, str]:
        fields = dict(self.params)
        fields[SIGNATURE_PARAM] = self.signature
        return fields


__all__ = [
    "Session",
    "SignedRequest",
]
