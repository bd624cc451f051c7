"""Session gate - the authentication signal consumed by the tracking surface.

The identity provider lives outside schedulsy. Callers construct a
`Session` from whatever their provider reports and hand it in explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_GREETING_NAME = "there"


class SessionStatus(Enum):
    """Tri-state authentication status."""

    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class Surface(Enum):
    """Which surface a viewer should be shown."""

    LOADING = "loading"
    LANDING = "landing"
    DASHBOARD = "dashboard"


@dataclass(frozen=True)
class Session:
    """Authentication state plus the optional display identity."""

    status: SessionStatus
    name: str | None = None
    email: str | None = None

    @classmethod
    def loading(cls) -> Session:
        return cls(SessionStatus.LOADING)

    @classmethod
    def unauthenticated(cls) -> Session:
        return cls(SessionStatus.UNAUTHENTICATED)

    @classmethod
    def authenticated(cls, name: str | None = None, email: str | None = None) -> Session:
        return cls(SessionStatus.AUTHENTICATED, name=name, email=email)

    @property
    def is_authenticated(self) -> bool:
        return self.status == SessionStatus.AUTHENTICATED

    @property
    def display_name(self) -> str | None:
        """Name shown in the header: the user's name, falling back to email."""
        return self.name or self.email or None

    @property
    def greeting_name(self) -> str:
        """First word of the user's name, or a generic fallback.

        Leading whitespace is skipped, so "  Alan Turing" greets "Alan"
        rather than falling back.
        """
        if self.name:
            parts = self.name.split()
            if parts:
                return parts[0]
        return DEFAULT_GREETING_NAME


def resolve_surface(session: Session) -> Surface:
    """Pick the surface for a session.

    Authenticated viewers go to the dashboard, everyone else to the landing
    page. Nothing conclusive is shown while the session is still loading.
    """
    if session.status == SessionStatus.LOADING:
        return Surface.LOADING
    if session.status == SessionStatus.AUTHENTICATED:
        return Surface.DASHBOARD
    return Surface.LANDING
