from __future__ import annotations

from typing import Optional, Protocol

from .model import Actor


class IdentityProvider(Protocol):
    """Source of the current actor (authentication itself happens elsewhere)."""

    def current_actor(self) -> Optional[Actor]:
        raise NotImplementedError


class SessionIdentity(IdentityProvider):
    """Holds whoever the presentation layer has signed in."""

    def __init__(self, actor: Optional[Actor] = None):
        self._actor = actor

    def current_actor(self) -> Optional[Actor]:
        return self._actor

    def sign_in(self, actor: Actor) -> None:
        self._actor = actor

    def sign_out(self) -> None:
        self._actor = None
