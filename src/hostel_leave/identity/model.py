from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from ..core.enums import Role

ACTOR_ID_HEADER = "X-Actor-Id"
ACTOR_NAME_HEADER = "X-Actor-Name"
ACTOR_ROLE_HEADER = "X-Actor-Role"


@dataclass(frozen=True)
class Actor:
    """Authenticated identity issuing a command.

    Supplied by the identity provider and trusted as-is; nothing in this
    package re-derives the role.
    """

    id: str
    name: str
    role: Role

    def to_headers(self) -> dict:
        return {
            ACTOR_ID_HEADER: self.id,
            ACTOR_NAME_HEADER: self.name,
            ACTOR_ROLE_HEADER: self.role.value,
        }

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Optional["Actor"]:
        actor_id = (headers.get(ACTOR_ID_HEADER) or "").strip()
        role = (headers.get(ACTOR_ROLE_HEADER) or "").strip().lower()
        if not actor_id or not role:
            return None
        try:
            parsed_role = Role(role)
        except ValueError:
            return None
        return cls(id=actor_id, name=(headers.get(ACTOR_NAME_HEADER) or "").strip(), role=parsed_role)
