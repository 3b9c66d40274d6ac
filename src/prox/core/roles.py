"""Role classification and capability gating.

This is the only place raw role strings are compared; everything else
consumes `Capability`.
"""

from __future__ import annotations

from dataclasses import dataclass

from prox.models.session import Capability, Session

STUDENT_ROLE = "student"


def classify(session: Session | None) -> Capability:
    """Map a session to its capability tag.

    Any authenticated role other than "student" is staff.
    """
    if session is None or not session.role:
        return Capability.ANONYMOUS
    if session.role == STUDENT_ROLE:
        return Capability.STUDENT
    return Capability.STAFF


def is_staff(session: Session | None) -> bool:
    return classify(session) is Capability.STAFF


@dataclass(frozen=True, slots=True)
class CapabilityGate:
    """Affordance visibility for one render."""

    capability: Capability

    @classmethod
    def from_session(cls, session: Session | None) -> CapabilityGate:
        return cls(capability=classify(session))

    @property
    def can_create(self) -> bool:
        return self.capability is Capability.STAFF

    @property
    def can_edit(self) -> bool:
        return self.capability is Capability.STAFF

    @property
    def can_delete(self) -> bool:
        return self.capability is Capability.STAFF
