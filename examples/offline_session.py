"""Example: drive the leave registry without a backend.

Runs one student submission through parent and admin approval against the
offline data source, the same calls a UI would make.
"""

from types import SimpleNamespace

from hostel_leave.container import build_registry
from hostel_leave.core.enums import Role
from hostel_leave.identity.model import Actor
from hostel_leave.identity.provider import SessionIdentity


def main():
    settings = SimpleNamespace(LEAVE_DATA_SOURCE="offline", LEAVE_CACHE_BACKEND="memory")
    student = Actor(id="1", name="John Student", role=Role.STUDENT)
    parent = Actor(id="2", name="Mary Parent", role=Role.PARENT)
    admin = Actor(id="3", name="Alex Admin", role=Role.ADMIN)

    identity = SessionIdentity(student)
    registry = build_registry(settings, identity=identity)
    registry.synchronize()

    leave = registry.submit(student, {"leaveType": "home", "fromDate": "2024-01-10", "toDate": "2024-01-12", "reason": "trip"})
    print("submitted:", leave.id, leave.status.value)

    identity.sign_in(parent)
    registry.on_actor_changed()
    print("after parent:", registry.approve(parent, leave.id).status.value)

    identity.sign_in(admin)
    registry.on_actor_changed()
    print("after admin:", registry.approve(admin, leave.id).status.value)
    print("summary:", registry.summary())


if __name__ == "__main__":
    main()
