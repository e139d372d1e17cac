from __future__ import annotations

from datetime import datetime, timezone

import pytest

from hostel_leave.core.enums import Role
from hostel_leave.identity.model import Actor


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 9, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def student() -> Actor:
    return Actor(id="1", name="John Student", role=Role.STUDENT)


@pytest.fixture
def other_student() -> Actor:
    return Actor(id="7", name="Jane Student", role=Role.STUDENT)


@pytest.fixture
def parent() -> Actor:
    return Actor(id="2", name="Mary Parent", role=Role.PARENT)


@pytest.fixture
def admin() -> Actor:
    return Actor(id="3", name="Alex Admin", role=Role.ADMIN)
