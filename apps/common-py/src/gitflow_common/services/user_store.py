"""In-memory user store."""

from datetime import UTC, datetime

from gitflow_common.models.user import User
from gitflow_common.services.record_store import RecordStore

SEED_USERS = [
    User(
        id=1,
        name="John Doe",
        email="john.doe@example.com",
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
        is_active=True,
    ),
    User(
        id=2,
        name="Jane Smith",
        email="jane.smith@example.com",
        created_at=datetime(2024, 1, 2, tzinfo=UTC),
        is_active=True,
    ),
    User(
        id=3,
        name="Bob Johnson",
        email="bob.johnson@example.com",
        created_at=datetime(2024, 1, 3, tzinfo=UTC),
        is_active=False,
    ),
]


class UserStore(RecordStore[User]):
    """Store for user records, seeded with the demo users by default."""

    record_type = User

    def __init__(self, users: list[User] | None = None) -> None:
        super().__init__(SEED_USERS if users is None else users)
