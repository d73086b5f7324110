"""
In‑memory storage for users.

``UserStore`` keeps users in a list in insertion order and scans it
linearly.  One instance is created per application and lives for the
lifetime of the process; nothing is persisted.
"""

import logging
import threading
import uuid
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from ..schemas.user import User, UserData


logger = logging.getLogger(__name__)

MERGE_FIELDS = ("username", "age", "hobbies")


def generate_user_id() -> str:
    """Return a random UUID in canonical 8‑4‑4‑4‑12 form."""
    return str(uuid.uuid4())


class UserStore:
    """Ordered collection of user records.

    Every read and write goes through ``_lock`` so that the list is never
    observed half‑updated, whichever thread the caller runs on.
    """

    def __init__(self, id_factory: Callable[[], str] = generate_user_id) -> None:
        self._users: List[User] = []
        self._lock = threading.Lock()
        self._id_factory = id_factory

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list_all(self) -> List[User]:
        """Return all users in insertion order."""
        with self._lock:
            return list(self._users)

    def find_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._find(user_id)

    def insert(self, data: UserData) -> User:
        """Assign a fresh id to ``data``, store it and return the record."""
        user = User(
            id=self._id_factory(),
            username=data.username,
            age=data.age,
            hobbies=list(data.hobbies),
        )
        with self._lock:
            self._users.append(user)
        logger.info("Created user %s", user.id)
        return user

    def replace(self, user_id: str, data: Union[UserData, Mapping[str, Any]]) -> Optional[User]:
        """Merge ``data`` into the user with ``user_id``.

        Only truthy values overwrite: an empty string, ``0``, an empty
        list or a missing key leaves the stored value as it was.  The id
        never changes.  Returns ``None`` when no such user exists.
        """
        values: Dict[str, Any] = data.model_dump() if isinstance(data, UserData) else dict(data)
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return None
            for field in MERGE_FIELDS:
                new_value = values.get(field)
                if new_value:
                    setattr(user, field, new_value)
        logger.info("Updated user %s", user_id)
        return user

    def remove(self, user_id: str) -> None:
        """Drop the user with ``user_id``; unknown ids are ignored."""
        with self._lock:
            before = len(self._users)
            self._users = [user for user in self._users if user.id != user_id]
            removed = before - len(self._users)
        if removed:
            logger.info("Deleted user %s", user_id)

    def clear(self) -> None:
        with self._lock:
            self._users = []

    def _find(self, user_id: str) -> Optional[User]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None
