"""In-memory manager for user records.

Holds an ordered list of User records with at most one record per email.
Lookups are a linear scan by exact email match, which is fine for the
small collections this is used with.
"""

import logging
import sys
from typing import TextIO

import structlog

from user_registry.models.user import User

# Emits through stdlib logging only, independent of structlog.configure().
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.processors.KeyValueRenderer(key_order=["event"]),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
)


class UserManager:
    """Ordered collection of users keyed by email.

    Operations on emails that are not present are no-ops. Mutating
    methods return whether anything was found so callers can tell,
    but nothing is raised.
    """

    def __init__(self) -> None:
        self._users: list[User] = []

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, email: object) -> bool:
        return isinstance(email, str) and self._find_index(email) is not None

    def add_user(self, user: User) -> bool:
        """Add a user, or replace the existing record with the same email.

        A replaced record keeps its position in the collection.

        Args:
            user: Record to store

        Returns:
            True if the user was appended, False if it replaced a record
        """
        idx = self._find_index(user.email)
        if idx is None:
            self._users.append(user)
            logger.debug("user added", email=user.email, count=len(self._users))
            return True

        self._users[idx] = user
        logger.debug("user replaced", email=user.email, position=idx)
        return False

    def remove_user(self, email: str) -> bool:
        """Remove the user with the given email, if any.

        Args:
            email: Email of the record to remove

        Returns:
            True if a record was removed
        """
        idx = self._find_index(email)
        if idx is None:
            logger.debug("remove skipped, no such user", email=email)
            return False

        del self._users[idx]
        logger.debug("user removed", email=email, count=len(self._users))
        return True

    def update_user(self, email: str, updated_user: User) -> bool:
        """Replace the user with the given email by updated_user.

        A copy of updated_user carrying the original email is stored. Any
        email set on updated_user is ignored and updated_user itself is
        left untouched.

        Args:
            email: Email of the record to replace
            updated_user: New record contents

        Returns:
            True if a record was replaced
        """
        idx = self._find_index(email)
        if idx is None:
            logger.debug("update skipped, no such user", email=email)
            return False

        self._users[idx] = updated_user.model_copy(
            update={"email": self._users[idx].email}
        )
        logger.debug("user updated", email=email, position=idx)
        return True

    def get_user(self, email: str) -> User | None:
        """Get the user with the given email, or None."""
        idx = self._find_index(email)
        if idx is None:
            return None
        return self._users[idx]

    def get_all_users(self) -> list[User]:
        """Get a copy of all users in insertion order.

        The returned list is independent of the manager: adding to or
        removing from it does not change the stored collection.
        """
        return list(self._users)

    def print_all(self, file: TextIO | None = None) -> None:
        """Print a "Users:" header and one indented line per user.

        Args:
            file: Stream to write to (default: stdout)
        """
        out = file if file is not None else sys.stdout
        print("Users:", file=out)
        for user in self._users:
            print(f"  {user}", file=out)

    def _find_index(self, email: str) -> int | None:
        for i, user in enumerate(self._users):
            if user.email == email:
                return i
        return None
