"""Data models for User Registry.

- User: a single user record, identified by email
"""

from user_registry.models.user import User

__all__ = [
    "User",
]
