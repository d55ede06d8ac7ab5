"""Services operating on user records."""

from user_registry.services.user_manager import UserManager

__all__ = [
    "UserManager",
]
