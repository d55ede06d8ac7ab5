"""Command-line entry point running the user registry demo."""

import logging
import sys

from user_registry.config import get_settings
from user_registry.models.user import User
from user_registry.services.user_manager import UserManager

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging to stderr so stdout only carries user listings."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def run_demo(manager: UserManager) -> None:
    """Run the add/print/update/remove/print scenario against manager."""
    manager.add_user(User(name="Amir", email="amir@example.com", role="Admin"))
    manager.add_user(User(name="Mikhail", email="mikhail@example.com", role="User"))

    manager.print_all()

    manager.update_user(
        "mikhail@example.com",
        User(name="Mikhail", email="mikhail@example.com", role="Manager"),
    )
    manager.remove_user("amir@example.com")

    manager.print_all()


def main() -> None:
    """Load settings, set up logging and run the demo on a fresh manager."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        f"Starting {settings.app_name} {settings.app_version} ({settings.app_env})..."
    )

    run_demo(UserManager())

    logger.info(f"{settings.app_name} done")


if __name__ == "__main__":
    main()
