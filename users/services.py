"""
Service layer for users.

Plain CRUD plus lookup-by-email, which is how a Google sign-in is resolved to
a stored record (login, and the creator of a new announcement).
"""
import logging
from typing import Any, Dict, List

from announcements_backend import store
from announcements_backend.errors import RecordNotFoundError

from .models import User

logger = logging.getLogger(__name__)


class UserService:
    """CRUD for User records."""

    @staticmethod
    def list() -> List[User]:
        return list(User.objects.all())

    @staticmethod
    def create(data: Dict[str, Any]) -> User:
        """Insert a user. A duplicate email raises UniquenessError."""
        user = store.create(User.objects, data, unique_fields=["email"])
        logger.info("Created user %s (%s)", user.pk, user.email)
        return user

    @staticmethod
    def update(user_id, data: Dict[str, Any]) -> User:
        """
        Update only the given fields of a user.

        Raises RecordNotFoundError for an unknown id and UniquenessError when
        the new email belongs to another user.
        """
        user = store.update_by_id(User.objects, user_id, data, unique_fields=["email"])
        if user is None:
            raise RecordNotFoundError("Invalid userId supplied")
        logger.info("Updated user %s fields=%s", user.pk, sorted(data))
        return user

    @staticmethod
    def delete(user_id) -> User:
        user = store.delete_by_id(User.objects, user_id)
        if user is None:
            raise RecordNotFoundError("Invalid userId supplied")
        logger.info("Deleted user %s", user_id)
        return user

    @staticmethod
    def get_by_email(email: str) -> User:
        user = User.objects.filter(email=email).first()
        if user is None:
            raise RecordNotFoundError("Invalid email supplied")
        return user
