"""
ManageUsers Use Case.

Onboarding and profile updates. Every user returned from here is a
``UserPublic``: the stored password never leaves this layer.
"""

import logging
from typing import Optional

from application.ports import UserRepository
from domain.errors import EntityNotFoundError, ValidationFailure
from domain.models import UserCreate, UserPatch, UserPublic

logger = logging.getLogger(__name__)


class ManageUsersUseCase:
    """
    Use case for reading, creating and updating users.

    Usernames are unique: creating or renaming a user onto a taken username
    is rejected as a validation failure.
    """

    def __init__(self, user_repo: UserRepository):
        """
        Initialize with required dependencies.

        Args:
            user_repo: Repository for user persistence
        """
        self._user_repo = user_repo

    def get_user(self, user_id: int) -> UserPublic:
        """
        Get a user by ID.

        Raises:
            EntityNotFoundError: If no user has this ID
        """
        user = self._user_repo.get_user(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user.public()

    def create_user(self, data: UserCreate) -> UserPublic:
        """
        Onboard a new user.

        Raises:
            ValidationFailure: If the username is already taken
        """
        self._ensure_username_free(data.username)
        user = self._user_repo.create_user(data)
        logger.info("Created user %s", user.id)
        return user.public()

    def update_user(self, user_id: int, patch: UserPatch) -> UserPublic:
        """
        Apply a partial update to a user.

        Raises:
            EntityNotFoundError: If no user has this ID
            ValidationFailure: If the patch renames the user onto a taken username
        """
        if patch.username is not None:
            self._ensure_username_free(patch.username, user_id=user_id)
        return self._user_repo.update_user(user_id, patch).public()

    def _ensure_username_free(self, username: str, user_id: Optional[int] = None) -> None:
        existing = self._user_repo.get_user_by_username(username)
        if existing is not None and existing.id != user_id:
            raise ValidationFailure(
                "User",
                errors=[
                    {
                        "loc": ["body", "username"],
                        "msg": "Username already taken",
                        "type": "value_error.duplicate",
                    }
                ],
            )
