"""
User Repository Interface (Port).

This module defines the abstract interface for user persistence operations.
Implementations may use in-memory tables or a real storage engine.
"""
from typing import Optional, Protocol

from domain.models import User, UserCreate, UserPatch


class UserRepository(Protocol):
    """
    Abstract interface for user persistence operations.

    Usernames are expected to be unique; implementations are not required to
    enforce it at write time.
    """

    def get_user(self, user_id: int) -> Optional[User]:
        """
        Get a single user by ID.

        Args:
            user_id: User ID

        Returns:
            User or None if not found
        """
        ...

    def get_user_by_username(self, username: str) -> Optional[User]:
        """
        Get a user by exact username match.

        Args:
            username: Login name

        Returns:
            User or None if no user has this username
        """
        ...

    def create_user(self, data: UserCreate) -> User:
        """
        Store a new user and assign it the next ID.

        Args:
            data: Onboarding payload

        Returns:
            The stored user including its ID
        """
        ...

    def update_user(self, user_id: int, patch: UserPatch) -> User:
        """
        Merge the fields set on ``patch`` into an existing user.

        Args:
            user_id: User ID
            patch: Fields to change; omitted fields are preserved

        Returns:
            The merged user

        Raises:
            EntityNotFoundError: If no user has this ID
        """
        ...
