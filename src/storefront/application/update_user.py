"""Application service: Update User use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import entity_id
from storefront.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UpdateUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        user_id: str,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        active: bool | None = None,
    ) -> User:
        """Update any subset of a user's fields; emails stay unique."""
        user_id = entity_id(user_id, label="user id")
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("user", user_id)

        if email is not None:
            owner = self._user_repo.get_by_email(email.strip())
            if owner is not None and owner.id != user.id:
                raise ValidationError(f"A user with email '{email.strip()}' already exists")
            user.change_email(email)
        if first_name is not None or last_name is not None:
            user.rename(first_name, last_name)
        if active is not None:
            user.set_active(active)

        self._user_repo.save(user)
        logger.info("Updated user %s", user.id)
        return user
