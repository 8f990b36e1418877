"""Application service: Add User use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import new_entity_id
from storefront.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AddUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, first_name: str, last_name: str, email: str) -> User:
        """Register a new user. Emails are unique regardless of case."""
        user = User.create(new_entity_id(), first_name, last_name, email)

        if self._user_repo.get_by_email(user.email) is not None:
            raise ValidationError(f"A user with email '{user.email}' already exists")

        self._user_repo.save(user)
        logger.info("Added user %s <%s>", user.id, user.email)
        return user
