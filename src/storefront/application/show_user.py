"""Application service: Show User use case (query)."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import entity_id
from storefront.domain.repository.user_repository import UserRepository


class ShowUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str) -> User:
        user_id = entity_id(user_id, label="user id")
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("user", user_id)
        return user
