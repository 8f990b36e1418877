"""Application service: Delete User use case.

Existing orders keep their ``user_id``; nothing cascades.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import entity_id
from storefront.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str) -> None:
        user_id = entity_id(user_id, label="user id")
        if not self._user_repo.delete(user_id):
            raise EntityNotFoundError("user", user_id)
        logger.info("Deleted user %s", user_id)
