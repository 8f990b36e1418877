"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: str) -> User | None:
        for raw in self._file.load():
            if raw["id"] == user_id:
                return self._to_domain(raw)
        return None

    def get_by_email(self, email: str) -> User | None:
        for raw in self._file.load():
            if raw["email"].lower() == email.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[User]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, user: User) -> None:
        self._file.upsert(self._to_raw(user))

    def delete(self, user_id: str) -> bool:
        return self._file.remove(user_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "email": user.email,
            "is_active": user.is_active,
            "created_at": user.created_at.isoformat(),
            "updated_at": user.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            first_name=raw["first_name"],
            last_name=raw["last_name"],
            email=raw["email"],
            is_active=raw.get("is_active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
