"""User aggregate.

Orders refer to users by id only; nothing in the order logic ever
mutates a user.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError


@dataclass
class User:

    id: str
    first_name: str
    last_name: str
    email: str
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(user_id: str, first_name: str, last_name: str, email: str) -> User:
        return User(
            id=user_id,
            first_name=_required(first_name, "First name"),
            last_name=_required(last_name, "Last name"),
            email=_clean_email(email),
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def rename(self, first_name: str | None = None, last_name: str | None = None) -> None:
        if first_name is not None:
            self.first_name = _required(first_name, "First name")
        if last_name is not None:
            self.last_name = _required(last_name, "Last name")
        self._touch()

    def change_email(self, email: str) -> None:
        self.email = _clean_email(email)
        self._touch()

    def set_active(self, active: bool) -> None:
        self.is_active = active
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)


def _required(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def _clean_email(email: str) -> str:
    email = (email or "").strip()
    if "@" not in email or email.startswith("@") or email.endswith("@"):
        raise ValidationError(f"Email is not valid: '{email}'")
    return email
