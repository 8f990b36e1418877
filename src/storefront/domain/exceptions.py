"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Each class carries the HTTP status an HTTP adapter would answer with, so
transport code can map a rejection without inspecting its message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    status_code = 400


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class DuplicateReferenceError(ValidationError):
    """The same entity was referenced twice in one request."""

    def __init__(self, index: int, entity_id: str) -> None:
        super().__init__(
            f"Duplicate reference to product '{entity_id}' at item index {index}"
        )
        self.index = index
        self.entity_id = entity_id


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    status_code = 404

    def __init__(self, entity_kind: str, entity_id: object) -> None:
        super().__init__(f"{entity_kind.capitalize()} not found: '{entity_id}'")
        self.entity_kind = entity_kind
        self.entity_id = entity_id


class DependentEntitiesExistError(DomainException):
    """An entity cannot be removed while others still reference it."""

    status_code = 409

    def __init__(self, category_id: str, dependents: int) -> None:
        super().__init__(
            f"Category '{category_id}' cannot be deleted because "
            f"{dependents} product(s) still reference it"
        )
        self.category_id = category_id
        self.dependents = dependents


class InternalConsistencyFault(DomainException):
    """Derived state contradicts upstream guarantees; never a user error."""

    status_code = 500
