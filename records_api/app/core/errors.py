"""
Domain exceptions raised by the service layer.

These carry no HTTP details; ``error_handlers`` maps them to
responses so that every resource reports failures the same way.
"""

from typing import Any, Optional


class RecordsError(Exception):
    """Base class for errors raised by the Records API core."""


class EntityNotFoundException(RecordsError):
    """Raised when an operation's key has no live record in its store.

    ``entity_name`` is the human readable type name (``"Book"``) and
    ``key`` the key as supplied to the operation.
    """

    def __init__(self, entity_name: str, key: Any) -> None:
        self.entity_name = entity_name
        self.key = key
        super().__init__(f"{entity_name} with id {key} not found")

    @property
    def message(self) -> str:
        return str(self)


class AuthorizationDenied(RecordsError):
    """Raised by the authorization gate before an operation runs.

    ``anonymous`` distinguishes a caller that presented no identity at
    all from one that lacks the required role.
    """

    def __init__(self, required: Optional[str] = None, anonymous: bool = False) -> None:
        self.required = required
        self.anonymous = anonymous
        super().__init__("Not authenticated" if anonymous else "Insufficient permissions")
