"""
Role based authorization gate.

Two roles exist: ``READ`` allows listing and fetching records and
``WRITE`` additionally allows creating, updating and deleting them.
``WRITE`` implies ``READ``.  A caller with no roles at all is
anonymous and is denied every operation.

``requires_role`` wraps a controller operation so the check runs
before the operation body, and therefore before any store access.
"""

import enum
import functools
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Iterable, Optional, TypeVar

from .errors import AuthorizationDenied


class Role(str, enum.Enum):
    READ = "READ"
    WRITE = "WRITE"


# Roles each role grants, including itself.
_IMPLIED = {
    Role.READ: frozenset({Role.READ}),
    Role.WRITE: frozenset({Role.READ, Role.WRITE}),
}


@dataclass(frozen=True)
class Caller:
    """Identity of the party performing an operation."""

    subject: Optional[str] = None
    roles: FrozenSet[Role] = field(default_factory=frozenset)

    @property
    def is_anonymous(self) -> bool:
        return self.subject is None and not self.roles

    def effective_roles(self) -> FrozenSet[Role]:
        granted: FrozenSet[Role] = frozenset()
        for role in self.roles:
            granted |= _IMPLIED[role]
        return granted


ANONYMOUS = Caller()


def parse_roles(names: Iterable[str]) -> FrozenSet[Role]:
    """Convert role names (case insensitive) to ``Role`` members.

    Unknown names are dropped so a token minted for another service
    cannot grant anything here.
    """
    roles = set()
    for name in names:
        try:
            roles.add(Role(str(name).upper()))
        except ValueError:
            continue
    return frozenset(roles)


class AuthorizationGate:
    """Evaluates a caller's granted roles against a required role."""

    @staticmethod
    def check(caller: Optional[Caller], required: Role) -> Caller:
        if caller is None or caller.is_anonymous:
            raise AuthorizationDenied(required.value, anonymous=True)
        if required not in caller.effective_roles():
            raise AuthorizationDenied(required.value)
        return caller


F = TypeVar("F", bound=Callable)


def requires_role(required: Role) -> Callable[[F], F]:
    """Decorator enforcing ``required`` on an operation taking ``caller`` first.

    The wrapped callable must accept the caller as its first argument
    after ``self``.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self, caller: Caller, *args, **kwargs):
            AuthorizationGate.check(caller, required)
            return func(self, caller, *args, **kwargs)

        wrapper.required_role = required  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator
