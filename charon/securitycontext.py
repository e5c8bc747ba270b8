"""Request contexts that carry an actor and an access token."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from charon.permission import Permissions

__all__ = [
    "Context",
    "Token",
    "MissingAccessTokenError",
    "Actor",
    "SecurityContext",
    "new_security_context",
    "new_actor_context",
    "actor_from_context",
    "new_access_token_context",
    "access_token_from_context",
]

_NO_KEY = object()


class Context:
    """An immutable chain of key/value pairs."""

    def __init__(self, parent: Optional["Context"] = None) -> None:
        self._parent = parent
        self._key: Any = _NO_KEY
        self._value: Any = None

    def with_value(self, key: Any, value: Any) -> "Context":
        """Return a child context that carries ``value`` under ``key``."""
        child = Context(self)
        child._key = key
        child._value = value
        return child

    def value(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None."""
        ctx: Optional[Context] = self
        while ctx is not None:
            if ctx._key is not _NO_KEY and ctx._key == key:
                return ctx._value
            ctx = ctx._parent
        return None


@dataclass(frozen=True)
class Token:
    """An OAuth2 style token."""

    access_token: str
    token_type: str = ""


class MissingAccessTokenError(LookupError):
    """Raised when a context holds no access token."""


@dataclass
class Actor:
    """Anything that can be under control of the authorization service."""

    id: int = 0
    username: str = ""
    first_name: str = ""
    last_name: str = ""
    is_superuser: bool = False
    is_active: bool = False
    is_staff: bool = False
    is_confirmed: bool = False
    permissions: Permissions = field(default_factory=Permissions)

    def to_dict(self) -> dict[str, Any]:
        """Return the actor in its JSON shape."""
        return {
            "id": self.id,
            "username": self.username,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "isSuperuser": self.is_superuser,
            "isActive": self.is_active,
            "isStaff": self.is_staff,
            "isConfirmed": self.is_confirmed,
            "permissions": [str(p) for p in self.permissions],
        }


class _Key:
    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return f"<context key {self._name}>"


_ACTOR_KEY = _Key("actor")
_ACCESS_TOKEN_KEY = _Key("token")


class SecurityContext(Context):
    """A context that exposes the actor and access token it carries."""

    def __init__(self, ctx: Context) -> None:
        super().__init__(ctx)

    def actor(self) -> Optional[Actor]:
        """Return the actor stored in the context, if any."""
        return actor_from_context(self)

    def access_token(self) -> Optional[str]:
        """Return the access token stored in the context, if any."""
        return access_token_from_context(self)

    def token(self) -> Token:
        """Return an OAuth2 token built from the access token."""
        access_token = self.access_token()
        if access_token is None:
            raise MissingAccessTokenError(
                "securitycontext: missing access token, oauth2 token cannot be returned"
            )
        return Token(access_token=access_token)


def new_security_context(ctx: Context) -> SecurityContext:
    """Wrap ``ctx`` in a security context."""
    return SecurityContext(ctx)


def new_actor_context(ctx: Context, actor: Actor) -> Context:
    """Return a context that carries ``actor``."""
    return ctx.with_value(_ACTOR_KEY, actor)


def actor_from_context(ctx: Context) -> Optional[Actor]:
    """Return the actor stored in ``ctx``, or None."""
    found = ctx.value(_ACTOR_KEY)
    return found if isinstance(found, Actor) else None


def new_access_token_context(ctx: Context, token: str) -> Context:
    """Return a context that carries the access token."""
    return ctx.with_value(_ACCESS_TOKEN_KEY, token)


def access_token_from_context(ctx: Context) -> Optional[str]:
    """Return the access token stored in ``ctx``, or None."""
    found = ctx.value(_ACCESS_TOKEN_KEY)
    return found if isinstance(found, str) else None