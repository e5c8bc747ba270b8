"""Mock implementations of the authentication service client and server."""

from __future__ import annotations

from typing import Any

from charon.mocking import Mock

__all__ = ["AuthClient", "AuthServer"]


class AuthClient(Mock):
    """Mock of the authentication client; extra arguments are call options."""

    def actor(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the actor response set up for this call."""
        return self._respond("actor", ctx, request, *args)

    def belongs_to(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the belonging answer set up for this call."""
        return self._respond("belongs_to", ctx, request, *args)

    def is_authenticated(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the authentication answer set up for this call."""
        return self._respond("is_authenticated", ctx, request, *args)

    def is_granted(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the granting answer set up for this call."""
        return self._respond("is_granted", ctx, request, *args)

    def login(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the login response set up for this call."""
        return self._respond("login", ctx, request, *args)

    def logout(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the logout response set up for this call."""
        return self._respond("logout", ctx, request, *args)


class AuthServer(Mock):
    """Mock of the authentication server."""

    def actor(self, ctx: Any, request: Any) -> Any:
        """Return the actor response set up for this call."""
        return self._respond("actor", ctx, request)

    def belongs_to(self, ctx: Any, request: Any) -> Any:
        """Return the belonging answer set up for this call."""
        return self._respond("belongs_to", ctx, request)

    def is_authenticated(self, ctx: Any, request: Any) -> Any:
        """Return the authentication answer set up for this call."""
        return self._respond("is_authenticated", ctx, request)

    def is_granted(self, ctx: Any, request: Any) -> Any:
        """Return the granting answer set up for this call."""
        return self._respond("is_granted", ctx, request)

    def login(self, ctx: Any, request: Any) -> Any:
        """Return the login response set up for this call."""
        return self._respond("login", ctx, request)

    def logout(self, ctx: Any, request: Any) -> Any:
        """Return the logout response set up for this call."""
        return self._respond("logout", ctx, request)