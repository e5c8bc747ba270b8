"""Mock implementations of the refresh token manager service client and server."""

from __future__ import annotations

from typing import Any

from charon.mocking import Mock

__all__ = ["RefreshTokenManagerClient", "RefreshTokenManagerServer"]


class RefreshTokenManagerClient(Mock):
    """Mock of the refresh token manager client; extra arguments are call options."""

    def create(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the create response set up for this call."""
        return self._respond("create", ctx, request, *args)

    def list(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the list response set up for this call."""
        return self._respond("list", ctx, request, *args)

    def revoke(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the revoke response set up for this call."""
        return self._respond("revoke", ctx, request, *args)


class RefreshTokenManagerServer(Mock):
    """Mock of the refresh token manager server."""

    def create(self, ctx: Any, request: Any) -> Any:
        """Return the create response set up for this call."""
        return self._respond("create", ctx, request)

    def list(self, ctx: Any, request: Any) -> Any:
        """Return the list response set up for this call."""
        return self._respond("list", ctx, request)

    def revoke(self, ctx: Any, request: Any) -> Any:
        """Return the revoke response set up for this call."""
        return self._respond("revoke", ctx, request)