"""Mock implementations of the permission manager service client and server."""

from __future__ import annotations

from typing import Any

from charon.mocking import Mock

__all__ = ["PermissionManagerClient", "PermissionManagerServer"]


class PermissionManagerClient(Mock):
    """Mock of the permission manager client; extra arguments are call options."""

    def get(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the get response set up for this call."""
        return self._respond("get", ctx, request, *args)

    def list(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the list response set up for this call."""
        return self._respond("list", ctx, request, *args)

    def register(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the register response set up for this call."""
        return self._respond("register", ctx, request, *args)


class PermissionManagerServer(Mock):
    """Mock of the permission manager server."""

    def get(self, ctx: Any, request: Any) -> Any:
        """Return the get response set up for this call."""
        return self._respond("get", ctx, request)

    def list(self, ctx: Any, request: Any) -> Any:
        """Return the list response set up for this call."""
        return self._respond("list", ctx, request)

    def register(self, ctx: Any, request: Any) -> Any:
        """Return the register response set up for this call."""
        return self._respond("register", ctx, request)