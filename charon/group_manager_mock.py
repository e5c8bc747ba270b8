"""Mock implementations of the group manager service client and server."""

from __future__ import annotations

from typing import Any

from charon.mocking import Mock

__all__ = ["GroupManagerClient", "GroupManagerServer"]


class GroupManagerClient(Mock):
    """Mock of the group manager client; extra arguments are call options."""

    def create(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the create response set up for this call."""
        return self._respond("create", ctx, request, *args)

    def delete(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the delete answer set up for this call."""
        return self._respond("delete", ctx, request, *args)

    def get(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the get response set up for this call."""
        return self._respond("get", ctx, request, *args)

    def list(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the list response set up for this call."""
        return self._respond("list", ctx, request, *args)

    def list_permissions(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the permission list response set up for this call."""
        return self._respond("list_permissions", ctx, request, *args)

    def modify(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the modify response set up for this call."""
        return self._respond("modify", ctx, request, *args)

    def set_permissions(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the set-permissions response set up for this call."""
        return self._respond("set_permissions", ctx, request, *args)


class GroupManagerServer(Mock):
    """Mock of the group manager server."""

    def create(self, ctx: Any, request: Any) -> Any:
        """Return the create response set up for this call."""
        return self._respond("create", ctx, request)

    def delete(self, ctx: Any, request: Any) -> Any:
        """Return the delete answer set up for this call."""
        return self._respond("delete", ctx, request)

    def get(self, ctx: Any, request: Any) -> Any:
        """Return the get response set up for this call."""
        return self._respond("get", ctx, request)

    def list(self, ctx: Any, request: Any) -> Any:
        """Return the list response set up for this call."""
        return self._respond("list", ctx, request)

    def list_permissions(self, ctx: Any, request: Any) -> Any:
        """Return the permission list response set up for this call."""
        return self._respond("list_permissions", ctx, request)

    def modify(self, ctx: Any, request: Any) -> Any:
        """Return the modify response set up for this call."""
        return self._respond("modify", ctx, request)

    def set_permissions(self, ctx: Any, request: Any) -> Any:
        """Return the set-permissions response set up for this call."""
        return self._respond("set_permissions", ctx, request)