"""Mock implementations of the user manager service client and server."""

from __future__ import annotations

from typing import Any

from charon.mocking import Mock

__all__ = ["UserManagerClient", "UserManagerServer"]


class UserManagerClient(Mock):
    """Mock of the user manager client; extra arguments are call options."""

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

    def list_groups(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the group list response set up for this call."""
        return self._respond("list_groups", ctx, request, *args)

    def list_permissions(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the permission list response set up for this call."""
        return self._respond("list_permissions", ctx, request, *args)

    def modify(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the modify response set up for this call."""
        return self._respond("modify", ctx, request, *args)

    def set_groups(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the set-groups response set up for this call."""
        return self._respond("set_groups", ctx, request, *args)

    def set_permissions(self, ctx: Any, request: Any, *args: Any) -> Any:
        """Return the set-permissions response set up for this call."""
        return self._respond("set_permissions", ctx, request, *args)


class UserManagerServer(Mock):
    """Mock of the user manager server."""

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

    def list_groups(self, ctx: Any, request: Any) -> Any:
        """Return the group list response set up for this call."""
        return self._respond("list_groups", ctx, request)

    def list_permissions(self, ctx: Any, request: Any) -> Any:
        """Return the permission list response set up for this call."""
        return self._respond("list_permissions", ctx, request)

    def modify(self, ctx: Any, request: Any) -> Any:
        """Return the modify response set up for this call."""
        return self._respond("modify", ctx, request)

    def set_groups(self, ctx: Any, request: Any) -> Any:
        """Return the set-groups response set up for this call."""
        return self._respond("set_groups", ctx, request)

    def set_permissions(self, ctx: Any, request: Any) -> Any:
        """Return the set-permissions response set up for this call."""
        return self._respond("set_permissions", ctx, request)