"""Permissions: strings made of a subsystem, a module and an action."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, Union

__all__ = [
    "Permission",
    "Permissions",
    "new_permissions",
    "permission_from_json",
    "ALL_PERMISSIONS",
]


class Permission(str):
    """A permission string of the form ``subsystem:module:action``."""

    __slots__ = ()

    def split(self) -> tuple[str, str, str]:  # type: ignore[override]
        """Return the subsystem, module and action of the permission."""
        if not self:
            return "", "", ""
        parts = str.split(self, ":")
        if len(parts) == 1:
            return "", "", parts[0]
        if len(parts) == 2:
            return "", parts[0], parts[1]
        return parts[0], parts[1], parts[2]

    def subsystem(self) -> str:
        """Return only the subsystem part."""
        return self.split()[0]

    def module(self) -> str:
        """Return only the module part."""
        return self.split()[1]

    def action(self) -> str:
        """Return only the action part."""
        return self.split()[2]

    def to_json(self) -> str:
        """Return the permission as a JSON string literal."""
        return '"' + str(self) + '"'


def permission_from_json(data: Union[str, bytes]) -> Permission:
    """Build a permission from raw JSON data, kept exactly as given."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")
    return Permission(data)


class Permissions(list):
    """An ordered collection of permissions."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        super().__init__(Permission(item) for item in items)

    def contains(self, *args: str) -> bool:
        """Return True if any of the given permissions is in the collection."""
        if not args:
            return False
        wanted = set(args)
        return any(perm in wanted for perm in self)

    def strings(self) -> list[str]:
        """Return the permissions as plain strings."""
        return [str(perm) for perm in self]

    def __str__(self) -> str:
        return ",".join(self)

    def set(self, value: str) -> None:
        """Append every comma separated permission found in ``value``."""
        self.extend(Permission(part) for part in value.split(","))

    def less(self, i: int, j: int) -> bool:
        """Report whether the permission at ``i`` sorts before the one at ``j``."""
        return _less(self[i], self[j])

    def ordered(self) -> "Permissions":
        """Return a new collection sorted by :meth:`less`."""

        def compare(a: Permission, b: Permission) -> int:
            if _less(a, b):
                return -1
            if _less(b, a):
                return 1
            return 0

        return Permissions(sorted(self, key=cmp_to_key(compare)))


def _less(a: Permission, b: Permission) -> bool:
    s1, m1, a1 = Permission(a).split()
    s2, m2, a2 = Permission(b).split()
    return s1 < s2 or m1 < m2 or a1 < a2


def new_permissions(*args: str) -> Permissions:
    """Build a collection from the given strings."""
    return Permissions(args)


USER_CAN_CREATE = Permission("charon:user:can create")
USER_CAN_CREATE_STAFF = Permission("charon:user:can create staff")

USER_CAN_DELETE_AS_STRANGER = Permission("charon:user:can delete as stranger")
USER_CAN_DELETE_AS_OWNER = Permission("charon:user:can delete as owner")
USER_CAN_DELETE_STAFF_AS_STRANGER = Permission("charon:user:can delete staff as stranger")
USER_CAN_DELETE_STAFF_AS_OWNER = Permission("charon:user:can delete staff as owner")

USER_CAN_MODIFY_AS_STRANGER = Permission("charon:user:can modify as stranger")
USER_CAN_MODIFY_AS_OWNER = Permission("charon:user:can modify as owner")
USER_CAN_MODIFY_STAFF_AS_STRANGER = Permission("charon:user:can modify staff as stranger")
USER_CAN_MODIFY_STAFF_AS_OWNER = Permission("charon:user:can modify staff as owner")

USER_CAN_RETRIEVE_AS_OWNER = Permission("charon:user:can retrieve as owner")
USER_CAN_RETRIEVE_AS_STRANGER = Permission("charon:user:can retrieve as stranger")
USER_CAN_RETRIEVE_STAFF_AS_OWNER = Permission("charon:user:can retrieve staff as owner")
USER_CAN_RETRIEVE_STAFF_AS_STRANGER = Permission("charon:user:can retrieve staff as stranger")

USER_PERMISSION_CAN_CREATE = Permission("charon:user_permission:can create")
USER_PERMISSION_CAN_DELETE = Permission("charon:user_permission:can delete")
USER_PERMISSION_CAN_MODIFY = Permission("charon:user_permission:can modify")
USER_PERMISSION_CAN_RETRIEVE = Permission("charon:user_permission:can retrieve")
USER_PERMISSION_CAN_CHECK_GRANTING_AS_STRANGER = Permission(
    "charon:user_permission:can check granting as a stranger"
)

USER_GROUP_CAN_CREATE = Permission("charon:user_group:can create")
USER_GROUP_CAN_DELETE = Permission("charon:user_group:can delete")
USER_GROUP_CAN_MODIFY = Permission("charon:user_group:can modify")
USER_GROUP_CAN_RETRIEVE = Permission("charon:user_group:can retrieve")
USER_GROUP_CAN_CHECK_BELONGING_AS_STRANGER = Permission(
    "charon:user_group:can check belonging as a stranger"
)

PERMISSION_CAN_CREATE = Permission("charon:permission:can create")
PERMISSION_CAN_DELETE = Permission("charon:permission:can delete")
PERMISSION_CAN_MODIFY = Permission("charon:permission:can modify")
PERMISSION_CAN_RETRIEVE = Permission("charon:permission:can retrieve")

GROUP_CAN_CREATE = Permission("charon:group:can create")
GROUP_CAN_DELETE = Permission("charon:group:can delete")
GROUP_CAN_MODIFY = Permission("charon:group:can modify")
GROUP_CAN_RETRIEVE = Permission("charon:group:can retrieve")

GROUP_PERMISSION_CAN_CREATE = Permission("charon:group_permission:can create")
GROUP_PERMISSION_CAN_DELETE = Permission("charon:group_permission:can delete")
GROUP_PERMISSION_CAN_MODIFY = Permission("charon:group_permission:can modify")
GROUP_PERMISSION_CAN_RETRIEVE = Permission("charon:group_permission:can retrieve")

REFRESH_TOKEN_CAN_CREATE = Permission("charon:refresh-token:can create")
REFRESH_TOKEN_CAN_REVOKE_AS_STRANGER = Permission("charon:refresh-token:can revoke as stranger")
REFRESH_TOKEN_CAN_REVOKE_AS_OWNER = Permission("charon:refresh-token:can revoke as owner")
REFRESH_TOKEN_CAN_MODIFY_AS_STRANGER = Permission("charon:refresh-token:can modify as stranger")
REFRESH_TOKEN_CAN_MODIFY_AS_OWNER = Permission("charon:refresh-token:can modify as owner")
REFRESH_TOKEN_CAN_RETRIEVE_AS_OWNER = Permission("charon:refresh-token:can retrieve as owner")
REFRESH_TOKEN_CAN_RETRIEVE_AS_STRANGER = Permission(
    "charon:refresh-token:can retrieve as stranger"
)

ALL_PERMISSIONS = Permissions(
    [
        USER_CAN_CREATE,
        USER_CAN_CREATE_STAFF,
        USER_CAN_DELETE_AS_STRANGER,
        USER_CAN_DELETE_AS_OWNER,
        USER_CAN_DELETE_STAFF_AS_STRANGER,
        USER_CAN_DELETE_STAFF_AS_OWNER,
        USER_CAN_MODIFY_AS_STRANGER,
        USER_CAN_MODIFY_AS_OWNER,
        USER_CAN_MODIFY_STAFF_AS_STRANGER,
        USER_CAN_MODIFY_STAFF_AS_OWNER,
        USER_CAN_RETRIEVE_AS_OWNER,
        USER_CAN_RETRIEVE_AS_STRANGER,
        USER_CAN_RETRIEVE_STAFF_AS_OWNER,
        USER_CAN_RETRIEVE_STAFF_AS_STRANGER,
        USER_PERMISSION_CAN_CREATE,
        USER_PERMISSION_CAN_DELETE,
        USER_PERMISSION_CAN_MODIFY,
        USER_PERMISSION_CAN_RETRIEVE,
        USER_GROUP_CAN_CREATE,
        USER_GROUP_CAN_DELETE,
        USER_GROUP_CAN_MODIFY,
        USER_GROUP_CAN_RETRIEVE,
        USER_GROUP_CAN_CHECK_BELONGING_AS_STRANGER,
        PERMISSION_CAN_CREATE,
        PERMISSION_CAN_DELETE,
        PERMISSION_CAN_MODIFY,
        PERMISSION_CAN_RETRIEVE,
        GROUP_CAN_CREATE,
        GROUP_CAN_DELETE,
        GROUP_CAN_MODIFY,
        GROUP_CAN_RETRIEVE,
        GROUP_PERMISSION_CAN_CREATE,
        GROUP_PERMISSION_CAN_DELETE,
        GROUP_PERMISSION_CAN_MODIFY,
        GROUP_PERMISSION_CAN_RETRIEVE,
        REFRESH_TOKEN_CAN_CREATE,
        REFRESH_TOKEN_CAN_REVOKE_AS_STRANGER,
        REFRESH_TOKEN_CAN_REVOKE_AS_OWNER,
        REFRESH_TOKEN_CAN_MODIFY_AS_STRANGER,
        REFRESH_TOKEN_CAN_MODIFY_AS_OWNER,
        REFRESH_TOKEN_CAN_RETRIEVE_AS_OWNER,
        REFRESH_TOKEN_CAN_RETRIEVE_AS_STRANGER,
    ]
)