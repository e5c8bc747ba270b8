# charon

This package gives you building blocks for programs that work with an
authentication and authorization service. It has three parts:

- a permission model,
- a security context that carries the acting user and their access token,
- expectation-based test doubles for the service's client and server interfaces.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Permissions (`charon.permission`)

A `Permission` is a `str` made of three parts separated by colons: a
subsystem, a module and an action. An example is `charon:user:can create`.

```python
from charon.permission import (
    ALL_PERMISSIONS, Permission, Permissions, new_permissions, permission_from_json,
)

perm = Permission("charon:user:can create")
perm.split()        # ("charon", "user", "can create")
perm.subsystem()    # "charon"
perm.module()       # "user"
perm.action()       # "can create"
perm.to_json()      # '"charon:user:can create"'

permission_from_json('"x"')   # Permission('"x"'): the raw data is kept as given
```

When a string has fewer than three parts, the missing leading parts are
empty. For example, `"module:action"` splits to `("", "module", "action")`,
`"action"` splits to `("", "", "action")`, and the empty string gives three
empty parts.

`Permissions` is a `list` of `Permission` values:

```python
granted = new_permissions("charon:user:can create", "charon:group:can delete")
granted.contains(perm)    # True if any of the given permissions is present
granted.contains()        # False: nothing given
granted.strings()         # the permissions as plain strings

flags = Permissions()
flags.set("charon:group:can create,charon:group:can modify")  # appends both
str(flags)                # "charon:group:can create,charon:group:can modify"

granted.less(0, 1)        # compares two entries by subsystem, module and action
granted.ordered()         # a new, sorted Permissions
```

The module also defines one constant for each built-in permission of the
service, such as `USER_CAN_CREATE` and `GROUP_PERMISSION_CAN_RETRIEVE`.
`ALL_PERMISSIONS` collects the service's permissions.

## Security context (`charon.securitycontext`)

A `Context` is an immutable chain of key/value pairs. `with_value` returns a
child context, and `value` looks a key up through the chain. It returns
`None` if the key is not there. `SecurityContext` wraps a context and reads
the actor and the access token from it.

```python
from charon.securitycontext import (
    Actor, Context, new_access_token_context, new_actor_context, new_security_context,
)

ctx = new_actor_context(Context(), Actor(id=1, username="user@example.com"))
ctx = new_access_token_context(ctx, "token")
sc = new_security_context(ctx)

sc.actor()          # Actor(id=1, username="user@example.com", ...), or None
sc.access_token()   # "token", or None
sc.token()          # Token(access_token="token", token_type="")
```

If the context has no access token, `token()` raises
`MissingAccessTokenError`. `actor_from_context` and
`access_token_from_context` read the same values from any `Context`.
`Actor.to_dict()` returns the actor with camel-case keys (`firstName`,
`isSuperuser` and so on) and its permissions as plain strings.

## Test doubles

Each service interface has a client double and a server double:

| Module | Classes |
| --- | --- |
| `charon.auth_mock` | `AuthClient`, `AuthServer` |
| `charon.group_manager_mock` | `GroupManagerClient`, `GroupManagerServer` |
| `charon.permission_manager_mock` | `PermissionManagerClient`, `PermissionManagerServer` |
| `charon.refresh_token_manager_mock` | `RefreshTokenManagerClient`, `RefreshTokenManagerServer` |
| `charon.user_manager_mock` | `UserManagerClient`, `UserManagerServer` |

Every double builds on `charon.mocking.Mock`. Client methods take
`(ctx, request, *options)`. Server methods take `(ctx, request)`.

First declare the expected calls with `on(method, *args)`. Each expectation
returns a result and an error:

```python
from charon.auth_mock import AuthClient
from charon.mocking import ANYTHING

client = AuthClient()
client.on("is_granted", ANYTHING, "request").returns(True, None).once()

client.is_granted(object(), "request")   # True
client.assert_expectations()
```

How a call is answered:

- If the error value is not `None`, the call raises it. It must be an exception.
- A result or error that is a function is called with the call's arguments, and its return value is used.
- `ANYTHING` as an expected argument matches any actual argument.
- `once()` or `times(n)` limits how often an expectation may be used.
- A call that matches no expectation raises `UnexpectedCallError`.
- A call made more often than its expectation allows also raises `UnexpectedCallError`.

To check what happened afterwards, use these:

- `assert_expectations()`
- `assert_called(method, *args)`
- `assert_not_called(method, *args)`
- `call_count(method)`

Failed checks raise `ExpectationError`.

## What this package does not do

The package has no running service. It has no network client or server for
the service's interfaces, no storage of users, groups or permissions, and no
command-line tools. The client and server classes above are test doubles
only. They answer with whatever their expectations were set up to return.