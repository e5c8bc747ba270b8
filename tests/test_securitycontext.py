import pytest

from charon.permission import Permissions, USER_CAN_CREATE
from charon.securitycontext import (
    Actor,
    Context,
    MissingAccessTokenError,
    SecurityContext,
    Token,
    access_token_from_context,
    actor_from_context,
    new_access_token_context,
    new_actor_context,
    new_security_context,
)


def _actor():
    return Actor(
        id=7,
        username="user@example.com",
        first_name="first",
        last_name="last",
        is_active=True,
        permissions=Permissions([USER_CAN_CREATE]),
    )


def test_context_value_lookup_through_chain():
    ctx = Context().with_value("a", 1).with_value("b", 2)
    assert ctx.value("a") == 1
    assert ctx.value("b") == 2
    assert ctx.value("c") is None


def test_context_with_value_does_not_mutate_parent():
    parent = Context()
    parent.with_value("a", 1)
    assert parent.value("a") is None


def test_context_inner_value_shadows_outer():
    ctx = Context().with_value("a", 1).with_value("a", 2)
    assert ctx.value("a") == 2


def test_actor_round_trip():
    actor = _actor()
    ctx = new_actor_context(Context(), actor)
    assert actor_from_context(ctx) == actor


def test_actor_missing():
    assert actor_from_context(Context()) is None


def test_access_token_round_trip():
    ctx = new_access_token_context(Context(), "token")
    assert access_token_from_context(ctx) == "token"
    assert access_token_from_context(Context()) is None


def test_security_context_exposes_actor_and_token():
    base = new_access_token_context(new_actor_context(Context(), _actor()), "token")
    sc = new_security_context(base)
    assert isinstance(sc, SecurityContext)
    assert sc.actor() == _actor()
    assert sc.access_token() == "token"
    assert sc.token() == Token(access_token="token")


def test_security_context_without_values():
    sc = new_security_context(Context())
    assert sc.actor() is None
    assert sc.access_token() is None


def test_security_context_token_missing_raises():
    sc = new_security_context(Context())
    with pytest.raises(MissingAccessTokenError) as info:
        sc.token()
    assert str(info.value) == (
        "securitycontext: missing access token, oauth2 token cannot be returned"
    )


def test_security_context_derived_context_keeps_values():
    sc = new_security_context(new_actor_context(Context(), _actor()))
    derived = sc.with_value("other", 1)
    assert actor_from_context(derived) == _actor()
    assert derived.value("other") == 1


def test_actor_to_dict_keys_and_values():
    data = _actor().to_dict()
    assert set(data) == {
        "id",
        "username",
        "firstName",
        "lastName",
        "isSuperuser",
        "isActive",
        "isStaff",
        "isConfirmed",
        "permissions",
    }
    assert data["firstName"] == "first"
    assert data["isActive"] is True
    assert data["isSuperuser"] is False
    assert data["permissions"] == [str(USER_CAN_CREATE)]


def test_actor_defaults():
    actor = Actor()
    assert actor.to_dict()["permissions"] == []
    assert actor.id == 0