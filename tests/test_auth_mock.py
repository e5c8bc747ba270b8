import pytest

from charon.auth_mock import AuthClient, AuthServer
from charon.mocking import ANYTHING, ExpectationError, UnexpectedCallError
from charon.securitycontext import Context

METHODS = ["actor", "belongs_to", "is_authenticated", "is_granted", "login", "logout"]


@pytest.mark.parametrize("method", METHODS)
def test_client_returns_response(method):
    client = AuthClient()
    ctx = Context()
    request = {"request": method}
    response = {"response": method}
    client.on(method, ctx, request).returns(response, None)
    assert getattr(client, method)(ctx, request) is response
    client.assert_expectations()


@pytest.mark.parametrize("method", METHODS)
def test_server_returns_response(method):
    server = AuthServer()
    ctx = Context()
    request = {"request": method}
    response = {"response": method}
    server.on(method, ctx, request).returns(response, None)
    assert getattr(server, method)(ctx, request) is response
    assert server.call_count(method) == 1


@pytest.mark.parametrize("method", METHODS)
def test_server_raises_error(method):
    server = AuthServer()
    error = PermissionError("denied")
    server.on(method, ANYTHING, ANYTHING).returns(None, error)
    with pytest.raises(PermissionError) as info:
        getattr(server, method)(Context(), object())
    assert info.value is error


def test_client_passes_options():
    client = AuthClient()
    ctx = Context()
    request = object()
    client.on("login", ctx, request, "option").returns("session", None)
    assert client.login(ctx, request, "option") == "session"
    with pytest.raises(UnexpectedCallError):
        client.login(ctx, request)


def test_client_resolves_function_results():
    client = AuthClient()
    ctx = Context()
    request = {"value": 7}
    seen = []

    def respond(c, r, *opts):
        seen.append((c, r, opts))
        return r["value"]

    client.on("is_granted", ctx, request, "opt").returns(respond, lambda *a: None)
    assert client.is_granted(ctx, request, "opt") == 7
    assert seen == [(ctx, request, ("opt",))]


def test_client_function_error():
    client = AuthClient()
    client.on("actor", ANYTHING, ANYTHING).returns(
        None, lambda c, r: LookupError(r)
    )
    with pytest.raises(LookupError) as info:
        client.actor(Context(), "missing")
    assert info.value.args == ("missing",)


def test_server_unexpected_call():
    server = AuthServer()
    with pytest.raises(UnexpectedCallError):
        server.logout(Context(), object())


def test_server_expectations_unmet():
    server = AuthServer()
    server.on("is_authenticated", ANYTHING, ANYTHING).returns(True, None)
    with pytest.raises(ExpectationError):
        server.assert_expectations()
    assert server.is_authenticated(Context(), object()) is True
    server.assert_expectations()