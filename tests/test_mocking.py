import pytest

from charon.mocking import (
    ANYTHING,
    Call,
    ExpectationError,
    Mock,
    UnexpectedCallError,
    resolve,
)


def test_called_returns_registered_values():
    mock = Mock()
    mock.on("get", 1, 2).returns("result", None)
    assert mock.called("get", 1, 2) == ("result", None)


def test_called_without_expectation_raises():
    mock = Mock()
    mock.on("get", 1)
    with pytest.raises(UnexpectedCallError):
        mock.called("get", 2)


def test_once_is_used_up():
    mock = Mock()
    mock.on("get").returns(1).once()
    assert mock.called("get") == (1,)
    with pytest.raises(UnexpectedCallError):
        mock.called("get")


def test_times_then_next_expectation():
    mock = Mock()
    mock.on("get").returns("first").times(2)
    mock.on("get").returns("second")
    results = [mock.called("get")[0] for _ in range(3)]
    assert results == ["first", "first", "second"]


def test_times_rejects_non_positive():
    with pytest.raises(ValueError):
        Call("get", ()).times(0)


def test_anything_matches_any_argument():
    call = Call("get", (ANYTHING, "x"))
    assert call.matches("get", (object(), "x"))
    assert not call.matches("get", (object(), "y"))
    assert not call.matches("other", (object(), "x"))
    assert not call.matches("get", ("x",))


def test_assert_expectations_unmet():
    mock = Mock()
    mock.on("get")
    with pytest.raises(ExpectationError):
        mock.assert_expectations()


def test_assert_expectations_partial_times():
    mock = Mock()
    mock.on("get").times(2)
    mock.called("get")
    with pytest.raises(ExpectationError):
        mock.assert_expectations()
    mock.called("get")
    mock.assert_expectations()
    assert mock.call_count("get") == 2


def test_assert_called_and_not_called():
    mock = Mock()
    mock.on("get", ANYTHING)
    mock.called("get", "a")
    mock.assert_called("get", "a")
    mock.assert_not_called("get", "b")
    with pytest.raises(ExpectationError):
        mock.assert_called("get", "b")
    with pytest.raises(ExpectationError):
        mock.assert_not_called("get", ANYTHING)


def test_call_count_counts_per_method():
    mock = Mock()
    mock.on("a")
    mock.on("b")
    mock.called("a")
    mock.called("a")
    mock.called("b")
    assert mock.call_count("a") == 2
    assert mock.call_count("b") == 1
    assert mock.call_count("c") == 0


def test_resolve_calls_functions_only():
    assert resolve(lambda x, y: x + y, 2, 3) == 5
    assert resolve("value", 2, 3) == "value"
    assert resolve(ValueError) is ValueError


def test_respond_raises_returned_error():
    mock = Mock()
    error = RuntimeError("boom")
    mock.on("get").returns(None, error)
    with pytest.raises(RuntimeError) as info:
        mock._respond("get")
    assert info.value is error


def test_respond_requires_two_values():
    mock = Mock()
    mock.on("get").returns("only")
    with pytest.raises(ExpectationError):
        mock._respond("get")


def test_respond_rejects_non_exception_error():
    mock = Mock()
    mock.on("get").returns(None, "not an error")
    with pytest.raises(TypeError):
        mock._respond("get")