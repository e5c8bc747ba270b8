"""A small expectation-based mocking toolkit for service clients and servers."""

from __future__ import annotations

import threading
from typing import Any, Iterable

__all__ = [
    "ANYTHING",
    "UnexpectedCallError",
    "ExpectationError",
    "Call",
    "Mock",
    "resolve",
]


class _Anything:
    def __repr__(self) -> str:
        return "ANYTHING"


ANYTHING = _Anything()
"""An expected argument that matches any actual argument."""


class UnexpectedCallError(AssertionError):
    """Raised when a mock is called in a way no expectation allows."""


class ExpectationError(AssertionError):
    """Raised when the recorded calls do not meet the expectations."""


class Call:
    """One expected call: a method, its arguments and what it returns."""

    def __init__(self, method: str, arguments: Iterable[Any]) -> None:
        self.method = method
        self.arguments = tuple(arguments)
        self.return_values: tuple[Any, ...] = ()
        # 0 means unlimited, a positive number counts the calls left,
        # -1 marks an expectation that has been used up.
        self.repeatability = 0
        self.total_calls = 0

    def returns(self, *args: Any) -> "Call":
        """Set the values the call gives back."""
        self.return_values = args
        return self

    def once(self) -> "Call":
        """Allow the call to be made only once."""
        return self.times(1)

    def times(self, count: int) -> "Call":
        """Allow the call to be made exactly ``count`` times."""
        if count < 1:
            raise ValueError("count must be a positive number")
        self.repeatability = count
        return self

    def matches(self, method: str, args: Iterable[Any]) -> bool:
        """Report whether a call of ``method`` with ``args`` fits this expectation."""
        args = tuple(args)
        if method != self.method or len(args) != len(self.arguments):
            return False
        return all(
            expected is ANYTHING or expected == actual
            for expected, actual in zip(self.arguments, args)
        )

    def __repr__(self) -> str:
        return f"Call({self.method!r}, {self.arguments!r}, returns={self.return_values!r})"


def resolve(value: Any, *args: Any) -> Any:
    """Return ``value``, or the result of calling it with ``args`` if it is a function."""
    if callable(value) and not isinstance(value, type):
        return value(*args)
    return value


class Mock:
    """Records calls and answers them from registered expectations."""

    def __init__(self) -> None:
        self.expected_calls: list[Call] = []
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._lock = threading.Lock()

    def on(self, method: str, *args: Any) -> Call:
        """Register an expected call and return it for further setup."""
        call = Call(method, args)
        with self._lock:
            self.expected_calls.append(call)
        return call

    def called(self, method: str, *args: Any) -> tuple[Any, ...]:
        """Record a call and return the values its expectation gives back."""
        with self._lock:
            matching = [c for c in self.expected_calls if c.matches(method, args)]
            if not matching:
                raise UnexpectedCallError(
                    f"mock: unexpected call {method}{args!r}, set it up with on()"
                )
            call = next((c for c in matching if c.repeatability > -1), None)
            if call is None:
                raise UnexpectedCallError(
                    f"mock: call {method}{args!r} was already made as often as expected"
                )
            if call.repeatability == 1:
                call.repeatability = -1
            elif call.repeatability > 1:
                call.repeatability -= 1
            call.total_calls += 1
            self.calls.append((method, args))
            return call.return_values

    def assert_expectations(self) -> None:
        """Raise if any expected call was not made as often as required."""
        with self._lock:
            missing = [
                c
                for c in self.expected_calls
                if c.total_calls == 0 or c.repeatability > 0
            ]
        if missing:
            details = "; ".join(
                f"{c.method}{c.arguments!r} made {c.total_calls} time(s)" for c in missing
            )
            raise ExpectationError(f"mock: expectations not met: {details}")

    def assert_called(self, method: str, *args: Any) -> None:
        """Raise unless ``method`` was called with arguments matching ``args``."""
        if not self._was_called(method, args):
            raise ExpectationError(f"mock: expected call {method}{args!r} was not made")

    def assert_not_called(self, method: str, *args: Any) -> None:
        """Raise if ``method`` was called with arguments matching ``args``."""
        if self._was_called(method, args):
            raise ExpectationError(f"mock: call {method}{args!r} was made but should not be")

    def call_count(self, method: str) -> int:
        """Return how many times ``method`` was called."""
        with self._lock:
            return sum(1 for name, _ in self.calls if name == method)

    def _was_called(self, method: str, args: tuple[Any, ...]) -> bool:
        pattern = Call(method, args)
        with self._lock:
            return any(pattern.matches(name, actual) for name, actual in self.calls)

    def _respond(self, method: str, *args: Any) -> Any:
        """Answer a call that yields a result or raises an error."""
        values = self.called(method, *args)
        if len(values) != 2:
            raise ExpectationError(
                f"mock: {method} needs a result and an error to return, got {len(values)} value(s)"
            )
        result = resolve(values[0], *args)
        error = resolve(values[1], *args)
        if error is not None:
            if not isinstance(error, BaseException):
                raise TypeError(f"mock: {method} error value {error!r} is not an exception")
            raise error
        return result