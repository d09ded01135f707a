"""Design-by-contract support for names

Three disjoint failure kinds are raised: precondition violations by the
caller, inconsistent internal state found by an invariant check, and
postconditions that do not hold after an operation completed.
"""

import functools
import logging
from typing import Any, Callable, Optional, TypeVar, cast


logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


# Error classes
class NameContractError(Exception):
    """Base exception for name contract violations"""
    pass


class InvalidArgumentError(NameContractError, ValueError):
    """Caller-supplied value violates a precondition"""
    pass


class IndexOutOfRangeError(InvalidArgumentError, IndexError):
    """Component index outside the allowed range"""
    def __init__(self, index: object, lower: int, upper: int):
        self.index = index
        self.lower = lower
        self.upper = upper
        super().__init__(f"Index {index!r} out of range [{lower}, {upper}]")


class InvalidInternalStateError(NameContractError):
    """Class invariant does not hold; the instance is unusable"""
    pass


class OperationFailedError(NameContractError):
    """Operation completed but its postcondition does not hold"""
    pass


def _fail(error: NameContractError) -> None:
    logger.debug("Contract violation: %s: %s", type(error).__name__, error)
    raise error


def require(condition: bool, message: str) -> None:
    """Precondition check"""
    if not condition:
        _fail(InvalidArgumentError(message))


def require_index(index: object, lower: int, upper: int) -> None:
    """Precondition check for an index in the closed range [lower, upper]"""
    if isinstance(index, bool) or not isinstance(index, int) or not lower <= index <= upper:
        _fail(IndexOutOfRangeError(index, lower, upper))


def ensure(condition: bool, message: str) -> None:
    """Postcondition check"""
    if not condition:
        _fail(OperationFailedError(message))


def check_state(condition: bool, message: str) -> None:
    """Class invariant check"""
    if not condition:
        _fail(InvalidInternalStateError(message))


def mutator(delta: Optional[int] = None) -> Callable[[F], F]:
    """Wrap a mutating method so the class invariant is re-asserted after it

    When delta is given, the component count must have changed by exactly
    that amount once the method returns. The wrapped object provides
    `get_no_components()` and `_assert_invariant()`.
    """
    def decorator(method: F) -> F:
        @functools.wraps(method)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            old_count = self.get_no_components()
            result = method(self, *args, **kwargs)
            self._assert_invariant()
            if delta is not None:
                new_count = self.get_no_components()
                ensure(
                    new_count == old_count + delta,
                    f"{method.__name__} changed component count from "
                    f"{old_count} to {new_count}, expected {old_count + delta}",
                )
            return result
        return cast(F, wrapper)
    return decorator
