"""
Outcome type returned by the domain services.

Expected business outcomes (not found, conflict, expired invite) are values,
not raised exceptions: callers branch on ``Ok``/``Err`` and the HTTP layer
calls ``unwrap`` to turn an ``Err`` into the matching error response.
"""
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from localstyle.error_handlers import AppException

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: AppException

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def unwrap(result: "Result[T]") -> T:
    """Return the value of an ``Ok`` or raise the error carried by an ``Err``."""
    if isinstance(result, Err):
        raise result.error
    return result.value
