"""Outcome values: the success-or-failure result of one fallible operation.

An outcome is either a ``Success`` carrying a payload or a ``Failure`` carrying an
error value. Producers of outcomes are ordinary caller code; the rest of the package
only consumes them.

Typical usage:
    outcomes = map_outcomes(Path.read_text, paths, catch=OSError)
    for outcome in outcomes:
        if is_success(outcome):
            print(outcome.value)
"""

from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    Tuple,
    Type,
    TypeGuard,
    TypeVar,
    Union,
)

O = TypeVar("O")
E = TypeVar("E")
T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[O]):
    """Outcome of an operation that produced a value."""

    value: O


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Outcome of an operation that produced an error instead of a value."""

    error: E


Outcome = Union[Success[O], Failure[E]]


def is_success(outcome: "Outcome[O, E]") -> TypeGuard[Success[O]]:
    """Check whether an outcome is a ``Success``."""
    return isinstance(outcome, Success)


def is_failure(outcome: "Outcome[O, E]") -> TypeGuard[Failure[E]]:
    """Check whether an outcome is a ``Failure``."""
    return isinstance(outcome, Failure)


def capture(
    func: Callable[..., O],
    *args: Any,
    catch: Union[Type[BaseException], Tuple[Type[BaseException], ...]] = Exception,
    **kwargs: Any,
) -> "Outcome[O, BaseException]":
    """Call a function and turn its return value or raised exception into an outcome.

    Args:
        func: The callable to invoke.
        *args: Positional arguments forwarded to ``func``.
        catch: Exception type (or tuple of types) converted into a ``Failure``.
            Anything else raised by ``func`` propagates unchanged.
        **kwargs: Keyword arguments forwarded to ``func``.

    Returns:
        ``Success`` wrapping the return value, or ``Failure`` wrapping the caught
        exception.
    """
    try:
        return Success(func(*args, **kwargs))
    except catch as e:
        return Failure(e)


def map_outcomes(
    func: Callable[[T], O],
    items: Iterable[T],
    catch: Union[Type[BaseException], Tuple[Type[BaseException], ...]] = Exception,
) -> Iterator["Outcome[O, BaseException]"]:
    """Lazily apply ``func`` to every item, yielding one outcome per item.

    Nothing is called until the returned generator is consumed, so the result can be
    handed straight to :func:`errorvec.into_errorvec_result`.
    """
    for item in items:
        yield capture(func, item, catch=catch)
