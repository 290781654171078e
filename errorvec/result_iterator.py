"""Drain a sequence of outcomes while gathering every error.

The usual Python pattern stops at the first exception:

    def read_paths_fail_fast(paths):
        return [path.read_text() for path in paths]

When a caller must report every problem in a batch (a compiler reporting all errors
in a project, a linter checking many files) the functions here keep going and hand
back either all values or all errors:

    def read_paths_gathering_all_errors(paths):
        return into_errorvec_result(map_outcomes(Path.read_text, paths, catch=OSError))

Both functions accept any iterable of outcomes, including generators, and consume it
exactly once in order.
"""

import logging
from typing import Iterable, List, Tuple, TypeVar

from errorvec.error_vec import ErrorVec
from errorvec.outcome import Failure, Outcome, Success

logger = logging.getLogger(__name__)

O = TypeVar("O")
E = TypeVar("E")


def into_errorvec_result(outcomes: Iterable[Outcome[O, E]]) -> "Outcome[List[O], ErrorVec[E]]":
    """Gather all values and errors, failing if there is at least one error.

    Args:
        outcomes: Outcomes to drain. Consumed fully before anything is returned.

    Returns:
        ``Success`` with the values in input order when no outcome failed, otherwise
        ``Failure`` with an ``ErrorVec`` holding every error in input order. Values
        gathered alongside errors are discarded.

    Raises:
        TypeError: If an element is neither a ``Success`` nor a ``Failure``.
    """
    values: List[O] = []
    ev: ErrorVec[E] = ErrorVec()

    for outcome in outcomes:
        if isinstance(outcome, Success):
            values.append(outcome.value)
        else:
            ev.take_error(outcome)

    logger.debug(f"Drained {len(values) + len(ev)} outcomes: {len(values)} ok, {len(ev)} failed")
    return ev.into_result(values)


def partition_outcomes(outcomes: Iterable[Outcome[O, E]]) -> Tuple[List[O], List[E]]:
    """Split outcomes into values and raw errors, regardless of whether any failed.

    Returns:
        A ``(values, errors)`` tuple, each list in input order.

    Raises:
        TypeError: If an element is neither a ``Success`` nor a ``Failure``.
    """
    values: List[O] = []
    errors: List[E] = []

    for outcome in outcomes:
        match outcome:
            case Success(value=value):
                values.append(value)
            case Failure(error=error):
                errors.append(error)
            case _:
                raise TypeError(f"Expected Success or Failure, got {type(outcome).__name__}")

    return values, errors
