"""Aggregate error container.

``ErrorVec`` holds every error collected while processing a batch, in the order they
occurred. An empty container is the only signal of overall success; a non-empty one
collapses into a single compound failure that renders every contained error for the
user.

Example:
    >>> ev = ErrorVec()
    >>> for outcome in outcomes:
    ...     value = ev.take_error(outcome)
    ...     if value is not None:
    ...         handle(value)
    >>> ev.raise_if_errors()
"""

from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from errorvec.outcome import Failure, Outcome, Success

E = TypeVar("E")
O = TypeVar("O")
P = TypeVar("P")


class ErrorVec(Exception, Generic[E]):
    """Ordered collection of accumulated errors.

    Errors are kept in insertion order and are never deduplicated or reordered.
    Elements may be of any type; rendering with ``str()`` only requires that each
    element can itself be converted with ``str()``.

    ``ErrorVec`` is an ``Exception`` so a non-empty container can be raised directly
    or used as the ``__cause__`` of another exception.

    Consuming operations (``into_result``, ``into_list``, ``raise_if_errors``) move
    the errors out and leave this container empty.
    """

    def __init__(self, errors: Optional[Iterable[E]] = None) -> None:
        """Create a container, empty or holding ``errors`` in their given order.

        Raises:
            TypeError: If ``errors`` is a ``str`` or ``bytes``. Wrap a single message
                in a list instead.
        """
        if isinstance(errors, (str, bytes)):
            raise TypeError(
                f"ErrorVec expects an iterable of errors, not {type(errors).__name__}; "
                "wrap a single error in a list"
            )
        super().__init__()
        self._errors: List[E] = list(errors) if errors is not None else []

    def append(self, error: E) -> None:
        """Add one error to the end of the container."""
        self._errors.append(error)

    def is_empty(self) -> bool:
        """Return whether no errors are held."""
        return not self._errors

    def iter(self) -> Iterator[E]:
        """Iterate over the contained errors in insertion order without consuming them."""
        return iter(self._errors)

    def __iter__(self) -> Iterator[E]:
        return self.iter()

    def __len__(self) -> int:
        return len(self._errors)

    def take_error(self, outcome: Outcome[O, E]) -> Optional[O]:
        """Absorb the error from a single outcome.

        Args:
            outcome: A ``Success`` or ``Failure``.

        Returns:
            The payload of a ``Success`` (container unchanged), or ``None`` after
            appending the error of a ``Failure``. A ``Success`` whose payload is
            ``None`` also returns ``None``; check the outcome itself when that
            distinction matters.

        Raises:
            TypeError: If ``outcome`` is neither a ``Success`` nor a ``Failure``.
        """
        match outcome:
            case Success(value=value):
                return value
            case Failure(error=error):
                self.append(error)
                return None
            case _:
                raise TypeError(f"Expected Success or Failure, got {type(outcome).__name__}")

    def into_result(self, payload: Optional[P] = None) -> "Outcome[Optional[P], ErrorVec[E]]":
        """Collapse the container into a pass/fail outcome.

        Zero accumulated errors is unconditional success, no matter how many items
        were processed.

        Args:
            payload: Value carried by the ``Success`` branch. Defaults to ``None``.

        Returns:
            ``Success(payload)`` if empty, otherwise ``Failure`` carrying an
            ``ErrorVec`` with every accumulated error. The errors are moved out, so
            this container is left empty.
        """
        if self.is_empty():
            return Success(payload)
        return Failure(self._transfer())

    def into_list(self) -> List[E]:
        """Move the errors out into a plain list, leaving this container empty."""
        errors, self._errors = self._errors, []
        return errors

    def raise_if_errors(self) -> None:
        """Raise the accumulated errors as one ``ErrorVec`` if there are any.

        The raised container owns the errors; this one is left empty.
        """
        if not self.is_empty():
            raise self._transfer()

    def _transfer(self) -> "ErrorVec[E]":
        moved: ErrorVec[E] = type(self)()
        moved._errors = self.into_list()
        return moved

    def __str__(self) -> str:
        total = len(self._errors)
        return "\n\n".join(
            f"[error {k} of {total}] {str(error).rstrip()}"
            for k, error in enumerate(self._errors, start=1)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._errors!r})"
