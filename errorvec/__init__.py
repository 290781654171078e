"""errorvec: gather every error from a batch of fallible operations.

Instead of stopping at the first failure, collect all of them and report them
together. The package provides an ordered error container and functions that drain a
sequence of outcomes into either all values or all errors.

Example:
    Library usage:
        from pathlib import Path
        from errorvec import Failure, into_errorvec_result, map_outcomes

        result = into_errorvec_result(map_outcomes(Path.read_text, paths, catch=OSError))
        if isinstance(result, Failure):
            print(result.error)     # [error 1 of 2] ...
            raise SystemExit(1)
        texts = result.value

    CLI usage:
        $ errorvec-check a.yml b.yml        # Report every file that fails to load
"""

from .error_vec import ErrorVec
from .outcome import Failure, Outcome, Success, capture, is_failure, is_success, map_outcomes
from .result_iterator import into_errorvec_result, partition_outcomes

__all__ = [
    # Core types
    "ErrorVec",
    "Outcome",
    "Success",
    "Failure",
    # Outcome helpers
    "capture",
    "is_failure",
    "is_success",
    "map_outcomes",
    # Draining
    "into_errorvec_result",
    "partition_outcomes",
]
