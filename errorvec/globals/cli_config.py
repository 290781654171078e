from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass
class CLIConfig:
    """
    Configuration for the ``errorvec-check`` command.

    Attributes:
        paths: Files to load, in the order errors should be reported
        quiet: Whether to hide the per-file line for files that loaded cleanly
        verbose: Whether to enable debug logging
    """

    paths: List[Path] = field(default_factory=list)
    quiet: bool = False
    verbose: bool = False
