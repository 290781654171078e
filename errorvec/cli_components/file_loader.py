import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from errorvec.outcome import Failure, Outcome, Success

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedFile:
    """A file that was read and parsed successfully."""

    path: Path
    data: Any


class LoadError(Exception):
    """Raised (or collected) when a single file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")

    @classmethod
    def from_exception(cls, path: Path, error: Exception) -> "LoadError":
        """Wrap a lower-level exception, keeping it as the cause."""
        if isinstance(error, OSError) and error.strerror:
            reason = error.strerror
        else:
            reason = str(error)
        load_error = cls(path, reason)
        load_error.__cause__ = error
        return load_error


class FileLoader(ABC):
    """Interface for turning one path into an outcome."""

    @abstractmethod
    def load(self, path: Path) -> Outcome[LoadedFile, LoadError]:
        """Load a single file, returning its parsed content or the reason it failed."""
        pass


class YamlFileLoader(FileLoader):
    """
    Loads files with ``yaml.safe_load``.

    Never raises for unreadable or malformed files: those become ``Failure``
    outcomes so a batch of files can be checked without stopping at the first one.
    """

    def load(self, path: Path) -> Outcome[LoadedFile, LoadError]:
        """Read and parse ``path`` as YAML."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.debug(f"Failed to load {path}: {e}")
            return Failure(LoadError.from_exception(path, e))

        logger.debug(f"Loaded {path}")
        return Success(LoadedFile(path=path, data=data))
