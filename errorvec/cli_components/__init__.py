"""CLI components for loading files and formatting output.

These are the collaborators the ``errorvec-check`` command wires together: a loader
producing one outcome per file and a formatter rendering the aggregated result.
"""

from .file_loader import FileLoader, LoadedFile, LoadError, YamlFileLoader
from .output_formatter import ColoredFormatter, OutputFormatter

__all__ = [
    "ColoredFormatter",
    "FileLoader",
    "LoadedFile",
    "LoadError",
    "OutputFormatter",
    "YamlFileLoader",
]
