import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from rich.progress import Progress, SpinnerColumn, TextColumn

from errorvec.cli_components.file_loader import FileLoader, LoadedFile, YamlFileLoader
from errorvec.cli_components.output_formatter import ColoredFormatter, OutputFormatter
from errorvec.error_vec import ErrorVec
from errorvec.globals.cli_config import CLIConfig
from errorvec.outcome import Failure, Success
from errorvec.result_iterator import into_errorvec_result


class CLI(ABC):
    """Interface for CLI implementations."""

    @abstractmethod
    def run(self) -> int:
        """
        Run the CLI and return exit code.

        Returns:
            int: Exit code (0=every file loaded, 1=at least one error)
        """
        pass


class StandardCLI(CLI):
    """
    Checks a batch of files and reports every failure, not just the first.

    Coordinates pluggable components:
    - FileLoader: turns each path into a Success or Failure outcome
    - OutputFormatter: handles display formatting
    """

    def __init__(
        self,
        config: CLIConfig,
        formatter: Optional[OutputFormatter] = None,
        loader: Optional[FileLoader] = None,
    ):
        """
        Initialize CLI with configuration and optional component overrides.

        Args:
            config: CLI configuration (paths, quiet, verbose)
            formatter: Output formatter (defaults to ColoredFormatter)
            loader: File loader (defaults to YamlFileLoader)
        """
        self.config = config
        self.formatter = formatter or ColoredFormatter()
        self.loader = loader or YamlFileLoader()

    def run(self) -> int:
        """Load every configured path and print the aggregated outcome.

        All paths are attempted even after a failure. If none failed, each file is
        listed (unless quiet) followed by a summary. Otherwise the aggregated errors
        are printed in ``[error K of N]`` form followed by a summary.

        Returns:
            int: 0 if every file loaded, 1 otherwise.
        """
        self._setup_logging()

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            description = f"Checking {len(self.config.paths)} files..."
            progress.add_task(description=description, total=None)
            result = into_errorvec_result(self.loader.load(path) for path in self.config.paths)

        match result:
            case Success(value=loaded):
                self._display_loaded(loaded)
                self._display_summary(0)
                return 0
            case Failure(error=errors):
                self._display_errors(errors)
                self._display_summary(len(errors))
                return 1

    def _setup_logging(self) -> None:
        """Enable debug logging for the package when verbose mode is configured."""
        if not self.config.verbose:
            return
        logging.basicConfig(level=logging.DEBUG)
        logging.getLogger("errorvec").setLevel(logging.DEBUG)

    def _display_loaded(self, loaded: List[LoadedFile]) -> None:
        if self.config.quiet:
            return
        for item in loaded:
            print(self.formatter.format_file_ok(item.path))

    def _display_errors(self, errors: ErrorVec) -> None:
        print(self.formatter.format_errors(errors))

    def _display_summary(self, total_errors: int) -> None:
        print(self.formatter.format_summary(len(self.config.paths), total_errors))
