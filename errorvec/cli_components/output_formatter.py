from abc import ABC, abstractmethod
from pathlib import Path

from errorvec.error_vec import ErrorVec


class OutputFormatter(ABC):
    """Interface for formatting CLI output."""

    @abstractmethod
    def format_file_ok(self, file: Path) -> str:
        """Format the line for a file that loaded cleanly."""
        pass

    @abstractmethod
    def format_errors(self, errors: ErrorVec) -> str:
        """Format the aggregated errors of a failed run."""
        pass

    @abstractmethod
    def format_summary(self, total_files: int, total_errors: int) -> str:
        """Format final summary of the run."""
        pass


class ColoredFormatter(OutputFormatter):
    """
    Colored console output formatter.

    The aggregated error block is printed exactly as ``str(ErrorVec)`` renders it,
    without color codes, so tools scraping ``[error K of N]`` lines keep working.
    Only the per-file lines and the summary are colored.
    """

    STYLE = {
        "ok": {"color_bold": "\033[1;92m", "color": "\033[92m", "sign": "✓"},
        "error": {"color_bold": "\033[1;31m", "color": "\033[31m", "sign": "✗"},
    }

    DEF_STYLE = {
        "format_end": "\033[0m",
        "neutral": "\033[2m",
    }

    def format_file_ok(self, file: Path) -> str:
        """Format a dimmed success line for a file."""
        style = self.STYLE["ok"]
        return (
            f'  {style["color"]}{style["sign"]}{self.DEF_STYLE["format_end"]} '
            f'{self.DEF_STYLE["neutral"]}{file}{self.DEF_STYLE["format_end"]}'
        )

    def format_errors(self, errors: ErrorVec) -> str:
        """Return the error rendering unchanged."""
        return str(errors)

    def format_summary(self, total_files: int, total_errors: int) -> str:
        """Format colored summary with counts."""
        style = self.STYLE["error" if total_errors else "ok"]
        return (
            f'\n{style["color_bold"]}{style["sign"]} {total_files} files checked '
            f'({total_errors} errors){self.DEF_STYLE["format_end"]}'
        )
