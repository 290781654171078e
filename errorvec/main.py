import sys
from pathlib import Path
from typing import List

import typer

from errorvec.cli import CLI, StandardCLI
from errorvec.globals.cli_config import CLIConfig

app = typer.Typer()


@app.command()
def main(
    paths: List[Path] = typer.Argument(..., help="YAML files to check"),
    quiet: bool = typer.Option(default=False, help="Only print errors and the summary"),
    verbose: bool = typer.Option(default=False, help="Enable debug logging"),
):
    """Check YAML files and report every file that fails to load.

    Unlike a fail-fast loop, every path is attempted and all failures are reported
    together, each numbered as ``[error K of N]``.

    Args:
        paths: Files to check, reported in the given order.
        quiet: Whether to hide per-file lines for files that loaded cleanly.
        verbose: Whether to log debug information to stderr.

    Examples:
        Check two files:
            $ errorvec-check a.yml b.yml

        Errors only:
            $ errorvec-check --quiet config/*.yml
    """
    config = CLIConfig(paths=list(paths), quiet=quiet, verbose=verbose)

    cli: CLI = StandardCLI(config)
    exit_code = cli.run()
    sys.exit(exit_code)
