from .cli_config import CLIConfig

__all__ = ["CLIConfig"]
