from .entry import cli, main
from .errors import EXIT_FAILURE, EXIT_OK

__all__ = ["EXIT_FAILURE", "EXIT_OK", "cli", "main"]
