import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_LOG_FORMAT = "%(message)s"


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """
    Route all tagminer logging through a single RichHandler on stderr.

    Called once by the CLI. Library code only creates module loggers.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=verbose,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=_LOG_FORMAT,
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
