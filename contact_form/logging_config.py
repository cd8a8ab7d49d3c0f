"""
Logging setup for the contact form demo.

Routes the root logger through a rich handler on stderr so log lines do not
interleave with the rendered form on stdout.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=level <= logging.DEBUG,
    )
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler])

    logger = logging.getLogger("contact_form")
    logger.setLevel(level)
    return logger
