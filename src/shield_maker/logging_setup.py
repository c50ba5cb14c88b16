"""Console logging for the shield-maker host surfaces.

Library modules log through ``logging.getLogger(__name__)`` and never attach
handlers themselves; the CLI opts in here.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from shield_maker.display import err_console

_LOGGER_NAME = "shield_maker"


def configure_logging(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if logger.handlers:
        return logger

    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.debug("logging configured")
    return logger
