"""
speechscore.logging - Logging setup for the CLI.

Library code only logs through the "speechscore" logger; the CLI calls
configure_logging() once per command.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("speechscore")

# litellm logs every request at INFO under these names
_LITELLM_LOGGERS = ("LiteLLM", "LiteLLM Router", "LiteLLM Proxy")


def configure_logging(verbose: bool = False) -> None:
    """Set speechscore to DEBUG when verbose, WARNING otherwise.

    litellm's own loggers stay at WARNING unless verbose is set.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    for name in _LITELLM_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
